"""Command-line interface for logging practice time without the API server."""

from __future__ import annotations

import logging

import click

from skill_tracker.config import settings, tracker_config
from skill_tracker.services.ledger import InvalidInputError, TimeLedger
from skill_tracker.services.mastery import MASTERY_LEVELS
from skill_tracker.services.progress import history_items, summarize_skill
from skill_tracker.services.storage import JsonFileStore, create_store
from skill_tracker.utils.time_format import format_duration


@click.group()
@click.option(
    "--skills-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this JSON file instead of the configured store",
)
@click.pass_context
def main(ctx: click.Context, skills_file: str | None) -> None:
    """Skill Tracker utilities"""
    logging.basicConfig(level=settings.log_level)
    store = JsonFileStore(skills_file) if skills_file else create_store(settings)
    ctx.obj = TimeLedger(store)


@main.command("add")
@click.argument("name")
@click.pass_obj
def add(ledger: TimeLedger, name: str) -> None:
    """Start tracking a new skill."""
    try:
        skill = ledger.create_skill(name)
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Added skill #{skill.id}: {skill.name}")


@main.command("log")
@click.argument("skill_id", type=int)
@click.argument("amount", type=float)
@click.argument(
    "unit",
    type=click.Choice(["hours", "minutes"]),
    default=tracker_config.default_unit,
)
@click.pass_obj
def log(ledger: TimeLedger, skill_id: int, amount: float, unit: str) -> None:
    """Log practice time against a skill."""
    try:
        skill = ledger.log_time(skill_id, amount, unit)
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc

    summary = summarize_skill(skill)
    click.echo(f"{summary.name}: {summary.hours_display} logged ({summary.mastery_title})")
    if summary.next_level:
        remaining = format_duration(summary.next_level.hours_remaining)
        click.echo(f"Next: {summary.next_level.title} in {remaining}")


@main.command("list")
@click.pass_obj
def list_skills(ledger: TimeLedger) -> None:
    """Show every skill with its mastery level and progress."""
    if not ledger.skills:
        click.echo("No skills yet. Add one with: skill-tracker add <name>")
        return
    for skill in ledger.skills:
        summary = summarize_skill(skill)
        click.echo(
            f"#{summary.id} {summary.name}: {summary.hours_display} "
            f"- {summary.mastery_title} ({summary.progress_percent:.0f}%)"
        )


@main.command("history")
@click.argument("skill_id", type=int)
@click.pass_obj
def history(ledger: TimeLedger, skill_id: int) -> None:
    """Show a skill's practice history, most recent first."""
    try:
        entries = ledger.history(skill_id)
    except InvalidInputError as exc:
        raise click.ClickException(str(exc)) from exc

    if not entries:
        click.echo("No history recorded yet")
        return
    for item in history_items(entries):
        click.echo(
            f"{item.timestamp_display}  +{item.hours_added_display}  "
            f"(total {item.total_hours_display})"
        )


@main.command("levels")
def levels() -> None:
    """Show the mastery level thresholds."""
    for level in MASTERY_LEVELS:
        click.echo(f"{level.hours:>7g} h  {level.title}")


if __name__ == "__main__":
    main()
