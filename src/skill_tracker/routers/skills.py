"""Skills API router - create, log time, list, detail, history and chart endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from skill_tracker.schemas.progress import ChartPoint, HistoryItem, MasteryLevel, SkillSummary
from skill_tracker.schemas.skill import SkillCreate
from skill_tracker.schemas.time_log import TimeLogRequest
from skill_tracker.services.ledger import InvalidInputError, SkillNotFoundError, TimeLedger
from skill_tracker.services.mastery import MASTERY_LEVELS
from skill_tracker.services.progress import chart_data, history_items, summarize_skill

router = APIRouter()


def get_ledger(request: Request) -> TimeLedger:
    """
    Dependency returning the ledger owned by the application.

    Returns:
        The TimeLedger created at startup
    """
    return request.app.state.ledger


def _not_found(exc: SkillNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


@router.get("/skills", response_model=list[SkillSummary])
def list_skills(ledger: TimeLedger = Depends(get_ledger)) -> list[SkillSummary]:
    """
    List all tracked skills.

    Returns:
        Skill cards in creation order.
    """
    return [summarize_skill(skill) for skill in ledger.skills]


@router.post("/skills", response_model=SkillSummary, status_code=status.HTTP_201_CREATED)
def create_skill(
    skill_create: SkillCreate,
    ledger: TimeLedger = Depends(get_ledger),
) -> SkillSummary:
    """
    Start tracking a new skill.

    Args:
        skill_create: Name of the skill.

    Returns:
        The new, empty skill card.

    Raises:
        HTTPException 422: If the name is empty.
    """
    try:
        skill = ledger.create_skill(skill_create.name)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return summarize_skill(skill)


@router.get("/skills/{skill_id}", response_model=SkillSummary)
def get_skill(skill_id: int, ledger: TimeLedger = Depends(get_ledger)) -> SkillSummary:
    """
    Get one skill card.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        skill = ledger.get_skill(skill_id)
    except SkillNotFoundError as exc:
        raise _not_found(exc) from exc
    return summarize_skill(skill)


@router.post("/skills/{skill_id}/log", response_model=SkillSummary)
def log_time(
    skill_id: int,
    time_log: TimeLogRequest,
    ledger: TimeLedger = Depends(get_ledger),
) -> SkillSummary:
    """
    Log practice time against a skill.

    Args:
        skill_id: The numeric ID of the skill.
        time_log: Amount and unit of practice time.

    Returns:
        Updated skill card.

    Raises:
        HTTPException 404: If the skill is not found.
        HTTPException 422: If the amount or unit is invalid.
    """
    try:
        skill = ledger.log_time(skill_id, time_log.amount, time_log.unit)
    except SkillNotFoundError as exc:
        raise _not_found(exc) from exc
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return summarize_skill(skill)


@router.get("/skills/{skill_id}/history", response_model=list[HistoryItem])
def get_history(skill_id: int, ledger: TimeLedger = Depends(get_ledger)) -> list[HistoryItem]:
    """
    Get a skill's practice history, most recent first.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        entries = ledger.history(skill_id)
    except SkillNotFoundError as exc:
        raise _not_found(exc) from exc
    return history_items(entries)


@router.get("/chart", response_model=list[ChartPoint])
def get_chart(ledger: TimeLedger = Depends(get_ledger)) -> list[ChartPoint]:
    """Hours per skill for the progress chart."""
    return chart_data(ledger.skills)


@router.get("/mastery-levels", response_model=list[MasteryLevel])
def list_mastery_levels() -> list[MasteryLevel]:
    """The mastery threshold table, lowest level first."""
    return list(MASTERY_LEVELS)
