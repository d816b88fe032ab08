"""Skill Tracker: practice-time ledger with mastery levels."""
