"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import datetime, timezone
from typing import Optional

from ..config.game_settings import FIRST_DAY


def current_day(now: Optional[datetime] = None) -> int:
    """
    Day number of the daily puzzle: whole UTC days elapsed since FIRST_DAY.

    Args:
        now: Moment to compute the day for; defaults to the current time.
             Naive datetimes are taken to be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    today = now.astimezone(timezone.utc).date()
    return (today - FIRST_DAY.date()).days
