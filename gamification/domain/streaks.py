"""Day-streak rules.

Only weekdays count: a streak survives a weekend without activity, but a
single skipped Monday-to-Friday day resets it. All dates are plain
``datetime.date`` values already shifted into the user's local day.
"""
from dataclasses import dataclass
from datetime import date, timedelta

ONE_DAY = timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5  # Saturday, Sunday


def should_break_streak(last_activity_date: date | None, today: date) -> bool:
    if last_activity_date is None:
        return False
    if last_activity_date == today or last_activity_date == today - ONE_DAY:
        return False

    day = last_activity_date + ONE_DAY
    while day < today:
        if not is_weekend(day):
            return True
        day += ONE_DAY
    return False


@dataclass(frozen=True)
class StreakProgress:
    current_streak: int
    longest_streak: int
    streak_start_date: date | None
    last_activity_date: date
    updated: bool


def advance_streak(current_streak: int, longest_streak: int, last_activity_date: date | None,
                   streak_start_date: date | None, today: date) -> StreakProgress:
    """Streak state after an activity on ``today``."""
    if should_break_streak(last_activity_date, today):
        current, start, updated = 1, today, True
    elif last_activity_date != today:
        current, start, updated = current_streak + 1, streak_start_date or today, True
    else:
        current, start, updated = current_streak, streak_start_date, False

    return StreakProgress(
        current_streak=current,
        longest_streak=max(longest_streak, current),
        streak_start_date=start,
        last_activity_date=today,
        updated=updated,
    )
