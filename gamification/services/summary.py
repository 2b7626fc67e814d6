from django.db import transaction
from django.utils import timezone
import structlog

from ..config import DEFAULT_DAILY_GOAL, ITEM_TYPE_FLASHCARD, RECENT_ACTIVITY_DAYS
from ..data.repos import (
    count_credits_since,
    get_or_create_streak_for_update,
    monthly_college_totals,
    recent_activity,
    save_streak,
)
from ..domain.levels import calculate_xp_stats
from ..domain.streaks import should_break_streak
from ..utils.time import local_midnight_utc, local_today

logger = structlog.get_logger()


def get_summary(user_id, timezone_offset: int = 0, now=None) -> dict:
    """Streak, XP and the last week of activity for one user.

    A streak whose continuity already broke is reset to zero here, so the
    number shown is right even before the user's next review.
    """
    now = now or timezone.now()
    today = local_today(now, timezone_offset)

    with transaction.atomic():
        streak = get_or_create_streak_for_update(user_id)
        if (not streak.vacation_mode and streak.current_streak > 0
                and should_break_streak(streak.last_activity_date, today)):
            logger.info("streak_expired",
                user_id=str(user_id),
                streak=streak.current_streak,
                last_activity_date=streak.last_activity_date.isoformat(),
                local_date=today.isoformat(),
            )
            streak.current_streak = 0
            streak.streak_start_date = None
            save_streak(streak, ["current_streak", "streak_start_date"])

    activity = recent_activity(user_id, RECENT_ACTIVITY_DAYS)
    return {
        "streak": {
            "current_streak": streak.current_streak,
            "longest_streak": streak.longest_streak,
            "last_activity_date": _iso(streak.last_activity_date),
            "streak_start_date": _iso(streak.streak_start_date),
            "total_xp": streak.total_xp,
            "vacation_mode": streak.vacation_mode,
            "vacation_started_at": _iso(streak.vacation_started_at),
        },
        "xp": calculate_xp_stats(streak.total_xp),
        "recent_activity": [
            {
                "date": a.activity_date.isoformat(),
                "xp_earned": a.xp_earned,
                "tasks_completed": a.tasks_completed,
            }
            for a in activity
        ],
    }


def set_vacation_mode(user_id, enabled: bool, now=None):
    now = now or timezone.now()
    with transaction.atomic():
        streak = get_or_create_streak_for_update(user_id)
        streak.vacation_mode = enabled
        streak.vacation_started_at = now if enabled else None
        save_streak(streak, ["vacation_mode", "vacation_started_at"])

    logger.info("vacation_mode_changed", user_id=str(user_id), enabled=enabled)
    return streak


def daily_progress(user_id, timezone_offset: int = 0, daily_goal: int = DEFAULT_DAILY_GOAL, now=None) -> dict:
    if daily_goal < 1:
        raise ValueError(f"daily_goal must be at least 1, got {daily_goal}")
    now = now or timezone.now()
    since = local_midnight_utc(now, timezone_offset)
    studied = count_credits_since(user_id, ITEM_TYPE_FLASHCARD, since)
    return {
        "cards_studied_today": studied,
        "daily_goal": daily_goal,
        "progress": min(100, int(studied * 100 / daily_goal + 0.5)),
        "goal_reached": studied >= daily_goal,
    }


def college_leaderboard(year_month: str, college_id=None) -> list[dict]:
    return [
        {
            "rank": rank,
            "college_id": str(row["college_id"]),
            "total_xp": row["xp"] or 0,
            "user_count": row["user_count"],
            "is_user_college": college_id is not None and row["college_id"] == college_id,
        }
        for rank, row in enumerate(monthly_college_totals(year_month), start=1)
    ]


def _iso(value):
    return value.isoformat() if value else None
