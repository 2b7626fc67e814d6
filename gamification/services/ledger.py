from django.db import DatabaseError, transaction
from django.utils import timezone
import structlog

from ..config import (
    FLASHCARD_XP,
    ITEM_TYPE_FLASHCARD,
    ITEM_TYPE_QUIZ,
    QUIZ_MAX_PAID_QUESTIONS,
    XP_PER_QUESTION,
)
from ..data.repos import (
    add_daily_xp,
    add_monthly_xp,
    find_credit,
    get_college_id,
    get_or_create_streak_for_update,
    get_streak,
    insert_credit,
    save_streak,
)
from ..domain.levels import calculate_level
from ..domain.results import RecordResult
from ..domain.streaks import advance_streak
from ..utils.time import local_today, year_month

logger = structlog.get_logger()


def record_review(user_id, item_id, now_utc=None, timezone_offset: int = 0,
                  level_for=calculate_level) -> RecordResult:
    """
    Pay FLASHCARD_XP for a reviewed card and advance the user's day-streak.

    A card pays out at most once per user, ever. Repeated or concurrent calls
    for the same (user_id, item_id) come back with already_credited=True and
    leave every counter untouched.
    """
    return _credit(user_id, ITEM_TYPE_FLASHCARD, str(item_id), FLASHCARD_XP,
                   now_utc, timezone_offset, level_for)


def record_quiz_completion(user_id, deck_id, total: int, now_utc=None, timezone_offset: int = 0,
                           level_for=calculate_level) -> RecordResult:
    """
    Pay for a finished quiz over a deck: XP_PER_QUESTION for each question,
    counting at least 1 and at most QUIZ_MAX_PAID_QUESTIONS. One payout per
    deck per local day.
    """
    now_utc = now_utc or timezone.now()
    today = local_today(now_utc, timezone_offset)
    xp = max(1, min(total, QUIZ_MAX_PAID_QUESTIONS)) * XP_PER_QUESTION
    return _credit(user_id, ITEM_TYPE_QUIZ, f"quiz-{deck_id}-{today.isoformat()}", xp,
                   now_utc, timezone_offset, level_for)


def _credit(user_id, item_type, item_id, xp, now_utc, timezone_offset, level_for) -> RecordResult:
    now_utc = now_utc or timezone.now()
    log = logger.bind(user_id=str(user_id), item_type=item_type, item_id=item_id)

    # Fast path: nothing to lock if the item has paid out before
    if find_credit(user_id, item_type, item_id):
        streak = get_streak(user_id)
        current, total_xp = (streak.current_streak, streak.total_xp) if streak else (0, 0)
        log.info("already_credited", current_streak=current)
        return RecordResult.credited_before(current, level_for(total_xp))

    today = local_today(now_utc, timezone_offset)

    with transaction.atomic():
        streak = get_or_create_streak_for_update(user_id)

        _, created = insert_credit(user_id, item_type, item_id, xp, now_utc)
        if not created:
            # Lost the race against a concurrent credit of the same item
            log.info("credit_conflict", current_streak=streak.current_streak)
            return RecordResult.credited_before(streak.current_streak, level_for(streak.total_xp))

        previous_xp = streak.total_xp
        streak.total_xp = previous_xp + xp
        fields = ["total_xp"]
        streak_updated = False

        if not streak.vacation_mode:
            progress = advance_streak(
                streak.current_streak, streak.longest_streak,
                streak.last_activity_date, streak.streak_start_date, today,
            )
            streak.current_streak = progress.current_streak
            streak.longest_streak = progress.longest_streak
            streak.streak_start_date = progress.streak_start_date
            streak.last_activity_date = progress.last_activity_date
            streak_updated = progress.updated
            fields += ["current_streak", "longest_streak", "streak_start_date", "last_activity_date"]

        save_streak(streak, fields)
        add_daily_xp(user_id, today, xp)
        _add_monthly_xp(user_id, now_utc, xp, log)

    previous_level = level_for(previous_xp)
    new_level = level_for(streak.total_xp)

    log.info("xp_credited",
        xp=xp,
        total_xp=streak.total_xp,
        vacation_mode=streak.vacation_mode,
        streak=streak.current_streak,
        streak_updated=streak_updated,
        local_date=today.isoformat(),
        level=new_level,
    )

    return RecordResult(
        xp_earned=xp,
        streak_updated=streak_updated,
        new_streak=streak.current_streak,
        already_credited=False,
        level_up=new_level > previous_level,
        new_level=new_level,
    )


def _add_monthly_xp(user_id, now_utc, xp, log):
    # College leaderboard rollup; users without a college are skipped
    month = year_month(now_utc)
    try:
        with transaction.atomic():
            college_id = get_college_id(user_id)
            if college_id is None:
                return
            add_monthly_xp(user_id, college_id, month, xp)
    except DatabaseError:
        log.warning("monthly_rollup_failed", year_month=month, exc_info=True)
