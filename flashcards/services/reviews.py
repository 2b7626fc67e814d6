from django.db import transaction
from django.utils import timezone
import structlog

from gamification.services.ledger import record_review
from ..data.repos import get_card_for_update, save_schedule
from ..domain.scheduling import CardState, clamp_quality, schedule

logger = structlog.get_logger()


def review_card(user_id, card_id, quality: int, timezone_offset: int = 0, now=None):
    """
    Apply one rating to a card, then credit the review on the user's ledger.
    Raises Card.DoesNotExist if the card is not in one of the user's decks.
    """
    now = now or timezone.now()
    clamped = clamp_quality(quality)
    logger.info("review_received",
        user_id=str(user_id),
        card_id=str(card_id),
        quality=quality,
        clamped=clamped != quality,
    )

    # Serialize rating updates per card
    with transaction.atomic():
        card = get_card_for_update(user_id, card_id)
        previous = CardState.of(card)
        state = schedule(previous, clamped, now)
        save_schedule(card, state, now)

    logger.info("review_scheduled",
        user_id=str(user_id),
        card_id=str(card_id),
        repetitions=state.repetitions,
        ease_factor=state.ease_factor,
        interval_days=state.interval,
        previous_interval_days=previous.interval,
        next_review_utc=state.next_review.isoformat(),
    )

    result = record_review(user_id, card_id, now, timezone_offset)
    return card, result
