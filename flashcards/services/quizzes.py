from django.utils import timezone
import structlog

from gamification.services.ledger import record_quiz_completion
from ..data.repos import get_deck

logger = structlog.get_logger()


def complete_quiz(user_id, deck_id, score: int, total: int, timezone_offset: int = 0, now=None):
    """
    Credit a finished quiz over one of the user's decks.
    Raises Deck.DoesNotExist if the deck is not the user's.
    """
    now = now or timezone.now()
    get_deck(user_id, deck_id)
    logger.info("quiz_completed", user_id=str(user_id), deck_id=str(deck_id), score=score, total=total)
    return record_quiz_completion(user_id, deck_id, total, now, timezone_offset)
