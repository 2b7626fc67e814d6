from datetime import datetime

from ..config import MASTERED_INTERVAL_DAYS
from .enums import CardStatus
from .scheduling import round_half_up


def classify(card, now: datetime) -> CardStatus:
    if card.next_review <= now:
        return CardStatus.DUE
    if card.repetitions == 0:
        return CardStatus.LEARNING
    if card.interval >= MASTERED_INTERVAL_DAYS:
        return CardStatus.MASTERED
    return CardStatus.REVIEWING


def deck_stats(cards, now: datetime) -> dict:
    """Aggregate status counts for a set of cards.

    Always recomputed from the cards themselves; nothing here is cached.
    """
    counts = {status.value: 0 for status in CardStatus}
    for card in cards:
        counts[classify(card, now).value] += 1

    total = sum(counts.values())
    mastery = round_half_up(100 * counts[CardStatus.MASTERED.value] / total) if total else 0
    return {"total": total, **counts, "mastery_percentage": mastery}
