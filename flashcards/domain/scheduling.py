"""SM-2 style review scheduling.

Ease and interval grow multiplicatively while a card keeps passing and
collapse back to a one day interval on a lapse.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..config import (
    DEFAULT_EASE_FACTOR,
    FIRST_INTERVAL_DAYS,
    LAPSE_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    PASSING_QUALITY,
    SECOND_INTERVAL_DAYS,
)


@dataclass(frozen=True)
class CardState:
    interval: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR
    repetitions: int = 0
    next_review: datetime | None = None

    @classmethod
    def of(cls, card) -> "CardState":
        return cls(
            interval=card.interval,
            ease_factor=card.ease_factor,
            repetitions=card.repetitions,
            next_review=card.next_review,
        )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, int(quality)))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    miss = MAX_QUALITY - quality
    ease = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return round(max(MIN_EASE_FACTOR, ease), 2)


def schedule(state: CardState, quality: int, now: datetime) -> CardState:
    """Return the scheduling state after rating a card with ``quality``.

    Ratings outside 0..5 are clamped, so this never fails.
    """
    quality = clamp_quality(quality)
    ease = next_ease_factor(state.ease_factor, quality)

    if quality < PASSING_QUALITY:
        repetitions = 0
        interval = LAPSE_INTERVAL_DAYS
    else:
        repetitions = state.repetitions + 1
        if repetitions == 1:
            interval = FIRST_INTERVAL_DAYS
        elif repetitions == 2:
            interval = SECOND_INTERVAL_DAYS
        else:
            interval = max(1, round_half_up(state.interval * ease))

    return CardState(
        interval=interval,
        ease_factor=ease,
        repetitions=repetitions,
        next_review=now + timedelta(days=interval),
    )
