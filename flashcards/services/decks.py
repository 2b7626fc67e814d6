from django.utils import timezone
import structlog

from ..data.repos import (
    create_deck_with_cards,
    deck_cards,
    delete_deck,
    get_deck,
    list_decks,
    update_deck,
)
from ..domain.status import deck_stats

logger = structlog.get_logger()


def get_deck_stats(user_id, deck_id, now=None) -> dict:
    now = now or timezone.now()
    deck = get_deck(user_id, deck_id)
    return {
        "deck_id": str(deck.id),
        "name": deck.name,
        **deck_stats(deck_cards(deck), now),
    }


def summarize_deck(deck, cards, now) -> dict:
    """Deck fields plus status counts derived from its cards."""
    return {
        "id": str(deck.id),
        "name": deck.name,
        "description": deck.description,
        "course_id": str(deck.course_id) if deck.course_id else None,
        "last_studied_at": deck.last_studied_at.isoformat() if deck.last_studied_at else None,
        "created_at": deck.created_at.isoformat(),
        "updated_at": deck.updated_at.isoformat(),
        "stats": deck_stats(cards, now),
    }


def get_user_decks(user_id, now=None) -> list[dict]:
    now = now or timezone.now()
    return [summarize_deck(deck, deck.cards.all(), now) for deck in list_decks(user_id)]


def create_deck(user_id, name, description=None, course_id=None, now=None):
    now = now or timezone.now()
    deck = create_deck_with_cards(user_id, name, [], description=description, course_id=course_id)
    logger.info("deck_created", user_id=str(user_id), deck_id=str(deck.id))
    return summarize_deck(deck, [], now)


def edit_deck(user_id, deck_id, fields: dict, now=None):
    """Raises Deck.DoesNotExist for a missing or foreign deck."""
    now = now or timezone.now()
    deck = get_deck(user_id, deck_id)
    if fields:
        update_deck(deck, **fields)
    return summarize_deck(deck, deck_cards(deck), now)


def remove_deck(user_id, deck_id):
    deck = get_deck(user_id, deck_id)
    delete_deck(deck)
    logger.info("deck_deleted", user_id=str(user_id), deck_id=str(deck_id))
