import structlog

from ..data.repos import add_cards, delete_card, get_card, get_deck, update_card_content

logger = structlog.get_logger()


def add_cards_to_deck(user_id, deck_id, cards: list[dict]):
    """Raises Deck.DoesNotExist when the deck is missing or not the user's."""
    deck = get_deck(user_id, deck_id)
    created = add_cards(deck, cards)
    logger.info("cards_added", user_id=str(user_id), deck_id=str(deck_id), count=len(created))
    return created


def edit_card(user_id, card_id, fields: dict):
    card = get_card(user_id, card_id)
    return update_card_content(card, **fields)


def remove_card(user_id, card_id):
    card = get_card(user_id, card_id)
    delete_card(card)
    logger.info("card_deleted", user_id=str(user_id), card_id=str(card_id))
