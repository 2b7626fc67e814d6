from django.db import transaction
from django.utils import timezone

from ..domain.scheduling import CardState
from .models import Card, Deck


def get_card_for_update(user_id, card_id):
    """
    Lock the card row so only one rating is applied at a time.
    Raises Card.DoesNotExist when the card is missing or its deck
    belongs to someone else. Must run inside an atomic block.
    """
    return (Card.objects
            .select_for_update()
            .select_related("deck")
            .get(pk=card_id, deck__user_id=user_id))


def save_schedule(card, state: CardState, studied_at):
    card.interval = state.interval
    card.ease_factor = state.ease_factor
    card.repetitions = state.repetitions
    card.next_review = state.next_review
    card.save(update_fields=["interval", "ease_factor", "repetitions", "next_review", "updated_at"])
    Deck.objects.filter(pk=card.deck_id).update(last_studied_at=studied_at)
    return card


def get_deck(user_id, deck_id):
    return Deck.objects.get(pk=deck_id, user_id=user_id)


def deck_cards(deck):
    return list(deck.cards.only("id", "interval", "ease_factor", "repetitions", "next_review"))


def due_card_ids(user_id, until):
    return list(
        Card.objects.filter(deck__user_id=user_id, next_review__lte=until)
        .order_by("next_review")
        .values_list("id", flat=True)
    )


def create_deck_with_cards(user_id, name, cards, description=None, course_id=None):
    with transaction.atomic():
        deck = Deck.objects.create(
            user_id=user_id, name=name, description=description, course_id=course_id
        )
        Card.objects.bulk_create(
            [Card(deck=deck, front=c["front"], back=c["back"]) for c in cards]
        )
    return deck


def list_decks(user_id):
    return list(
        Deck.objects.filter(user_id=user_id)
        .prefetch_related("cards")
        .order_by("-updated_at")
    )


def update_deck(deck, **fields):
    for name, value in fields.items():
        setattr(deck, name, value)
    deck.save(update_fields=[*fields, "updated_at"])
    return deck


def delete_deck(deck):
    # cards go with it
    deck.delete()


def add_cards(deck, cards):
    """
    Bulk insert cards into a deck. Scheduling fields present on an entry
    (an import from elsewhere) are kept; the rest start as new cards.
    """
    with transaction.atomic():
        created = Card.objects.bulk_create([Card(deck=deck, **c) for c in cards])
        Deck.objects.filter(pk=deck.pk).update(updated_at=timezone.now())
    return created


def get_card(user_id, card_id):
    return Card.objects.select_related("deck").get(pk=card_id, deck__user_id=user_id)


def update_card_content(card, **fields):
    # Only front/back; scheduling state is written by save_schedule
    for name in ("front", "back"):
        if name in fields:
            setattr(card, name, fields[name])
    card.save(update_fields=["front", "back", "updated_at"])
    return card


def delete_card(card):
    card.delete()


def ordered_cards(deck):
    return list(deck.cards.order_by("created_at", "id"))
