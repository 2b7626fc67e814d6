from django.utils import timezone
from rest_framework import views, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
import structlog
import uuid
from studysuite.permissions import check_acting_user
from ..data.models import Card, Deck
from ..data.repos import due_card_ids, get_deck, ordered_cards
from ..domain.enums import STATUS_LABELS, quality_label
from ..domain.matching import match_answer
from ..domain.scheduling import clamp_quality
from ..domain.status import classify
from ..services.cards import add_cards_to_deck, edit_card, remove_card
from ..services.decks import create_deck, edit_deck, get_deck_stats, get_user_decks, remove_deck, summarize_deck
from ..services.quizzes import complete_quiz
from ..services.reviews import review_card
from ..utils.time import format_next_review
from .serializers import (
    AnswerCheckSerializer,
    CardOutSerializer,
    CardsCreateSerializer,
    CardUpdateSerializer,
    DeckInSerializer,
    DeckUpdateSerializer,
    DueQuerySerializer,
    QuizCompleteSerializer,
    ReviewInSerializer,
    UserQuerySerializer,
)

base_logger = structlog.get_logger()


def card_payload(card, now):
    card_status = classify(card, now)
    return {
        **CardOutSerializer(card).data,
        "status": card_status.value,
        "status_label": STATUS_LABELS[card_status],
        "next_review_label": format_next_review(card.next_review, now),
    }


def credit_status(result):
    return status.HTTP_200_OK if result.already_credited else status.HTTP_201_CREATED


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        user_id = s.validated_data["user_id"]
        card_id = s.validated_data["card_id"]
        quality = s.validated_data["quality"]
        offset = s.validated_data["timezone_offset"]
        check_acting_user(request, user_id)

        now = timezone.now()
        try:
            card, result = review_card(user_id, card_id, quality, offset, now)
        except Card.DoesNotExist:
            logger.info("review_card_not_found", user_id=str(user_id), card_id=str(card_id))
            raise NotFound("Card not found")

        status_code = credit_status(result)

        logger.info(
            "review_api_response",
            user_id=str(user_id),
            card_id=str(card_id),
            quality=quality,
            interval_days=card.interval,
            xp_earned=result.xp_earned,
            already_credited=result.already_credited,
            status=status_code,
        )

        return Response(
            {
                "card": card_payload(card, now),
                "quality_label": quality_label(clamp_quality(quality)),
                "gamification": result.as_dict(),
            },
            status=status_code,
        )


class DueCardsView(views.APIView):
    def get(self, request, user_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data["until"]
        check_acting_user(request, user_id)

        results = [str(card_id) for card_id in due_card_ids(user_id, until)]

        logger.info(
            "due_cards_api_response",
            user_id=str(user_id),
            until_utc=until.isoformat(),
            card_count=len(results),
        )

        return Response(
            {
                "user_id": str(user_id),
                "until_utc": until.isoformat(),
                "card_ids": results,
            }
        )


class DeckListView(views.APIView):
    def get(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = UserQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        user_id = qs.validated_data["user_id"]
        check_acting_user(request, user_id)

        decks = get_user_decks(user_id)
        logger.info("deck_list_api_response", user_id=str(user_id), deck_count=len(decks))
        return Response({"decks": decks})

    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = DeckInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = dict(s.validated_data)
        user_id = data.pop("user_id")
        check_acting_user(request, user_id)

        deck = create_deck(user_id, **data)
        logger.info("deck_create_api_response", user_id=str(user_id), deck_id=deck["id"])
        return Response({"deck": deck}, status=status.HTTP_201_CREATED)


class DeckDetailView(views.APIView):
    def get(self, request, deck_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = UserQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        user_id = qs.validated_data["user_id"]
        check_acting_user(request, user_id)

        now = timezone.now()
        try:
            deck = get_deck(user_id, deck_id)
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")
        cards = ordered_cards(deck)

        logger.info("deck_detail_api_response", user_id=str(user_id), deck_id=str(deck_id), card_count=len(cards))
        return Response(
            {
                "deck": {
                    **summarize_deck(deck, cards, now),
                    "cards": [card_payload(card, now) for card in cards],
                }
            }
        )

    def patch(self, request, deck_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = DeckUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        fields = dict(s.validated_data)
        user_id = fields.pop("user_id")
        check_acting_user(request, user_id)

        try:
            deck = edit_deck(user_id, deck_id, fields)
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")

        logger.info("deck_update_api_response", user_id=str(user_id), deck_id=str(deck_id), fields=sorted(fields))
        return Response({"deck": deck})

    def delete(self, request, deck_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = UserQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        user_id = qs.validated_data["user_id"]
        check_acting_user(request, user_id)

        try:
            remove_deck(user_id, deck_id)
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")

        logger.info("deck_delete_api_response", user_id=str(user_id), deck_id=str(deck_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class DeckStatsView(views.APIView):
    def get(self, request, deck_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = UserQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        user_id = qs.validated_data["user_id"]
        check_acting_user(request, user_id)

        try:
            stats = get_deck_stats(user_id, deck_id)
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")

        logger.info("deck_stats_api_response", user_id=str(user_id), deck_id=str(deck_id), total=stats["total"])
        return Response(stats)


class CardListView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = CardsCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user_id = s.validated_data["user_id"]
        deck_id = s.validated_data["deck_id"]
        check_acting_user(request, user_id)

        now = timezone.now()
        try:
            cards = add_cards_to_deck(user_id, deck_id, s.validated_data["cards"])
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")

        logger.info("card_create_api_response", user_id=str(user_id), deck_id=str(deck_id), count=len(cards))
        return Response(
            {"cards": [card_payload(card, now) for card in cards], "count": len(cards)},
            status=status.HTTP_201_CREATED,
        )


class CardDetailView(views.APIView):
    def patch(self, request, card_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = CardUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        fields = dict(s.validated_data)
        user_id = fields.pop("user_id")
        check_acting_user(request, user_id)

        try:
            card = edit_card(user_id, card_id, fields)
        except Card.DoesNotExist:
            raise NotFound("Card not found")

        logger.info("card_update_api_response", user_id=str(user_id), card_id=str(card_id))
        return Response({"card": card_payload(card, timezone.now())})

    def delete(self, request, card_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = UserQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        user_id = qs.validated_data["user_id"]
        check_acting_user(request, user_id)

        try:
            remove_card(user_id, card_id)
        except Card.DoesNotExist:
            raise NotFound("Card not found")

        logger.info("card_delete_api_response", user_id=str(user_id), card_id=str(card_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class QuizCompleteView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = QuizCompleteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user_id = s.validated_data["user_id"]
        deck_id = s.validated_data["deck_id"]
        check_acting_user(request, user_id)

        try:
            result = complete_quiz(
                user_id, deck_id,
                s.validated_data["score"], s.validated_data["total"],
                s.validated_data["timezone_offset"],
            )
        except Deck.DoesNotExist:
            raise NotFound("Deck not found")

        status_code = credit_status(result)
        logger.info(
            "quiz_complete_api_response",
            user_id=str(user_id),
            deck_id=str(deck_id),
            xp_earned=result.xp_earned,
            already_credited=result.already_credited,
            status=status_code,
        )
        return Response({"gamification": result.as_dict()}, status=status_code)


class AnswerCheckView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = AnswerCheckSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        result = match_answer(s.validated_data["input"], s.validated_data["reference"])
        logger.info("answer_check_api_response", is_correct=result.is_correct, similarity=result.similarity)
        return Response({"is_correct": result.is_correct, "similarity": result.similarity})
