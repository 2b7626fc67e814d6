from rest_framework import serializers

from ..config import MIN_EASE_FACTOR
from ..data.models import Card

TIMEZONE_OFFSET_LIMIT = 14 * 60


class ReviewInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    card_id = serializers.UUIDField()
    quality = serializers.IntegerField()  # clamped to 0..5, never rejected
    timezone_offset = serializers.IntegerField(
        default=0, min_value=-TIMEZONE_OFFSET_LIMIT, max_value=TIMEZONE_OFFSET_LIMIT
    )


class DueQuerySerializer(serializers.Serializer):
    until = serializers.DateTimeField()  # ISO-8601


class UserQuerySerializer(serializers.Serializer):
    user_id = serializers.UUIDField()


class AnswerCheckSerializer(serializers.Serializer):
    input = serializers.CharField(allow_blank=True, trim_whitespace=False)
    reference = serializers.CharField(allow_blank=True, trim_whitespace=False)


class DeckInSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    course_id = serializers.UUIDField(required=False, allow_null=True)

    def validate_description(self, value):
        return value or None


class DeckUpdateSerializer(DeckInSerializer):
    name = serializers.CharField(max_length=200, required=False)


class CardInSerializer(serializers.Serializer):
    front = serializers.CharField()
    back = serializers.CharField()
    # Only set when importing cards that already have review history
    interval = serializers.IntegerField(min_value=0, required=False)
    ease_factor = serializers.FloatField(min_value=MIN_EASE_FACTOR, required=False)
    repetitions = serializers.IntegerField(min_value=0, required=False)
    next_review = serializers.DateTimeField(required=False)


class CardsCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    deck_id = serializers.UUIDField()
    cards = CardInSerializer(many=True, allow_empty=False)


class CardUpdateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    front = serializers.CharField(required=False)
    back = serializers.CharField(required=False)


class QuizCompleteSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    deck_id = serializers.UUIDField()
    score = serializers.IntegerField(min_value=0)
    total = serializers.IntegerField(min_value=0)
    timezone_offset = serializers.IntegerField(
        default=0, min_value=-TIMEZONE_OFFSET_LIMIT, max_value=TIMEZONE_OFFSET_LIMIT
    )

    def validate(self, attrs):
        if attrs["score"] > attrs["total"]:
            raise serializers.ValidationError({"score": "Score cannot exceed total."})
        return attrs


class CardOutSerializer(serializers.ModelSerializer):
    deck_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Card
        fields = ["id", "deck_id", "front", "back", "interval", "ease_factor", "repetitions", "next_review"]
