import uuid

from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASE_FACTOR


class Deck(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField()
    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    course_id = models.UUIDField(null=True, blank=True)
    last_studied_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "flashcards"
        indexes = [
            models.Index(fields=["user_id", "updated_at"], name="deck_user_updated_idx"),
        ]

    def __str__(self):
        return self.name


class Card(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    deck = models.ForeignKey(Deck, on_delete=models.CASCADE, related_name="cards")
    front = models.TextField()
    back = models.TextField()
    # Scheduling state, written only by services.reviews
    interval = models.PositiveIntegerField(default=0)  # days
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    repetitions = models.PositiveIntegerField(default=0)
    next_review = models.DateTimeField(default=timezone.now)  # UTC
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "flashcards"
        indexes = [
            models.Index(fields=["deck", "next_review"], name="card_deck_next_review_idx"),
        ]
