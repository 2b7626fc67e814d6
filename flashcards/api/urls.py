from django.urls import path
from .views import (
    AnswerCheckView,
    CardDetailView,
    CardListView,
    DeckDetailView,
    DeckListView,
    DeckStatsView,
    DueCardsView,
    QuizCompleteView,
    ReviewView,
)

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("users/<uuid:user_id>/due-cards", DueCardsView.as_view(), name="due-cards"),
    path("decks", DeckListView.as_view(), name="deck-list"),
    path("decks/<uuid:deck_id>", DeckDetailView.as_view(), name="deck-detail"),
    path("decks/<uuid:deck_id>/stats", DeckStatsView.as_view(), name="deck-stats"),
    path("cards", CardListView.as_view(), name="card-list"),
    path("cards/<uuid:card_id>", CardDetailView.as_view(), name="card-detail"),
    path("quizzes/complete", QuizCompleteView.as_view(), name="quiz-complete"),
    path("answers/check", AnswerCheckView.as_view(), name="answer-check"),
]
