import uuid

import pytest
import structlog
from django.urls import reverse
from structlog.testing import capture_logs

from flashcards.api import views as flashcard_views
from gamification.api import views as gamification_views


@pytest.fixture
def fresh_loggers(monkeypatch):
    # Uncached proxies so capture_logs sees every event
    monkeypatch.setattr(flashcard_views, "base_logger", structlog.get_logger())
    monkeypatch.setattr(gamification_views, "base_logger", structlog.get_logger())


def request_ids(logs, event):
    return [e.get("request_id") for e in logs if e["event"] == event]


@pytest.mark.django_db
def test_read_views_bind_request_id(client, fresh_loggers):
    user_id = str(uuid.uuid4())

    with capture_logs() as logs:
        client.post(reverse("answer-check"), data={"input": "a", "reference": "a"},
                    content_type="application/json")
        client.get(reverse("gamification-summary", kwargs={"user_id": user_id}))
        client.get(reverse("daily-progress", kwargs={"user_id": user_id}))
        client.get(reverse("college-leaderboard"))

    for event in (
        "answer_check_api_response",
        "summary_api_response",
        "daily_progress_api_response",
        "college_leaderboard_api_response",
    ):
        ids = request_ids(logs, event)
        assert len(ids) == 1, event
        uuid.UUID(ids[0])


@pytest.mark.django_db
def test_each_request_gets_its_own_id(client, fresh_loggers):
    with capture_logs() as logs:
        for _ in range(2):
            client.get(reverse("college-leaderboard"))

    first, second = request_ids(logs, "college_leaderboard_api_response")
    assert first != second
