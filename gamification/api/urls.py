from django.urls import path
from .views import CollegeLeaderboardView, DailyProgressView, SummaryView, VacationModeView

urlpatterns = [
    path("users/<uuid:user_id>/gamification", SummaryView.as_view(), name="gamification-summary"),
    path("users/<uuid:user_id>/vacation-mode", VacationModeView.as_view(), name="vacation-mode"),
    path("users/<uuid:user_id>/daily-progress", DailyProgressView.as_view(), name="daily-progress"),
    path("leaderboard/colleges", CollegeLeaderboardView.as_view(), name="college-leaderboard"),
]
