from django.utils import timezone
from rest_framework import views
from rest_framework.response import Response
import structlog
import uuid
from studysuite.permissions import check_acting_user
from ..data.repos import get_college_id
from ..services.summary import college_leaderboard, daily_progress, get_summary, set_vacation_mode
from ..utils.time import year_month
from .serializers import (
    DailyProgressQuerySerializer,
    LeaderboardQuerySerializer,
    TimezoneQuerySerializer,
    VacationModeSerializer,
)

base_logger = structlog.get_logger()


class SummaryView(views.APIView):
    def get(self, request, user_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = TimezoneQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        check_acting_user(request, user_id)

        summary = get_summary(user_id, qs.validated_data["tz"])
        logger.info(
            "summary_api_response",
            user_id=str(user_id),
            current_streak=summary["streak"]["current_streak"],
            total_xp=summary["streak"]["total_xp"],
        )
        return Response(summary)


class VacationModeView(views.APIView):
    def patch(self, request, user_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = VacationModeSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        check_acting_user(request, user_id)

        streak = set_vacation_mode(user_id, s.validated_data["vacation_mode"])
        logger.info("vacation_mode_api_response", user_id=str(user_id), enabled=streak.vacation_mode)
        return Response(
            {
                "vacation_mode": streak.vacation_mode,
                "vacation_started_at": (
                    streak.vacation_started_at.isoformat() if streak.vacation_started_at else None
                ),
            }
        )


class DailyProgressView(views.APIView):
    def get(self, request, user_id):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DailyProgressQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        check_acting_user(request, user_id)

        progress = daily_progress(user_id, qs.validated_data["tz"], qs.validated_data["goal"])
        logger.info(
            "daily_progress_api_response",
            user_id=str(user_id),
            cards_studied_today=progress["cards_studied_today"],
            goal_reached=progress["goal_reached"],
        )
        return Response(progress)


class CollegeLeaderboardView(views.APIView):
    def get(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = LeaderboardQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        month = qs.validated_data.get("month") or year_month(timezone.now())
        user_id = qs.validated_data.get("user_id")
        college_id = get_college_id(user_id) if user_id else None
        leaderboard = college_leaderboard(month, college_id)

        logger.info("college_leaderboard_api_response", year_month=month, college_count=len(leaderboard))
        return Response(
            {
                "month": month,
                "user_college_id": str(college_id) if college_id else None,
                "leaderboard": leaderboard,
            }
        )
