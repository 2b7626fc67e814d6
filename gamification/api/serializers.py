from rest_framework import serializers

from ..config import DEFAULT_DAILY_GOAL


class TimezoneQuerySerializer(serializers.Serializer):
    # minutes behind UTC, as reported by the browser
    tz = serializers.IntegerField(default=0, min_value=-14 * 60, max_value=14 * 60)


class DailyProgressQuerySerializer(TimezoneQuerySerializer):
    goal = serializers.IntegerField(default=DEFAULT_DAILY_GOAL, min_value=1)


class VacationModeSerializer(serializers.Serializer):
    vacation_mode = serializers.BooleanField()


class LeaderboardQuerySerializer(serializers.Serializer):
    month = serializers.RegexField(r"^\d{4}-(0[1-9]|1[0-2])$", required=False)
    user_id = serializers.UUIDField(required=False)
