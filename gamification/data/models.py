from django.db import models
from django.utils import timezone


class UserStreak(models.Model):
    user_id = models.UUIDField(unique=True)
    current_streak = models.PositiveIntegerField(default=0)
    longest_streak = models.PositiveIntegerField(default=0)
    last_activity_date = models.DateField(null=True, blank=True)  # user's local day
    streak_start_date = models.DateField(null=True, blank=True)
    total_xp = models.PositiveIntegerField(default=0)
    vacation_mode = models.BooleanField(default=False)
    vacation_started_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "gamification"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(longest_streak__gte=models.F("current_streak")),
                name="streak_longest_gte_current",
            ),
        ]


class GamificationCredit(models.Model):
    """A source item that has already paid out XP. Never updated or deleted."""

    user_id = models.UUIDField()
    item_type = models.CharField(max_length=32)
    item_id = models.CharField(max_length=64)
    xp_awarded = models.PositiveIntegerField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "gamification"
        constraints = [
            models.UniqueConstraint(
                fields=["user_id", "item_type", "item_id"], name="uq_credit_user_item"
            ),
        ]
        indexes = [
            models.Index(fields=["user_id", "item_type", "created_at"], name="credit_user_type_created_idx"),
        ]


class DailyActivity(models.Model):
    user_id = models.UUIDField()
    activity_date = models.DateField()
    xp_earned = models.PositiveIntegerField(default=0)
    tasks_completed = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "gamification"
        unique_together = (("user_id", "activity_date"),)
        ordering = ["-activity_date"]


class MonthlyXpTotal(models.Model):
    user_id = models.UUIDField()
    college_id = models.UUIDField()
    year_month = models.CharField(max_length=7)  # YYYY-MM
    total_xp = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "gamification"
        unique_together = (("user_id", "year_month"),)
        indexes = [
            models.Index(fields=["year_month", "college_id"], name="monthly_month_college_idx"),
        ]
