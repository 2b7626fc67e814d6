from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count, F, Sum

from .models import DailyActivity, GamificationCredit, MonthlyXpTotal, UserStreak


def find_credit(user_id, item_type, item_id):
    return GamificationCredit.objects.filter(
        user_id=user_id, item_type=item_type, item_id=str(item_id)
    ).first()


def get_streak(user_id):
    return UserStreak.objects.filter(user_id=user_id).first()


def get_or_create_streak_for_update(user_id):
    """
    Lock the user's streak row, creating it with zeroed defaults if missing.
    Holding this lock serializes every XP write of one user.
    Must run inside an atomic block.
    """
    try:
        return UserStreak.objects.select_for_update().get(user_id=user_id)
    except UserStreak.DoesNotExist:
        pass
    try:
        with transaction.atomic():
            UserStreak.objects.create(user_id=user_id)
    except IntegrityError:
        # Another request created it first
        pass
    return UserStreak.objects.select_for_update().get(user_id=user_id)


def insert_credit(user_id, item_type, item_id, xp, created_at):
    """
    Insert the ledger entry for an item. If a concurrent writer inserted it
    first, the unique constraint rejects ours and the existing row is
    returned with created=False.
    """
    try:
        with transaction.atomic():
            return GamificationCredit.objects.create(
                user_id=user_id, item_type=item_type, item_id=str(item_id),
                xp_awarded=xp, created_at=created_at,
            ), True
    except IntegrityError:
        return find_credit(user_id, item_type, item_id), False


def save_streak(streak, fields):
    streak.save(update_fields=[*fields, "updated_at"])
    return streak


def add_daily_xp(user_id, activity_date, xp):
    row, created = DailyActivity.objects.get_or_create(
        user_id=user_id, activity_date=activity_date, defaults={"xp_earned": xp}
    )
    if not created:
        DailyActivity.objects.filter(pk=row.pk).update(xp_earned=F("xp_earned") + xp)


def get_college_id(user_id):
    User = get_user_model()
    return User.objects.filter(pk=user_id).values_list("college_id", flat=True).first()


def add_monthly_xp(user_id, college_id, year_month, xp):
    row, created = MonthlyXpTotal.objects.get_or_create(
        user_id=user_id, year_month=year_month,
        defaults={"college_id": college_id, "total_xp": xp},
    )
    if not created:
        MonthlyXpTotal.objects.filter(pk=row.pk).update(total_xp=F("total_xp") + xp)


def count_credits_since(user_id, item_type, since):
    return GamificationCredit.objects.filter(
        user_id=user_id, item_type=item_type, created_at__gte=since
    ).count()


def recent_activity(user_id, limit):
    return list(DailyActivity.objects.filter(user_id=user_id).order_by("-activity_date")[:limit])


def monthly_college_totals(year_month):
    return list(
        MonthlyXpTotal.objects.filter(year_month=year_month)
        .values("college_id")
        .annotate(xp=Sum("total_xp"), user_count=Count("user_id"))
        .order_by("-xp", "college_id")
    )
