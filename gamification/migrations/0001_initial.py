import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DailyActivity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("activity_date", models.DateField()),
                ("xp_earned", models.PositiveIntegerField(default=0)),
                ("tasks_completed", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["-activity_date"],
                "unique_together": {("user_id", "activity_date")},
            },
        ),
        migrations.CreateModel(
            name="GamificationCredit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("item_type", models.CharField(max_length=32)),
                ("item_id", models.CharField(max_length=64)),
                ("xp_awarded", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "item_type", "created_at"], name="credit_user_type_created_idx")],
                "constraints": [models.UniqueConstraint(fields=("user_id", "item_type", "item_id"), name="uq_credit_user_item")],
            },
        ),
        migrations.CreateModel(
            name="MonthlyXpTotal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("college_id", models.UUIDField()),
                ("year_month", models.CharField(max_length=7)),
                ("total_xp", models.PositiveIntegerField(default=0)),
            ],
            options={
                "indexes": [models.Index(fields=["year_month", "college_id"], name="monthly_month_college_idx")],
                "unique_together": {("user_id", "year_month")},
            },
        ),
        migrations.CreateModel(
            name="UserStreak",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField(unique=True)),
                ("current_streak", models.PositiveIntegerField(default=0)),
                ("longest_streak", models.PositiveIntegerField(default=0)),
                ("last_activity_date", models.DateField(blank=True, null=True)),
                ("streak_start_date", models.DateField(blank=True, null=True)),
                ("total_xp", models.PositiveIntegerField(default=0)),
                ("vacation_mode", models.BooleanField(default=False)),
                ("vacation_started_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "constraints": [models.CheckConstraint(condition=models.Q(("longest_streak__gte", models.F("current_streak"))), name="streak_longest_gte_current")],
            },
        ),
    ]
