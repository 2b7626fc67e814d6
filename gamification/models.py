# Django discovers models through this module
from .data.models import DailyActivity, GamificationCredit, MonthlyXpTotal, UserStreak  # noqa: F401
