import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Student account. The UUID primary key is the user_id every study and
    gamification record refers to; college_id scopes the monthly leaderboard.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    college_id = models.UUIDField(null=True, blank=True)
