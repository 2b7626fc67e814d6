from django.conf import settings
from django.contrib.auth import login
from django.core.exceptions import ValidationError
from django.http import HttpResponse

from studysuite.models import User

import logging

logger = logging.getLogger(__name__)


# Development stand-in for a real login flow
class HeaderLoginMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if settings.HEADER_LOGIN_ENABLED and request.path.startswith("/api"):
            lookup = self._lookup(request)
            if lookup:
                logger.info("Header login for %s", lookup)
                try:
                    user = User.objects.get(**lookup)
                except (User.DoesNotExist, ValidationError):
                    return HttpResponse(
                        "User not found or invalid credentials.", status=401
                    )
                login(request, user)
        response = self.get_response(request)
        return response

    @staticmethod
    def _lookup(request):
        user_id = request.headers.get("X-User-ID")
        if user_id:
            return {"pk": user_id}
        username = request.headers.get("X-User-NAME")
        if username:
            return {"username": username}
        return None
