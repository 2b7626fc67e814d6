from django.conf import settings
from rest_framework.exceptions import NotAuthenticated, PermissionDenied


def check_acting_user(request, user_id):
    """
    A logged-in caller may only read or write their own data. Anonymous
    callers pass unless API_REQUIRE_LOGIN is set.
    """
    user = request.user
    if not user.is_authenticated:
        if settings.API_REQUIRE_LOGIN:
            raise NotAuthenticated()
        return
    if str(user.pk) != str(user_id):
        raise PermissionDenied("Cannot act on behalf of another user")
