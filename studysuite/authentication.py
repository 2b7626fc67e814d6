from rest_framework import authentication


class MiddlewareUserAuthentication(authentication.BaseAuthentication):
    """
    Trust the user that HeaderLoginMiddleware already attached to the
    underlying Django request. No CSRF check: the API is header driven.
    """

    def authenticate(self, request):
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated or not user.is_active:
            return None
        return (user, None)
