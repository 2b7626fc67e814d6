from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import UserViewSet, initialize_data

router = DefaultRouter(trailing_slash=False)
router.register("users", UserViewSet, basename="user")

urlpatterns = [
    path("api/", include("flashcards.api.urls")),
    path("api/", include("gamification.api.urls")),
    path("api/", include(router.urls)),
    path("api/initialize-data", initialize_data, name="initialize-data"),
]
