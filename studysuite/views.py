from rest_framework import status, viewsets
from rest_framework.decorators import api_view, action
from rest_framework.response import Response
from django.core.management import call_command
from django.core.management.base import CommandError
import structlog

logger = structlog.get_logger()


@api_view(["POST"])
def initialize_data(request):
    file_name = request.data.get("file", "demo_data.json")
    logger.info("initialize_data_requested", file=file_name)
    try:
        call_command("init_data", file=file_name)
    except CommandError as e:
        return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(
        {"message": f"Data initialized successfully from {file_name}"},
        status=status.HTTP_200_OK,
    )


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the logged-in user's id, username and college.
        """
        if request.user.is_authenticated:
            return Response(
                {
                    "id": str(request.user.id),
                    "username": request.user.username,
                    "college_id": str(request.user.college_id) if request.user.college_id else None,
                },
                status=status.HTTP_200_OK,
            )
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
