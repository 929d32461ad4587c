from rest_framework import status, viewsets
from rest_framework.decorators import api_view, action
from rest_framework.response import Response
from django.core.management import call_command
import structlog

logger = structlog.get_logger()


@api_view(["POST"])
def initialize_data(request):
    file_name = request.data.get("file")
    try:
        logger.info("demo_data_initializing", file=file_name)
        if file_name:
            call_command("init_data", file=file_name)
        else:
            call_command("init_data")
        return Response(
            {"message": f"Data initialized successfully from {file_name or 'built-in words'}"},
            status=status.HTTP_200_OK,
        )
    except Exception as e:
        logger.exception("demo_data_failed", file=file_name)
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the logged-in learner and the wordlists they own.
        """
        if request.user.is_authenticated:
            wordlists = [
                {"id": wl.id, "name": wl.name, "word_count": wl.entries.count()}
                for wl in request.user.wordlists.order_by("created_at", "id")
            ]
            return Response(
                {"username": request.user.username, "wordlists": wordlists},
                status=status.HTTP_200_OK,
            )
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
