from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..domain.errors import (
    Forbidden,
    InvalidInput,
    NotFound,
    PersistenceFailure,
    SchedulerError,
)

logger = structlog.get_logger()

STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Forbidden: status.HTTP_403_FORBIDDEN,
    PersistenceFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
}

def scheduler_exception_handler(exc, context):
    """Map scheduler errors onto HTTP responses, defer everything else to DRF."""
    if not isinstance(exc, SchedulerError):
        return exception_handler(exc, context)

    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    view = context.get("view")
    logger.warning("scheduler_error",
        code=exc.code,
        status=status_code,
        view=type(view).__name__ if view else None,
        error=exc.message,
    )
    return Response(
        {"success": False, "error": exc.message, "code": exc.code},
        status=status_code,
    )
