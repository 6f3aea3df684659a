"""Map errors to ``{"message": ...}`` responses.

Internal error details are never exposed: domain errors carry user-safe
messages, everything else falls back to DRF's own status and detail.
"""

from typing import Any

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.response import Response
from rest_framework.views import exception_handler

from club_events.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """DRF exception handler answering with a `{"message": ...}` body.

    Returns None for exceptions DRF does not handle, so Django treats them as
    server errors.
    """
    if isinstance(exc, DomainError):
        return Response({"message": exc.message}, status=STATUS_BY_CODE[exc.code])

    if isinstance(exc, (NotAuthenticated, PermissionDenied)):
        return Response({"message": "Forbidden"}, status=status.HTTP_403_FORBIDDEN)

    response = exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, "detail", None)
        response.data = {"message": str(detail) if isinstance(detail, str) else "Invalid request"}
    return response
