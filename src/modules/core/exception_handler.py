"""Error responder for the whole API.

Wired through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  Turns any error
raised while handling a request into ``{"error": message}`` with the
matching status code.  Unexpected exceptions become a 500 and are logged
with their traceback; nothing else is logged above info level.
"""

from __future__ import annotations

from typing import Any, Dict

import structlog
from django.http import Http404, HttpRequest, JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response

from modules.core.exceptions import ApiError

logger = structlog.get_logger(__name__)


def _request_path(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request is not None else ""


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Render ``exc`` as ``{"error": message}``."""
    path = _request_path(context)

    if isinstance(exc, ApiError):
        status_code, message = exc.status_code, exc.message
    elif isinstance(exc, exceptions.MethodNotAllowed):
        status_code = exc.status_code
        message = f"{context['request'].method} not allowed for {path}"
    elif isinstance(exc, Http404):
        status_code, message = status.HTTP_404_NOT_FOUND, f"Path not found: {path}"
    elif isinstance(exc, exceptions.APIException):
        status_code, message = exc.status_code, str(exc.detail)
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = ApiError.default_message

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.exception("request.failed", path=path, exc_info=exc)
    else:
        logger.info(
            "request.rejected", path=path, status_code=status_code, error=message
        )

    return Response({"error": message}, status=status_code)


def not_found(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    """``handler404`` for paths no route matches."""
    return JsonResponse(
        {"error": f"Path not found: {request.path}"},
        status=status.HTTP_404_NOT_FOUND,
    )
