# backend/exception_handler.py

"""
PATH: backend/exception_handler.py

API EXCEPTION HANDLER

DRF handles its own exceptions (auth -> 401, validation -> 400, 404, 405...).
Anything else escaping a view is an unexpected store/code failure:
- logged server-side with traceback
- returned to the caller as a generic 500 (no internals leaked)
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    request = context.get("request")
    logger.exception(
        "Unhandled API error",
        extra={
            "view": view.__class__.__name__ if view is not None else "",
            "method": getattr(request, "method", ""),
            "path": getattr(request, "path", ""),
        },
    )
    return Response(
        {"detail": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
