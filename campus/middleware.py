"""Middleware translating domain and datastore errors into JSON responses."""
from __future__ import annotations

import logging

from django.db import DatabaseError
from django.http import JsonResponse

from campus.exceptions import CampusError

logger = logging.getLogger(__name__)


class CampusErrorMiddleware:
    """Render ``CampusError`` rejections and datastore failures as JSON."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, CampusError):
            logger.info(
                "Rejected %s %s: %s (%s)",
                request.method,
                request.path,
                exception.code,
                exception.message,
            )
            return JsonResponse(exception.as_payload(), status=exception.status_code)

        if isinstance(exception, DatabaseError):
            # Surfaced as-is; mutating operations are never retried here.
            logger.exception("Datastore failure while handling %s %s", request.method, request.path)
            return JsonResponse(
                {"code": "internal", "message": "The request failed due to a datastore error."},
                status=500,
            )
        return None
