"""Helpers shared by the JSON views."""
from __future__ import annotations

import json

from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from campus.exceptions import RequestValidationError


def read_json(request) -> dict:
    """Decode a JSON object body; an empty body is treated as ``{}``."""

    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (TypeError, ValueError) as exc:
        raise RequestValidationError(message="Request body is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise RequestValidationError(message="Request body must be a JSON object.")
    return payload


def validated(form):
    """Return ``form.cleaned_data`` or raise with the form's field errors."""

    if not form.is_valid():
        raise RequestValidationError(form.errors.get_json_data())
    return form.cleaned_data


@method_decorator(csrf_exempt, name="dispatch")
class JsonView(View):
    """Base class for API views; token auth lives outside this service."""

    http_method_names = ["get", "post", "put", "patch", "delete", "options"]
