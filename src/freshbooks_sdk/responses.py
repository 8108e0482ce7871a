"""
Helpers for reading FreshBooks response bodies.

FreshBooks wraps accounting results as ``{"response": {"result": {...}}}`` and
reports failures in one of three shapes:

- accounting: ``{"response": {"errors": [{"errno", "field", "message", "object", "value"}]}}``
- newer APIs: ``{"message": "...", "code": ..., "details": [...]}``
- OAuth: ``{"error": "invalid_grant", "error_description": "..."}``
"""

from http import HTTPStatus
from typing import Any
from typing import Optional

from freshbooks_sdk.exceptions import FieldError
from freshbooks_sdk.transport.base import TransportResponse


def read_json(response: TransportResponse) -> Optional[Any]:
    """Return the parsed body, or None when it is empty or not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def unwrap_envelope(data: Any) -> Any:
    """Strip the ``response`` / ``result`` envelope when present."""
    if isinstance(data, dict) and isinstance(data.get("response"), dict):
        data = data["response"]
    if isinstance(data, dict) and isinstance(data.get("result"), dict):
        data = data["result"]
    return data


def _error_entries(data: Any) -> list[dict]:
    if not isinstance(data, dict):
        return []
    body = data.get("response") if isinstance(data.get("response"), dict) else data
    errors = body.get("errors")
    if isinstance(errors, list):
        return [entry for entry in errors if isinstance(entry, dict)]
    details = body.get("details")
    if isinstance(details, list):
        return [entry for entry in details if isinstance(entry, dict)]
    return []


def error_code(data: Any) -> Optional[int]:
    for entry in _error_entries(data):
        if isinstance(entry.get("errno"), int):
            return entry["errno"]
    if isinstance(data, dict) and isinstance(data.get("code"), int):
        return data["code"]
    return None


def error_message(response: TransportResponse, data: Any) -> str:
    """Best available human-readable message for a failed response."""
    if isinstance(data, dict):
        for key in ("error_description", "message", "error"):
            if isinstance(data.get(key), str) and data[key]:
                return data[key]
        messages = [
            entry["message"]
            for entry in _error_entries(data)
            if isinstance(entry.get("message"), str)
        ]
        if messages:
            return "; ".join(messages)
    if response.text:
        return response.text
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return f"HTTP {response.status_code}"


def field_errors(data: Any) -> list[FieldError]:
    """Field-level errors, i.e. the error entries that name a field."""
    result = []
    for entry in _error_entries(data):
        field = entry.get("field")
        if not field:
            continue
        result.append(
            FieldError(
                field=field,
                message=str(entry.get("message", "")),
                errno=entry.get("errno") if isinstance(entry.get("errno"), int) else None,
                object=entry.get("object"),
                value=entry.get("value"),
            )
        )
    return result
