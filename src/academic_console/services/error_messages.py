"""Pick the most specific user-facing message out of a failed API call."""

from typing import Any, Optional

from .api_client import ApiError


def _field_errors(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    messages = []
    for entry in errors:
        if isinstance(entry, dict):
            text = entry.get("msg") or entry.get("message")
        else:
            text = entry
        if text:
            messages.append(str(text))
    if not messages:
        return None
    return f"Validation errors: {', '.join(messages)}"


def _general_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def extract_error_message(error: BaseException, fallback: str) -> str:
    """
    Resolve the message shown for a failed operation.

    Priority: backend field errors ({errors: [{msg}]}) > backend {message}
    > transport error description > fallback.
    """
    payload = error.payload if isinstance(error, ApiError) else None

    message = _field_errors(payload) or _general_message(payload)
    if message:
        return message

    transport = error.message if isinstance(error, ApiError) else str(error)
    if transport and transport.strip():
        return transport.strip()
    return fallback
