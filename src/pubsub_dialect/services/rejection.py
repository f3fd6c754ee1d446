"""Responses a transport sends back for frames that failed auto-validation."""
from __future__ import annotations

from typing import Any

from pubsub_dialect.application.dto.outcome import Outcome
from pubsub_dialect.application.exceptions import DialectError, ValidationError
from pubsub_dialect.config import settings
from pubsub_dialect.domain.value_objects.enums import Action, StatusCode


def _reason(code: int) -> str:
    if code == StatusCode.BAD_REQUEST:
        return settings.BAD_REQUEST_MESSAGE
    if code == StatusCode.INTERNAL_ERROR:
        return settings.INTERNAL_ERROR_MESSAGE
    raise ValueError(f"no general response for code {code!r}")


def describe(error: DialectError | None) -> str:
    if error is None:
        return ""
    if isinstance(error, ValidationError):
        limit = settings.MAX_DETAIL_VIOLATIONS
        shown = "; ".join(str(v) for v in error.violations[:limit])
        hidden = len(error.violations) - limit
        return f"{shown} (+{hidden} more)" if hidden > 0 else shown
    return error.detail


def rejection_for(outcome: Outcome, code: int = StatusCode.BAD_REQUEST) -> dict[str, Any]:
    """Build the error response for an invalid ``outcome``.

    Frames whose ``seq`` or ``action`` could not be recovered get an
    ``invalid-request`` envelope; everything else gets the general 400/500
    shape echoing ``seq`` and ``action``. The envelope is always a 400,
    whatever ``code`` asks for, since ``invalid-request`` has no other shape.
    """
    if outcome.is_valid:
        raise ValueError("outcome is valid, nothing to reject")
    message = _reason(code)
    details = describe(outcome.error)

    if outcome.seq is None or not outcome.action:
        response: dict[str, Any] = {
            "action": Action.INVALID_REQUEST.value,
            "code": int(StatusCode.BAD_REQUEST),
            "message": settings.BAD_REQUEST_MESSAGE,
            "details": details,
        }
        if outcome.seq is not None:
            response["seq"] = outcome.seq
        return response

    return {
        "seq": outcome.seq,
        "action": outcome.action,
        "code": int(code),
        "message": message,
        "details": details,
    }
