"""Raw frame -> decoded object -> identified shape -> validated outcome."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pubsub_dialect.application.dto.outcome import Outcome
from pubsub_dialect.application.exceptions import NoMatchingSchemaError, ParseError
from pubsub_dialect.domain.registry import DIALECT, Dialect
from pubsub_dialect.domain.shapes.constraints import as_int
from pubsub_dialect.services.identifier import identify
from pubsub_dialect.services.validator import check

logger = logging.getLogger(__name__)

_JSON_KINDS = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _correlation(obj: Any) -> tuple[int | None, str | None]:
    if not isinstance(obj, Mapping):
        return None, None
    seq = as_int(obj.get("seq"))
    action = obj.get("action")
    if not isinstance(action, str):
        action = None
    return seq, action


def _no_match(obj: Any) -> NoMatchingSchemaError:
    if not isinstance(obj, Mapping):
        kind = _JSON_KINDS.get(type(obj), type(obj).__name__)
        return NoMatchingSchemaError(f"frame is a JSON {kind}, not an object")
    detail = f"no shape registered for action {obj.get('action')!r}"
    if obj.get("code") is not None:
        detail += f" with code {obj['code']!r}"
    return NoMatchingSchemaError(detail)


def auto_validate(obj: Any, dialect: Dialect = DIALECT) -> Outcome:
    seq, action = _correlation(obj)

    shape = identify(obj, dialect)
    if shape is None:
        logger.debug("No shape for frame (seq=%s action=%s)", seq, action)
        return Outcome(is_valid=False, seq=seq, action=action, error=_no_match(obj))

    result = check(obj, shape)
    if not result.ok:
        logger.debug(
            "Frame failed %s (seq=%s action=%s): %s",
            shape.__name__, seq, action, result.error,
        )
    return Outcome(
        is_valid=result.ok,
        seq=seq,
        action=action,
        value=result.value,
        model=result.model,
        shape=shape,
        error=result.error,
    )


def parse_and_auto_validate(text: str | bytes | bytearray, dialect: Dialect = DIALECT) -> Outcome:
    try:
        obj = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Unparseable frame: %s", exc)
        return Outcome(is_valid=False, error=ParseError(str(exc)))
    return auto_validate(obj, dialect)


def is_valid(obj: Any, dialect: Dialect = DIALECT) -> bool:
    return auto_validate(obj, dialect).is_valid
