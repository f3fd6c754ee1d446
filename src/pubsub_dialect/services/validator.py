from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pydantic

from pubsub_dialect.application.dto.outcome import ValidationResult
from pubsub_dialect.application.exceptions import (
    FieldViolation,
    NoMatchingSchemaError,
    ValidationError,
)
from pubsub_dialect.config import settings
from pubsub_dialect.domain.shapes.base import Shape

ResultCallback = Callable[[ValidationResult], Any]


def _violations(exc: pydantic.ValidationError) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    for err in exc.errors(include_url=False):
        field = ".".join(str(part) for part in err["loc"]) or "(root)"
        value_type = "missing" if err["type"] == "missing" else type(err.get("input")).__name__
        violations.append(
            FieldViolation(
                field=field,
                constraint=err["type"],
                message=err["msg"],
                value_type=value_type,
            )
        )
    return violations


def check(obj: Any, shape: type[Shape] | None, *, strict: bool | None = None) -> ValidationResult:
    if shape is None:
        return ValidationResult(ok=False, error=NoMatchingSchemaError("no shape to validate against"))
    if strict is None:
        strict = settings.STRICT_TYPES
    try:
        model = shape.model_validate(obj, strict=strict)
    except pydantic.ValidationError as exc:
        return ValidationResult(ok=False, error=ValidationError(_violations(exc)))
    return ValidationResult(
        ok=True,
        value=model.model_dump(exclude_unset=True),
        model=model,
    )


def validate(
    obj: Any,
    shape: type[Shape] | None,
    callback: ResultCallback | None = None,
    *,
    strict: bool | None = None,
) -> ValidationResult:
    """Validate ``obj`` against ``shape``, collecting every field violation.

    ``callback``, when given, receives the same result that is returned.
    """
    result = check(obj, shape, strict=strict)
    if callback is not None:
        callback(result)
    return result
