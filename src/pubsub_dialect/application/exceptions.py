from __future__ import annotations

from dataclasses import dataclass


class DialectError(Exception):
    """Base dialect error. Returned as data by the pipeline, never raised by it."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class ParseError(DialectError):
    pass


class NoMatchingSchemaError(DialectError):
    pass


@dataclass(frozen=True, slots=True)
class FieldViolation:
    field: str
    constraint: str
    message: str
    value_type: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (got {self.value_type})"


class ValidationError(DialectError):
    def __init__(self, violations: list[FieldViolation], detail: str = "") -> None:
        self.violations = tuple(violations)
        super().__init__(detail or "; ".join(str(v) for v in self.violations))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(v.field for v in self.violations)
