from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pubsub_dialect.application.exceptions import DialectError
from pubsub_dialect.domain.shapes.base import Shape


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    value: dict[str, Any] | None = None
    model: Shape | None = None
    error: DialectError | None = None


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of auto-validating one frame.

    ``seq`` and ``action`` are filled in whenever the frame decoded to an
    object carrying them, valid or not, so callers can correlate failures.
    """

    is_valid: bool
    seq: int | None = None
    action: str | None = None
    value: dict[str, Any] | None = None
    model: Shape | None = None
    shape: type[Shape] | None = None
    error: DialectError | None = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
