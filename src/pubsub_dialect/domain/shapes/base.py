"""Base classes for message shapes."""
from __future__ import annotations

import typing
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, create_model, field_validator

from pubsub_dialect.domain.shapes.constraints import (
    Sequence,
    StatusDetails,
    StatusMessage,
    whole_number,
)
from pubsub_dialect.domain.value_objects.enums import Action, StatusCode


class Shape(BaseModel):
    """A closed field-set; unknown keys are violations."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    @field_validator("code", mode="before", check_fields=False)
    @classmethod
    def whole_code(cls, value: Any) -> Any:
        return whole_number(value)


class RequestShape(Shape):
    """Client -> Server."""

    seq: Sequence
    action: str


class ResponseShape(Shape):
    """Server -> Client, answering the request with the same ``seq``."""

    seq: Sequence
    action: str
    code: int


class StatusShape(ResponseShape):
    message: StatusMessage
    details: StatusDetails = ""


def literal_of(shape: type[Shape], field: str) -> Any | None:
    """Return the single value a ``Literal[...]`` field admits, else None."""
    info = shape.model_fields.get(field)
    if info is None or typing.get_origin(info.annotation) is not Literal:
        return None
    values = typing.get_args(info.annotation)
    return values[0] if len(values) == 1 else None


def status_shape(action: Action, code: StatusCode) -> type[StatusShape]:
    """Build the ``message``/``details`` error shape for one action and code."""
    name = "".join(part.title() for part in action.value.split("-"))
    name += "".join(part.title() for part in code.name.split("_"))
    return create_model(
        name,
        __base__=StatusShape,
        __module__=__name__,
        action=(Literal[action.value], ...),
        code=(Literal[code.value], ...),
    )
