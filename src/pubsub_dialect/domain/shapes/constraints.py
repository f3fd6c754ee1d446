"""Field-level constraint primitives shared by every message shape.

Each primitive is an ``Annotated`` alias, so a shape declares a field as
``channel: Channel`` and pydantic applies the constraint.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, StringConstraints

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

# Reduced-precision calendar dates: YYYY and YYYY-MM.
_REDUCED_DATE = re.compile(r"[0-9]{4}(-(0[1-9]|1[0-2]))?")

CHANNEL_MAX_LENGTH = 128


def as_int(value: Any) -> int | None:
    """Read a JSON number as an integer; None for anything else.

    JSON has one number type, so ``401.0`` is the integer 401.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def whole_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_iso8601(value: str) -> str:
    # The raw text is kept so the normalized value mirrors the frame.
    if _REDUCED_DATE.fullmatch(value):
        return value
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("must be an ISO-8601 timestamp") from None
    return value


Sequence = Annotated[int, BeforeValidator(whole_number)]

AnyAction = Annotated[str, StringConstraints(min_length=1)]

Channel = Annotated[str, StringConstraints(min_length=1, max_length=CHANNEL_MAX_LENGTH)]
ChannelList = list[Channel]

StatusMessage = Annotated[str, StringConstraints(min_length=1)]
StatusDetails = str

MessageBody = str

Timestamp = Annotated[str, AfterValidator(_check_iso8601)]

UUIDString = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]
