"""Pick the shape an inbound object should be validated against."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pubsub_dialect.domain.registry import DIALECT, Dialect, Exchange, Standalone
from pubsub_dialect.domain.shapes.base import Shape
from pubsub_dialect.domain.shapes.constraints import as_int


def _code(obj: Mapping[str, Any]) -> int | None:
    # Wrong-typed codes count as absent; the validator reports them.
    return as_int(obj.get("code"))


def identify(obj: Any, dialect: Dialect = DIALECT) -> type[Shape] | None:
    """Return the registered shape for ``obj``, or None when nothing fits.

    Only ``action`` and ``code`` are consulted:

    1. A standalone category wins outright.
    2. With a ``code``, the category's response shape for that code; if the
       category has none, fall through to the general shape for the code.
    3. Without a ``code``, the category's request shape.
    4. With no category at all, the general shape for the code, if any.
    """
    if not isinstance(obj, Mapping):
        return None

    code = _code(obj)

    match dialect.lookup(obj.get("action")):
        case Standalone(shape=shape):
            return shape
        case Exchange() as category:
            if code is None:
                return category.request
            shape = category.response(code)
            if shape is not None:
                return shape

    if code is None:
        return None
    return dialect.lookup_general(code)
