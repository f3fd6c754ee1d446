"""The dialect registry: which shapes exist for which action and status code.

The registry is assembled once at import time by :func:`build_dialect` and
shared read-only as :data:`DIALECT`. Every category, response map and the
dialect itself are frozen; there is no API to change them afterwards.
Adding an action is an edit to :func:`build_dialect` and
:class:`~pubsub_dialect.domain.value_objects.enums.Action`, nothing else.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pubsub_dialect.domain.shapes import messages as m
from pubsub_dialect.domain.shapes.base import RequestShape, ResponseShape, Shape, literal_of
from pubsub_dialect.domain.shapes.constraints import as_int
from pubsub_dialect.domain.value_objects.enums import Action, StatusCode

logger = logging.getLogger(__name__)

DIALECT_VERSION = "1.1.0"


@dataclass(frozen=True, slots=True)
class Standalone:
    """A category that is one fixed shape whatever ``code`` it carries."""

    shape: type[Shape]


@dataclass(frozen=True, slots=True)
class Exchange:
    """A request shape plus one response shape per status code."""

    request: type[RequestShape]
    responses: Mapping[StatusCode, type[ResponseShape]]

    def response(self, code: int) -> type[ResponseShape] | None:
        try:
            return self.responses.get(StatusCode(code))
        except ValueError:
            return None


Category = Standalone | Exchange


def _action_of(shape: type[Shape], action: Action) -> None:
    if literal_of(shape, "action") != action.value:
        raise ValueError(f"{shape.__name__} does not pin action {action.value!r}")


def _code_of(shape: type[Shape]) -> StatusCode:
    code = literal_of(shape, "code")
    try:
        return StatusCode(code)
    except ValueError:
        raise ValueError(f"{shape.__name__} does not pin a known status code") from None


def exchange(
    action: Action,
    request: type[RequestShape],
    *responses: type[ResponseShape],
) -> Exchange:
    """Assemble an :class:`Exchange`, keying each response by its own ``code``."""
    _action_of(request, action)
    by_code: dict[StatusCode, type[ResponseShape]] = {}
    for shape in responses:
        _action_of(shape, action)
        code = _code_of(shape)
        if code in by_code:
            raise ValueError(f"{action.value!r} registers code {int(code)} twice")
        by_code[code] = shape
    return Exchange(request=request, responses=MappingProxyType(by_code))


def standalone(action: Action, shape: type[Shape]) -> Standalone:
    _action_of(shape, action)
    return Standalone(shape=shape)


@dataclass(frozen=True, slots=True, eq=False)
class Dialect:
    """Immutable lookup table of every registered shape."""

    version: str
    categories: Mapping[Action, Category]
    general: Mapping[StatusCode, type[Shape]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for code, shape in self.general.items():
            if _code_of(shape) != code:
                raise ValueError(f"{shape.__name__} registered under code {int(code)}")
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "general", MappingProxyType(dict(self.general)))

    def lookup(self, action: Any) -> Category | None:
        if not isinstance(action, str):
            return None
        try:
            return self.categories.get(Action(action))
        except ValueError:
            return None

    def lookup_general(self, code: Any) -> type[Shape] | None:
        code = as_int(code)
        if code is None:
            return None
        try:
            return self.general.get(StatusCode(code))
        except ValueError:
            return None

    def shapes(self) -> Iterator[tuple[str | None, int | None, type[Shape]]]:
        """Yield ``(action, code, shape)`` for every registered shape.

        Requests and standalone shapes have ``code`` None; general shapes
        have ``action`` None.
        """
        for action, category in self.categories.items():
            match category:
                case Standalone(shape=shape):
                    yield action.value, None, shape
                case Exchange(request=request, responses=responses):
                    yield action.value, None, request
                    for code, shape in responses.items():
                        yield action.value, int(code), shape
        for code, shape in self.general.items():
            yield None, int(code), shape


def build_dialect() -> Dialect:
    categories: dict[Action, Category] = {
        Action.SESSION_UUID: exchange(
            Action.SESSION_UUID,
            m.SessionUuidRequest,
            m.SessionUuidOk,
        ),
        Action.CLIENT_UUID: exchange(
            Action.CLIENT_UUID,
            m.ClientUuidRequest,
            m.ClientUuidOk,
        ),
        Action.SUBSCRIBE: exchange(
            Action.SUBSCRIBE,
            m.SubscribeRequest,
            m.SubscribeOk,
            m.SubscribeUnauthorized,
        ),
        Action.UNSUBSCRIBE: exchange(
            Action.UNSUBSCRIBE,
            m.UnsubscribeRequest,
            m.UnsubscribeOk,
            m.UnsubscribeUnauthorized,
            m.UnsubscribeNotFound,
        ),
        Action.UNSUBSCRIBE_ALL: exchange(
            Action.UNSUBSCRIBE_ALL,
            m.UnsubscribeAllRequest,
            m.UnsubscribeAllOk,
            m.UnsubscribeAllUnauthorized,
            m.UnsubscribeAllNotFound,
        ),
        Action.SUBSCRIPTIONS: exchange(
            Action.SUBSCRIPTIONS,
            m.SubscriptionsRequest,
            m.SubscriptionsOk,
            m.SubscriptionsUnauthorized,
        ),
        Action.PUB: exchange(
            Action.PUB,
            m.PublishRequest,
            m.PublishUnauthorized,
            m.PublishNotFound,
        ),
        Action.MSG: standalone(Action.MSG, m.MessageEvent),
        Action.INVALID_REQUEST: standalone(Action.INVALID_REQUEST, m.InvalidRequest),
    }
    missing = set(Action) - set(categories)
    if missing:
        raise ValueError(f"actions without a category: {sorted(missing)}")

    dialect = Dialect(
        version=DIALECT_VERSION,
        categories=categories,
        general={
            StatusCode.BAD_REQUEST: m.GeneralBadRequest,
            StatusCode.INTERNAL_ERROR: m.GeneralInternalError,
        },
    )
    logger.debug(
        "Dialect %s built (%d categories, %d general shapes)",
        dialect.version, len(dialect.categories), len(dialect.general),
    )
    return dialect


DIALECT = build_dialect()
