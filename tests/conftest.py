"""Shared test fixtures."""
from __future__ import annotations

import copy
from typing import Any

import pytest

from pubsub_dialect.domain.registry import DIALECT, Dialect
from pubsub_dialect.domain.value_objects.enums import Action, StatusCode

SESSION_UUID = "3f2c8a1e-5b7d-4c9e-8f10-2a6b4d8e0c13"
TIMESTAMP = "2017-03-14T15:09:26.535Z"
CHANNEL = "channel-a"


def make_request(action: str, *, seq: int = 1, **fields: Any) -> dict[str, Any]:
    return {"seq": seq, "action": action, **fields}


def make_status(
    action: str,
    code: int,
    *,
    seq: int = 1,
    message: str = "Not Authorized",
    details: str = "You do not have read permissions on this socket.",
) -> dict[str, Any]:
    return {"seq": seq, "action": action, "code": code, "message": message, "details": details}


def make_event(*, chan: str = CHANNEL, msg: str = "message-a") -> dict[str, Any]:
    return {"id": SESSION_UUID, "action": "msg", "time": TIMESTAMP, "chan": chan, "msg": msg}


_SAMPLES: dict[tuple[str | None, int | None], dict[str, Any]] = {
    (None, 400): make_status("some-action", 400, message="Bad Request", details=""),
    (None, 500): make_status("some-action", 500, message="Internal Error", details="boom"),
    ("session-uuid", None): make_request("session-uuid"),
    ("session-uuid", 200): {"seq": 1, "action": "session-uuid", "code": 200, "uuid": SESSION_UUID},
    ("client-uuid", None): make_request("client-uuid"),
    ("client-uuid", 200): {"seq": 1, "action": "client-uuid", "code": 200, "uuid": SESSION_UUID},
    ("subscribe", None): make_request("subscribe", channel=CHANNEL),
    ("subscribe", 200): {"seq": 1, "action": "subscribe", "code": 200, "channels": [CHANNEL, "channel-b"]},
    ("subscribe", 401): make_status("subscribe", 401),
    ("unsubscribe", None): make_request("unsubscribe", channel=CHANNEL),
    ("unsubscribe", 200): {"seq": 1, "action": "unsubscribe", "code": 200, "channels": []},
    ("unsubscribe", 401): make_status("unsubscribe", 401),
    ("unsubscribe", 404): make_status("unsubscribe", 404, message="Not Found"),
    ("unsubscribe-all", None): make_request("unsubscribe-all"),
    ("unsubscribe-all", 200): {"seq": 1, "action": "unsubscribe-all", "code": 200, "channels": []},
    ("unsubscribe-all", 401): make_status("unsubscribe-all", 401),
    ("unsubscribe-all", 404): make_status("unsubscribe-all", 404, message="Not Found"),
    ("subscriptions", None): make_request("subscriptions"),
    ("subscriptions", 200): {"seq": 1, "action": "subscriptions", "code": 200, "channels": [CHANNEL]},
    ("subscriptions", 401): make_status("subscriptions", 401),
    ("pub", None): make_request("pub", chan=CHANNEL, msg="message-a"),
    ("pub", 401): make_status("pub", 401),
    ("pub", 404): make_status(
        "pub",
        404,
        message="Not Found",
        details="There are no subscribers to the specified channel.",
    ),
    ("msg", None): make_event(),
    ("invalid-request", None): {
        "action": "invalid-request",
        "code": 400,
        "message": "Bad Request",
        "details": "Expecting property name enclosed in double quotes",
    },
}


def sample_for(action: str | None, code: int | None) -> dict[str, Any]:
    """A fresh object satisfying the shape registered for ``(action, code)``."""
    return copy.deepcopy(_SAMPLES[(action, code)])


def registered_shapes() -> list[tuple[str | None, int | None, type]]:
    return list(DIALECT.shapes())


@pytest.fixture
def dialect() -> Dialect:
    return DIALECT


@pytest.fixture
def publish_frame() -> dict[str, Any]:
    return sample_for(Action.PUB.value, None)


@pytest.fixture
def unauthorized_subscribe() -> dict[str, Any]:
    return sample_for(Action.SUBSCRIBE.value, int(StatusCode.UNAUTHORIZED))
