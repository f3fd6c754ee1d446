from __future__ import annotations

from enum import IntEnum, StrEnum


class Action(StrEnum):
    SESSION_UUID = "session-uuid"
    CLIENT_UUID = "client-uuid"  # legacy name of session-uuid
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    UNSUBSCRIBE_ALL = "unsubscribe-all"
    SUBSCRIPTIONS = "subscriptions"
    PUB = "pub"
    MSG = "msg"
    INVALID_REQUEST = "invalid-request"


class StatusCode(IntEnum):
    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_ERROR = 500
