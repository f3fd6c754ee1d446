"""Every message shape of the dialect."""
from __future__ import annotations

from typing import Literal

from pubsub_dialect.domain.shapes.base import (
    RequestShape,
    ResponseShape,
    Shape,
    StatusShape,
    status_shape,
)
from pubsub_dialect.domain.shapes.constraints import (
    AnyAction,
    Channel,
    ChannelList,
    MessageBody,
    Sequence,
    StatusDetails,
    StatusMessage,
    Timestamp,
    UUIDString,
)
from pubsub_dialect.domain.value_objects.enums import Action, StatusCode

# ---- general (any action) ----


class GeneralBadRequest(StatusShape):
    action: AnyAction
    code: Literal[400]


class GeneralInternalError(StatusShape):
    action: AnyAction
    code: Literal[500]


# ---- session-uuid / client-uuid ----


class SessionUuidRequest(RequestShape):
    action: Literal["session-uuid"]


class SessionUuidOk(ResponseShape):
    action: Literal["session-uuid"]
    code: Literal[200]
    uuid: UUIDString


class ClientUuidRequest(RequestShape):
    action: Literal["client-uuid"]


class ClientUuidOk(ResponseShape):
    action: Literal["client-uuid"]
    code: Literal[200]
    uuid: UUIDString


# ---- subscribe ----


class SubscribeRequest(RequestShape):
    action: Literal["subscribe"]
    channel: Channel


class SubscribeOk(ResponseShape):
    action: Literal["subscribe"]
    code: Literal[200]
    channels: ChannelList


SubscribeUnauthorized = status_shape(Action.SUBSCRIBE, StatusCode.UNAUTHORIZED)


# ---- unsubscribe ----


class UnsubscribeRequest(RequestShape):
    action: Literal["unsubscribe"]
    channel: Channel


class UnsubscribeOk(ResponseShape):
    action: Literal["unsubscribe"]
    code: Literal[200]
    channels: ChannelList


UnsubscribeUnauthorized = status_shape(Action.UNSUBSCRIBE, StatusCode.UNAUTHORIZED)
UnsubscribeNotFound = status_shape(Action.UNSUBSCRIBE, StatusCode.NOT_FOUND)


# ---- unsubscribe-all ----


class UnsubscribeAllRequest(RequestShape):
    action: Literal["unsubscribe-all"]


class UnsubscribeAllOk(ResponseShape):
    action: Literal["unsubscribe-all"]
    code: Literal[200]
    channels: ChannelList


UnsubscribeAllUnauthorized = status_shape(Action.UNSUBSCRIBE_ALL, StatusCode.UNAUTHORIZED)
UnsubscribeAllNotFound = status_shape(Action.UNSUBSCRIBE_ALL, StatusCode.NOT_FOUND)


# ---- subscriptions ----


class SubscriptionsRequest(RequestShape):
    action: Literal["subscriptions"]


class SubscriptionsOk(ResponseShape):
    action: Literal["subscriptions"]
    code: Literal[200]
    channels: ChannelList


SubscriptionsUnauthorized = status_shape(Action.SUBSCRIPTIONS, StatusCode.UNAUTHORIZED)


# ---- pub ----


class PublishRequest(RequestShape):
    action: Literal["pub"]
    chan: Channel
    msg: MessageBody


PublishUnauthorized = status_shape(Action.PUB, StatusCode.UNAUTHORIZED)
PublishNotFound = status_shape(Action.PUB, StatusCode.NOT_FOUND)


# ---- standalone ----


class MessageEvent(Shape):
    """Server push: a message published on a subscribed channel. No ``seq``."""

    id: UUIDString
    action: Literal["msg"]
    time: Timestamp
    chan: Channel
    msg: MessageBody


class InvalidRequest(Shape):
    """Rejection of a frame whose ``seq`` could not be recovered."""

    seq: Sequence = None  # omittable, never null
    action: Literal["invalid-request"]
    code: Literal[400]
    message: StatusMessage
    details: StatusDetails = ""
