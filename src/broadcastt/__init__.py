"""
Broadcastt - Python client for the Broadcastt REST API.

Example:
    from broadcastt import BroadcasttClient

    client = BroadcasttClient(app_id=1, app_key="key", app_secret="secret")
    client.trigger("my-channel", "my-event", {"message": "hello"})

    # In your channel authorization endpoint
    client.private_auth("private-chat", socket_id)
"""

from broadcastt.auth import Authenticator
from broadcastt.client import BroadcasttClient
from broadcastt.config import BroadcasttConfig
from broadcastt.dispatcher import RequestDispatcher
from broadcastt.exceptions import (
    BroadcasttError,
    InvalidArgumentError,
    InvalidChannelNameError,
    InvalidHostError,
    InvalidSocketIdError,
    JsonEncodeError,
    MissingEventDataError,
    TooManyChannelsError,
    TransportError,
)
from broadcastt.messages import BatchEvent, TriggerEvent
from broadcastt.signing import RequestSigner, build_query
from broadcastt.transport import Request, RequestsTransport, Response
from broadcastt.types import Transport

__version__ = "0.1.0"

__all__ = [
    # Main client
    "BroadcasttClient",
    "BroadcasttConfig",
    # Core
    "Authenticator",
    "RequestSigner",
    "RequestDispatcher",
    "build_query",
    # Events
    "TriggerEvent",
    "BatchEvent",
    # Transport
    "Transport",
    "RequestsTransport",
    "Request",
    "Response",
    # Exceptions
    "BroadcasttError",
    "InvalidChannelNameError",
    "TooManyChannelsError",
    "InvalidSocketIdError",
    "InvalidHostError",
    "MissingEventDataError",
    "JsonEncodeError",
    "InvalidArgumentError",
    "TransportError",
]
