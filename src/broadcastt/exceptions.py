"""Custom exceptions for Broadcastt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .transport import Response


class BroadcasttError(Exception):
    """Base exception for all Broadcastt errors."""

    pass


class InvalidChannelNameError(BroadcasttError):
    """Channel name does not match the allowed format."""

    pass


class TooManyChannelsError(BroadcasttError):
    """An event was triggered on more channels than allowed in one call."""

    pass


class InvalidSocketIdError(BroadcasttError):
    """Socket ID does not match the allowed format."""

    pass


class InvalidHostError(BroadcasttError):
    """Configured host contains a scheme prefix."""

    pass


class MissingEventDataError(BroadcasttError):
    """A batch event has no data."""

    pass


class JsonEncodeError(BroadcasttError):
    """Value could not be serialized to JSON."""

    def __init__(self, data: Any, message: str = "Failed to encode data as JSON") -> None:
        super().__init__(message)
        self.data = data


class InvalidArgumentError(BroadcasttError, ValueError):
    """Malformed argument, e.g. a client URI that cannot be parsed."""

    pass


class TransportError(BroadcasttError):
    """HTTP request failed at the network layer or returned an error status."""

    def __init__(self, message: str, response: Response | None = None) -> None:
        super().__init__(message)
        self.response = response
