"""Type definitions for Broadcastt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, TypeAlias, Union

if TYPE_CHECKING:
    from .messages import BatchEvent
    from .transport import Request, Response

# Query parameters accepted by get(): a mapping or a raw query string
QueryParams: TypeAlias = Union[Mapping[str, Any], str]

# One entry of a batch trigger
BatchEntry: TypeAlias = Union["BatchEvent", Mapping[str, Any]]


class Transport(Protocol):
    """Protocol for HTTP transports used to send signed requests."""

    def send(self, request: Request, timeout: float | None = None) -> Response:
        """
        Send a request and return the response.

        Raises:
            TransportError: On network failure, or on an error status when
                the transport is configured to raise for it.
        """
        ...

    def close(self) -> None:
        """Release any pooled connections."""
        ...
