"""HTTP transport for sending signed requests."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)


def is_success_status(status_code: int) -> bool:
    """Whether the status code is in the 2xx range."""
    return 200 <= status_code < 300


@dataclass
class Request:
    """An unsent HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


@dataclass
class Response:
    """Status code and body of a completed HTTP request."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the request succeeded (2xx)."""
        return is_success_status(self.status_code)

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)

    def raise_for_status(self) -> None:
        """Raise TransportError if the status is not 2xx."""
        if not self.ok:
            raise TransportError(
                f"Server responded with status {self.status_code}",
                response=self,
            )


class RequestsTransport:
    """
    Transport backed by a requests Session.

    With raise_for_status=True (the default) any non-2xx response raises
    TransportError. With raise_for_status=False it is returned and the
    caller inspects the status.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        raise_for_status: bool = True,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.raise_for_status = raise_for_status

    def send(self, request: Request, timeout: float | None = None) -> Response:
        """Send the request over the session."""
        data = request.body.encode("utf-8") if request.body is not None else None

        try:
            raw = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=data,
                timeout=timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        response = Response(
            status_code=raw.status_code,
            body=raw.text,
            headers=dict(raw.headers),
        )

        if self.raise_for_status:
            response.raise_for_status()

        return response

    def close(self) -> None:
        """Close HTTP session."""
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
