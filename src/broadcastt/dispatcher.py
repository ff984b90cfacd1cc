"""Building, signing and sending REST API requests."""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Mapping
from urllib.parse import parse_qsl

from .config import BroadcasttConfig
from .exceptions import TransportError
from .messages import encode_json
from .signing import RequestSigner
from .transport import Request, Response
from .types import QueryParams, Transport
from .validation import validate_host

logger = logging.getLogger(__name__)


def parse_query(query: str) -> dict[str, Any]:
    """
    Parse a raw query string into a mapping.

    Keys ending in "[]" are collected into a list under the key without the
    brackets, so "a[]=1&a[]=2" gives {"a": ["1", "2"]}. For other repeated
    keys the last value wins.
    """
    params: dict[str, Any] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key.endswith("[]"):
            values = params.get(key[:-2])
            if not isinstance(values, list):
                values = params[key[:-2]] = []
            values.append(value)
        else:
            params[key] = value
    return params


class RequestDispatcher:
    """
    Turns API calls into signed HTTP requests and sends them.

    The endpoint settings are read from the config on every call, so changes
    made through use_cluster() or use_tls() apply to the next request.
    """

    def __init__(
        self,
        config: BroadcasttConfig,
        signer: RequestSigner,
        transport: Transport,
        logger: logging.Logger = logger,
    ) -> None:
        self._config = config
        self._signer = signer
        self._transport = transport
        self._logger = logger

    def build_uri(self) -> str:
        """Build scheme://host:port from the config."""
        validate_host(self._config.host)
        return self._config.build_url()

    def build_request(
        self,
        domain: str,
        path: str,
        method: str = "GET",
        query_params: Mapping[str, Any] | None = None,
        body: str | None = None,
    ) -> Request:
        """
        Build a signed request.

        Args:
            domain: scheme://host:port
            path: Request path, '{appId}' is replaced with the app ID
            method: HTTP method
            query_params: Extra query parameters to sign and send
            body: Request body

        Returns:
            The unsent request
        """
        path = path.replace("{appId}", self._config.app_id)

        signed_query = self._signer.build_auth_query_string(method, path, query_params)

        uri = f"{domain}{path}?{signed_query}"
        self._logger.debug(f"build_request uri: {uri}")

        headers = {
            "Content-Type": "application/json",
            "X-Library": f"{self._config.client_name} {self._config.client_version}",
        }

        return Request(method=method, url=uri, headers=headers, body=body)

    def send(self, request: Request) -> Response:
        """
        Send a request through the transport.

        Raises:
            TransportError: Propagated from the transport
        """
        self._logger.debug(f"send_request: {request.method} {request.url}")

        try:
            response = self._transport.send(request, timeout=self._config.timeout)
        except TransportError as e:
            self._logger.error(f"send_request error: {e}")
            raise

        self._logger.debug(f"send_request response: {response.status_code} {response.body}")
        return response

    def post(
        self,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        post_params: Any = None,
    ) -> Response:
        """
        POST to a path below the base path.

        The body's MD5 is signed along with the query, binding the signature
        to the exact body sent.

        Raises:
            JsonEncodeError: If post_params cannot be serialized
            InvalidHostError: If the host contains a scheme
            TransportError: Propagated from the transport
        """
        body = encode_json(post_params if post_params is not None else {})

        params = dict(query_params or {})
        params["body_md5"] = hashlib.md5(body.encode("utf-8"), usedforsecurity=False).hexdigest()

        request = self.build_request(
            self.build_uri(),
            self._config.base_path + path,
            "POST",
            params,
            body=body,
        )
        return self.send(request)

    def get(self, path: str, query_params: QueryParams | None = None) -> Response:
        """
        GET a path below the base path.

        query_params may be a mapping or a raw query string such as
        "info=user_count".

        Raises:
            InvalidHostError: If the host contains a scheme
            TransportError: Propagated from the transport
        """
        if isinstance(query_params, str):
            query_params = parse_query(query_params)

        request = self.build_request(
            self.build_uri(),
            self._config.base_path + path,
            "GET",
            query_params,
        )
        return self.send(request)
