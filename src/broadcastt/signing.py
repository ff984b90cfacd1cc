"""
Request signing for the Broadcastt REST API.

Every request carries a signed query string. The string to sign is:

    METHOD\\npath\\nsorted_query

where ``sorted_query`` holds ``auth_key``, ``auth_timestamp``,
``auth_version`` and any request parameters (e.g. ``body_md5``) sorted by
key. The HMAC-SHA256 of that string, keyed by the app secret, is then added
as ``auth_signature`` and the parameters are sorted and serialized again.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import Any, Mapping

from .config import AUTH_VERSION


def build_query(params: Mapping[str, Any]) -> str:
    """
    Serialize parameters as ``key=value`` pairs joined by ``&``.

    List and tuple values are joined with commas. Booleans become "1" for
    True and an empty value for False. Nothing is URL-encoded; values are
    expected to be safe for use in a URL already.
    """
    pairs = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            value = ",".join(_query_value(item) for item in value)
        else:
            value = _query_value(value)
        pairs.append(f"{key}={value}")
    return "&".join(pairs)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def hmac_sha256(secret: str, message: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of message."""
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def _sorted(params: Mapping[str, Any]) -> dict[str, Any]:
    return {key: params[key] for key in sorted(params)}


class RequestSigner:
    """Builds authenticated query strings for API requests."""

    def __init__(self, app_key: str, app_secret: str) -> None:
        self.app_key = app_key
        self._app_secret = app_secret

    def build_auth_query_string(
        self,
        method: str,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        timestamp: int | None = None,
    ) -> str:
        """
        Build the signed query string for a request.

        Args:
            method: HTTP method, e.g. "POST"
            path: Request path with the app ID already substituted
            query_params: Extra query parameters, these win over the auth defaults
            timestamp: Unix timestamp to sign with (default: now)

        Returns:
            Query string including auth_signature, sorted by key
        """
        params: dict[str, Any] = {
            "auth_key": self.app_key,
            "auth_timestamp": int(time.time()) if timestamp is None else timestamp,
            "auth_version": AUTH_VERSION,
        }
        if query_params:
            params.update(query_params)

        params = _sorted(params)
        string_to_sign = f"{method}\n{path}\n{build_query(params)}"

        params["auth_signature"] = hmac_sha256(self._app_secret, string_to_sign)

        return build_query(_sorted(params))
