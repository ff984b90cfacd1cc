"""HMAC-SHA256 authentication for private/presence channels."""

from __future__ import annotations

from typing import Any

from .messages import encode_json
from .signing import hmac_sha256
from .validation import validate_channel, validate_socket_id


class Authenticator:
    """
    Issues authentication tokens for private/presence channel subscriptions.

    The signature is computed as:
        HMAC-SHA256(app_secret, f"{socket_id}:{channel_name}")

    When custom data is supplied (always the case for presence channels) it
    is appended to the signed message:
        HMAC-SHA256(app_secret, f"{socket_id}:{channel_name}:{custom_data}")
    """

    def __init__(self, app_key: str, app_secret: str) -> None:
        self.app_key = app_key
        self._app_secret = app_secret

    def private_auth(
        self,
        channel: str,
        socket_id: str,
        custom_data: str | None = None,
    ) -> str:
        """
        Generate the authentication payload for a channel subscription.

        Args:
            channel: The channel to authenticate for
            socket_id: The socket ID of the subscribing connection
            custom_data: Pre-serialized JSON string, signed byte for byte

        Returns:
            JSON string with 'auth', and 'channel_data' if custom data was given
        """
        validate_channel(channel)
        validate_socket_id(socket_id)

        if custom_data:
            string_to_sign = f"{socket_id}:{channel}:{custom_data}"
        else:
            string_to_sign = f"{socket_id}:{channel}"

        payload = {"auth": self._sign(string_to_sign)}
        if custom_data:
            payload["channel_data"] = custom_data

        return encode_json(payload)

    def presence_auth(
        self,
        channel: str,
        socket_id: str,
        user_id: Any,
        user_info: Any = None,
    ) -> str:
        """
        Generate the authentication payload for a presence channel.

        The user data is serialized with 'user_id' first, which matters because
        the serialized string is part of the signature.
        """
        user_data: dict[str, Any] = {"user_id": user_id}
        if user_info:
            user_data["user_info"] = user_info

        return self.private_auth(channel, socket_id, encode_json(user_data))

    def _sign(self, message: str) -> str:
        """
        Generate HMAC-SHA256 signature.

        Returns:
            String in format "app_key:hex_digest"
        """
        return f"{self.app_key}:{hmac_sha256(self._app_secret, message)}"
