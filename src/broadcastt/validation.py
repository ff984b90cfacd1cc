"""Validation of channel names, socket IDs and hosts."""

from __future__ import annotations

import re
from collections import abc
from typing import Any, Sequence

from .config import MAX_CHANNELS_PER_EVENT
from .exceptions import (
    InvalidChannelNameError,
    InvalidHostError,
    InvalidSocketIdError,
    TooManyChannelsError,
)

CHANNEL_NAME_PATTERN = re.compile(r"[-a-zA-Z0-9_=@,.;]+")
SOCKET_ID_PATTERN = re.compile(r"\d+\.\d+", re.ASCII)
SCHEME_PREFIX_PATTERN = re.compile(r"https?://", re.IGNORECASE)


def validate_channel(channel: Any) -> None:
    """Ensure a channel name is valid."""
    if not isinstance(channel, str) or not CHANNEL_NAME_PATTERN.fullmatch(channel):
        raise InvalidChannelNameError(f"Invalid channel name {channel!r}")


def validate_channels(channels: Sequence[Any]) -> None:
    """Validate the number of channels and the format of each name."""
    if isinstance(channels, str) or not isinstance(channels, abc.Sequence):
        raise InvalidChannelNameError(f"Invalid channel list {channels!r}")
    if len(channels) > MAX_CHANNELS_PER_EVENT:
        raise TooManyChannelsError(
            f"An event can be triggered on a maximum of {MAX_CHANNELS_PER_EVENT} "
            "channels in a single call."
        )
    if not channels:
        raise InvalidChannelNameError("At least one channel is required")

    for channel in channels:
        validate_channel(channel)


def validate_socket_id(socket_id: Any) -> None:
    """Ensure a socket ID is valid. None means no socket ID."""
    if socket_id is None:
        return
    if not isinstance(socket_id, str) or not SOCKET_ID_PATTERN.fullmatch(socket_id):
        raise InvalidSocketIdError(f"Invalid socket ID {socket_id!r}")


def validate_host(host: str) -> None:
    """Ensure the host does not carry a scheme prefix."""
    if SCHEME_PREFIX_PATTERN.match(host):
        raise InvalidHostError(
            "Invalid host value. Host must not start with http:// or https://."
        )
