"""Event payload construction for the Broadcastt REST API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .exceptions import JsonEncodeError, MissingEventDataError

logger = logging.getLogger(__name__)


class Endpoints:
    """REST API paths, relative to the configured base path."""

    EVENT = "/event"
    EVENTS = "/events"


def encode_json(value: Any) -> str:
    """
    Serialize a value to compact JSON.

    Raises:
        JsonEncodeError: If the value cannot be represented as JSON. The
            original value is kept on the exception.
    """
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode data as JSON: {e}")
        raise JsonEncodeError(value, f"Failed to encode data as JSON: {e}") from e


@dataclass
class TriggerEvent:
    """A single event published on one or more channels."""

    channels: list[str]
    name: str
    data: Any = None
    socket_id: str | None = None

    def to_payload(self, json_encoded: bool = False) -> dict[str, Any]:
        """Build the request body for the event endpoint."""
        payload: dict[str, Any] = {
            "name": self.name,
            "data": self.data if json_encoded else encode_json(self.data),
            "channels": list(self.channels),
        }
        if self.socket_id is not None:
            payload["socket_id"] = self.socket_id
        return payload


@dataclass
class BatchEvent:
    """One entry of a batch trigger. Each entry targets its own channel."""

    channel: str
    name: str
    data: Any
    socket_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, entry: Mapping[str, Any]) -> "BatchEvent":
        """
        Build a batch event from a plain mapping.

        Keys other than channel, name, data and socket_id are kept and sent
        along unchanged.

        Raises:
            MissingEventDataError: If the mapping has no 'data' key
        """
        if "data" not in entry:
            raise MissingEventDataError("Data is missing from event")

        known = {"channel", "name", "data", "socket_id"}
        return cls(
            channel=entry.get("channel"),  # type: ignore[arg-type]
            name=entry.get("name"),  # type: ignore[arg-type]
            data=entry["data"],
            socket_id=entry.get("socket_id"),
            extra={k: v for k, v in entry.items() if k not in known},
        )

    def to_payload(self, json_encoded: bool = False) -> dict[str, Any]:
        """Build this entry's part of the batch request body."""
        payload: dict[str, Any] = {
            "channel": self.channel,
            "name": self.name,
            "data": self.data if json_encoded else encode_json(self.data),
        }
        if self.socket_id is not None:
            payload["socket_id"] = self.socket_id
        payload.update(self.extra)
        return payload
