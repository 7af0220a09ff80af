"""Errors raised by the bus itself.

Errors raised by listeners, filters and middleware are never wrapped; they
propagate out of ``send`` unchanged.
"""

from __future__ import annotations

from typing import Any


class BusError(Exception):
    """Base class for errors originating in busline."""


class SendDepthExceeded(BusError, RuntimeError):
    """Raised when nested ``send`` calls exceed ``BusSettings.max_send_depth``."""

    def __init__(self, channel: Any, depth: int, limit: int) -> None:
        self.channel = channel
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"send({channel!r}) nested {depth} deep, limit is {limit}"
        )
