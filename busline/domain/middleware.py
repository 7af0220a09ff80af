"""Ordered chain of middleware observers run on every send."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from busline.domain.models import Middleware

logger = logging.getLogger(__name__)


class MiddlewareChain:
    """Append-only list of ``(channel, message, source)`` observers.

    Middleware cannot be removed once added; it lives as long as the bus.
    Return values are ignored, so messages are never transformed in transit.
    """

    def __init__(self) -> None:
        self._middleware: list[Middleware] = []

    def use(self, fn: Middleware) -> None:
        self._middleware.append(fn)
        logger.debug("Middleware %r added (chain length %d)", fn, len(self._middleware))

    def run_all(self, channel: Any, message: Any, source: str | None) -> None:
        # Snapshot: middleware added by a middleware applies from the next send.
        for fn in list(self._middleware):
            fn(channel, message, source)

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(list(self._middleware))
