"""Simple synchronous in-process message bus."""

from __future__ import annotations

import logging
from typing import Any

from busline.domain.errors import SendDepthExceeded
from busline.domain.middleware import MiddlewareChain
from busline.domain.models import Filter, Listener, Middleware, Subscription
from busline.repos.memory import ALL_CHANNELS, ListenerRepository
from busline.settings import BusSettings

logger = logging.getLogger(__name__)


class EventBus:
    """Publish/subscribe bus keyed by channel.

    ``send`` runs every middleware, then every matching listener, on the
    caller's stack before returning. Listeners on a channel are called in
    registration order. Exceptions from middleware, filters or listeners
    propagate to the caller of ``send`` and stop the rest of that send.
    """

    def __init__(self, settings: BusSettings | None = None) -> None:
        self.settings = settings or BusSettings()
        self.listeners = ListenerRepository()
        self.middleware = MiddlewareChain()
        self._depth = 0
        # One-shot ids claimed during the outermost send still in progress.
        self._consumed: set[str] = set()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def take(self, channel: Any, fn: Listener, filter: Filter | None = None) -> Subscription:
        """Call *fn* for every message on *channel* until unsubscribed."""
        return self._subscribe(channel, fn, filter, once=False)

    def one(self, channel: Any, fn: Listener, filter: Filter | None = None) -> Subscription:
        """Call *fn* for the first matching message on *channel* only."""
        return self._subscribe(channel, fn, filter, once=True)

    def _subscribe(
        self, channel: Any, fn: Listener, filter: Filter | None, once: bool
    ) -> Subscription:
        registration = self.listeners.register(channel, fn, filter=filter, once=once)
        logger.debug(
            "Subscribed %s to %r (once=%s, filtered=%s)",
            registration.id,
            channel,
            once,
            filter is not None,
        )
        return Subscription(registration, self.listeners)

    def apply_middleware(self, fn: Middleware) -> None:
        """Add *fn* to the middleware chain for the lifetime of this bus."""
        self.middleware.use(fn)

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def send(self, channel: Any, message: Any = None, source: str | None = None) -> None:
        """Run the middleware chain, then deliver *message* to listeners on *channel*."""
        limit = self.settings.max_send_depth
        if limit is not None and self._depth >= limit:
            logger.warning(
                "Nested send depth limit %d reached on channel %r", limit, channel
            )
            raise SendDepthExceeded(channel, self._depth + 1, limit)

        self._depth += 1
        try:
            self.middleware.run_all(channel, message, source)
            self._dispatch(channel, message)
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._consumed.clear()

    def _dispatch(self, channel: Any, message: Any) -> None:
        snapshot = self.listeners.listeners_for(channel)
        logger.debug("Dispatching on %r to %d listener(s)", channel, len(snapshot))

        for registration in snapshot:
            if not registration.accepts(message):
                continue
            if registration.once:
                # Claim before calling so a nested send cannot reach it again.
                # A manual unsubscribe during this send does not count as a claim.
                if registration.id in self._consumed:
                    continue
                self._consumed.add(registration.id)
                self.listeners.unregister(registration.id)
                logger.debug("One-shot listener %s consumed on %r", registration.id, channel)
            registration.callback(message)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def listener_count(self, channel: Any = ALL_CHANNELS) -> int:
        return self.listeners.count(channel)

    def channels(self) -> list[Any]:
        return self.listeners.channels()
