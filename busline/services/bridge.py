"""Adapters that connect a bus to an external Redux-style store.

Outbound: bus messages are forwarded into the store through a middleware.
Inbound: a store middleware forwards every action the store processes into
the bus on the channel named by the action's ``type``, tagged
``EXTERNAL_SOURCE``. The outbound forwarder skips messages carrying that tag,
which is what keeps the two directions from echoing each other forever.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from busline.domain.bus import EventBus
from busline.domain.events import EXTERNAL_SOURCE, action_type
from busline.domain.models import Middleware

logger = logging.getLogger(__name__)

Dispatch = Callable[[Any], Any]
StoreMiddleware = Callable[[Any], Callable[[Dispatch], Dispatch]]


def _resolve(bus: EventBus | None) -> EventBus:
    if bus is not None:
        return bus
    from busline.main import get_default_bus

    return get_default_bus()


def apply_outbound_bridge(forward: Middleware, bus: EventBus | None = None) -> None:
    """Install *forward* as middleware so it sees every message sent on *bus*.

    *forward* is responsible for ignoring messages whose source is
    ``EXTERNAL_SOURCE``; see :func:`make_store_forwarder`.
    """
    _resolve(bus).apply_middleware(forward)


def make_store_forwarder(dispatch: Dispatch) -> Middleware:
    """Build an outbound forwarder that dispatches bus messages into a store.

    Each message becomes ``{"type": channel, "payload": message}``. Messages
    that came from the store are skipped.
    """

    def forward(channel: Any, message: Any, source: str | None) -> None:
        if source == EXTERNAL_SOURCE:
            return
        logger.debug("Forwarding %r to external store", channel)
        dispatch({"type": channel, "payload": message})

    return forward


def create_inbound_bridge_middleware(bus: EventBus | None = None) -> StoreMiddleware:
    """Return a store middleware that mirrors every action into the bus.

    The store's pipeline continues first; the action is then sent on the
    channel given by its ``type`` with the whole action as the message. An
    action without a type is sent on channel ``None``.
    """

    def middleware(store_api: Any) -> Callable[[Dispatch], Dispatch]:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def handle(action: Any) -> Any:
                result = next_dispatch(action)
                _resolve(bus).send(action_type(action), action, EXTERNAL_SOURCE)
                return result

            return handle

        return wrap

    return middleware
