"""In-memory registry of listener registrations, keyed by channel."""

from __future__ import annotations

from typing import Any

from busline.domain.models import Filter, Listener, Registration

ALL_CHANNELS = object()


class ListenerRepository:
    """Dict-backed store of registrations.

    Each channel maps to an insertion-ordered dict of registrations keyed by
    id, so removal by token is O(1) and registration order is preserved.
    """

    def __init__(self) -> None:
        self._store: dict[Any, dict[str, Registration]] = {}
        self._channel_of: dict[str, Any] = {}

    def register(
        self,
        channel: Any,
        callback: Listener,
        filter: Filter | None = None,
        once: bool = False,
    ) -> Registration:
        registration = Registration(
            channel=channel, callback=callback, filter=filter, once=once
        )
        self._store.setdefault(channel, {})[registration.id] = registration
        self._channel_of[registration.id] = channel
        return registration

    def unregister(self, registration_id: str) -> bool:
        """Remove a registration. Returns ``False`` if it was already gone."""
        if registration_id not in self._channel_of:
            return False
        channel = self._channel_of.pop(registration_id)
        bucket = self._store[channel]
        del bucket[registration_id]
        if not bucket:
            del self._store[channel]
        return True

    def contains(self, registration_id: str) -> bool:
        return registration_id in self._channel_of

    def listeners_for(self, channel: Any) -> tuple[Registration, ...]:
        bucket = self._store.get(channel)
        if not bucket:
            return ()
        return tuple(bucket.values())

    def count(self, channel: Any = ALL_CHANNELS) -> int:
        if channel is ALL_CHANNELS:
            return len(self._channel_of)
        return len(self._store.get(channel, ()))

    def channels(self) -> list[Any]:
        return list(self._store)
