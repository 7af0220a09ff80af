"""Domain models for listener registrations and subscription handles."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from busline.repos.memory import ListenerRepository


Listener = Callable[[Any], Any]
Filter = Callable[[Any], bool]
Middleware = Callable[[Any, Any, Any], Any]  # (channel, message, source)


def _new_id() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Registration(BaseModel):
    """A listener bound to exactly one channel.

    ``id`` is the token used to remove the registration from the registry.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    channel: Any
    callback: Listener
    filter: Filter | None = None
    once: bool = False

    def accepts(self, message: Any) -> bool:
        if self.filter is None:
            return True
        return bool(self.filter(message))


class Subscription:
    """Handle returned by ``take``/``one``.

    Calling it (or :meth:`unsubscribe`) removes the registration. Repeated
    calls are no-ops.
    """

    __slots__ = ("_registration", "_repo")

    def __init__(self, registration: Registration, repo: ListenerRepository) -> None:
        self._registration = registration
        self._repo = repo

    @property
    def registration_id(self) -> str:
        return self._registration.id

    @property
    def channel(self) -> Any:
        return self._registration.channel

    @property
    def once(self) -> bool:
        return self._registration.once

    @property
    def active(self) -> bool:
        return self._repo.contains(self._registration.id)

    def unsubscribe(self) -> None:
        self._repo.unregister(self._registration.id)

    __call__ = unsubscribe

    def __repr__(self) -> str:
        kind = "one" if self.once else "take"
        return f"<Subscription {kind} channel={self.channel!r} active={self.active}>"
