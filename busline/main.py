"""Entry points for obtaining a bus: a process-wide default and a factory."""

from __future__ import annotations

from busline.domain.bus import EventBus
from busline.settings import BusSettings

# ── Process-wide default (created on first use, never reset) ──────────
_default_bus: EventBus | None = None


def create_bus(settings: BusSettings | None = None) -> EventBus:
    """Return a new bus that shares no state with any other instance."""
    return EventBus(settings)


def get_default_bus() -> EventBus:
    """Return the process-wide bus, creating it on first call.

    Settings for the default bus come from ``BUSLINE_*`` environment
    variables. Logging is left to the application (see
    :func:`busline.utils.logger.setup_logger`). Code that needs isolation
    (tests in particular) should use :func:`create_bus` instead.
    """
    global _default_bus
    if _default_bus is None:
        _default_bus = EventBus(BusSettings.from_env())
    return _default_bus
