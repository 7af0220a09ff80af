"""Bus configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field


class BusSettings(BaseModel):
    """Per-instance settings. Defaults reproduce the unguarded bus."""

    model_config = ConfigDict(frozen=True)

    max_send_depth: int | None = Field(default=None, gt=0)  # None = unbounded
    log_level: str = "WARNING"  # applied only by an explicit setup_logger call

    @classmethod
    def from_env(cls) -> BusSettings:
        """Build settings from ``BUSLINE_*`` environment variables.

        Missing or blank variables keep the defaults.
        """
        values: dict[str, str] = {}
        depth = os.environ.get("BUSLINE_MAX_SEND_DEPTH", "").strip()
        if depth:
            values["max_send_depth"] = depth
        level = os.environ.get("BUSLINE_LOG_LEVEL", "").strip()
        if level:
            values["log_level"] = level.upper()
        return cls(**values)
