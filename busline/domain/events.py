"""Actions exchanged with an external store and the source tags that mark them."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

EXTERNAL_SOURCE = "external"
"""Source tag reserved for messages that came from the external store."""


class Action(BaseModel):
    """A store action: a ``type`` plus arbitrary extra fields.

    Plain dicts work just as well; this model is a typed convenience.
    """

    model_config = ConfigDict(extra="allow")

    type: str


def action_type(action: Any) -> Any:
    """Return the ``type`` of a store action, or ``None`` when it has none."""
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)
