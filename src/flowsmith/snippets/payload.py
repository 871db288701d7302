"""Typed view of a rendered snippet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flowsmith.constants import (
    PAYLOAD_ACTION,
    PAYLOAD_ACTION_PATH,
    PAYLOAD_MESSAGE,
    PAYLOAD_TRIGGER,
    PAYLOAD_VARIABLE,
)

__all__ = ["RenderedPayload"]


@dataclass(frozen=True, slots=True)
class RenderedPayload:
    """Fragments a rendered snippet may contribute to a workflow definition.

    Each mapping goes from element name to element body, in the order the
    snippet declares them. Bodies are inserted into the document unmodified.

    Attributes:
        actions: ``workflowDefinitionAction`` entries.
        trigger: ``workflowTrigger`` entries.
        variable: ``workflowDefinitionVariable`` entries.
        message: ``workflowDefinitionMessage`` entries.
        action_path: ``workflowDefinitionActionPath`` override locating the
            child action collection of a container.
    """

    actions: dict[str, Any] | None = None
    trigger: dict[str, Any] | None = None
    variable: dict[str, Any] | None = None
    message: dict[str, Any] | None = None
    action_path: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> RenderedPayload:
        """Pick the known payload sections out of a parsed snippet.

        Sections that are missing or not JSON objects are left as None.
        """
        if not isinstance(data, dict):
            return cls()
        path = data.get(PAYLOAD_ACTION_PATH)
        return cls(
            actions=_section(data, PAYLOAD_ACTION),
            trigger=_section(data, PAYLOAD_TRIGGER),
            variable=_section(data, PAYLOAD_VARIABLE),
            message=_section(data, PAYLOAD_MESSAGE),
            action_path=path if isinstance(path, str) and path.strip() else None,
        )

    @property
    def first_action(self) -> tuple[str, Any] | None:
        """First action entry, or None when the payload has no actions."""
        if not self.actions:
            return None
        return next(iter(self.actions.items()))


def _section(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None
