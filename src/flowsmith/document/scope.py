"""Structured access to a workflow definition document.

A workflow definition is plain JSON: ``{"definition": {"triggers": {...},
"actions": {...}}}`` where every action collection is an ordered mapping of
action name to action body. ``ActionScope`` wraps one such mapping in place,
so changes made through a scope are visible in the document it came from.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import Any

from flowsmith.constants import ACTIONS_KEY, DEFINITION_KEY, TRIGGERS_KEY, TYPE_KEY

__all__ = ["ActionScope", "ActionDocument", "parse_action_path"]

# ['name'], ["name"] or a bare dotted segment
_PATH_TOKEN = re.compile(r"""\['([^']*)'\]|\["([^"]*)"\]|([^.\[\]]+)""")


def parse_action_path(text: str) -> list[str]:
    """Split an action path override into segments.

    Accepts JSONPath-like forms with or without the ``$`` root.

    Example:
        >>> parse_action_path("$.['Scope_1'].actions")
        ['Scope_1', 'actions']
        >>> parse_action_path("Scope_1.actions")
        ['Scope_1', 'actions']
    """
    segments: list[str] = []
    for match in _PATH_TOKEN.finditer(text.strip()):
        segment = next(group for group in match.groups() if group is not None)
        segments.append(segment)
    if segments and segments[0] == "$":
        segments = segments[1:]
    return segments


class ActionScope:
    """An ordered ``name -> body`` mapping inside a document.

    Args:
        entries: The mapping to wrap; it is modified in place.
        path: Segments locating the mapping, used in log and issue messages.
    """

    def __init__(self, entries: dict[str, Any], path: Sequence[str] = ()) -> None:
        self.entries = entries
        self.path = tuple(path)

    def add(self, name: str, body: Any) -> bool:
        """Append ``name``; returns False and leaves the scope unchanged if taken."""
        if name in self.entries:
            return False
        self.entries[name] = body
        return True

    def get(self, name: str) -> Any | None:
        return self.entries.get(name)

    def names(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, Any]]:
        return list(self.entries.items())

    def resolve(self, segments: Sequence[str]) -> ActionScope | None:
        """Follow ``segments`` from this scope to a nested mapping.

        An empty path (the ``$`` root) is this scope. Returns None when a
        segment is missing or does not lead to an object.
        """
        if not segments:
            return self
        current: Any = self.entries
        for segment in segments:
            if not isinstance(current, dict) or segment not in current:
                return None
            current = current[segment]
        if not isinstance(current, dict):
            return None
        return ActionScope(current, self.path + tuple(segments))

    def child_actions(self, name: str) -> ActionScope | None:
        """Scope of the ``actions`` collection nested in action ``name``."""
        return self.resolve([name, ACTIONS_KEY])

    def find_actions_of_type(self, action_type: str) -> list[tuple[str, dict[str, Any]]]:
        """Entries whose body declares ``"type": action_type``."""
        return [
            (name, body)
            for name, body in self.entries.items()
            if isinstance(body, dict) and body.get(TYPE_KEY) == action_type
        ]

    @property
    def path_text(self) -> str:
        return ".".join(self.path) or "$"

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"ActionScope(path={self.path_text!r}, names={self.names()!r})"


class ActionDocument:
    """A loaded workflow definition skeleton."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.data = data

    @property
    def definition(self) -> dict[str, Any] | None:
        definition = self.data.get(DEFINITION_KEY)
        return definition if isinstance(definition, dict) else None

    @property
    def triggers(self) -> ActionScope | None:
        return self._scope(TRIGGERS_KEY)

    @property
    def actions(self) -> ActionScope | None:
        return self._scope(ACTIONS_KEY)

    def to_json(self) -> dict[str, Any]:
        return self.data

    def _scope(self, key: str) -> ActionScope | None:
        definition = self.definition
        if definition is None:
            return None
        entries = definition.get(key)
        if not isinstance(entries, dict):
            return None
        return ActionScope(entries, (DEFINITION_KEY, key))
