"""In-place editing of workflow definition documents."""

from __future__ import annotations

from flowsmith.document.scope import ActionDocument, ActionScope, parse_action_path

__all__ = ["ActionDocument", "ActionScope", "parse_action_path"]
