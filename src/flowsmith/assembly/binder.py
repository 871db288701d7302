"""Sequencing of sibling actions through ``runAfter``.

Logic App actions in one collection run in parallel unless ``runAfter``
says otherwise. Siblings are chained in insertion order: each action runs
after the one before it succeeded.
"""

from __future__ import annotations

from typing import Any

from flowsmith.constants import (
    ACTIONS_KEY,
    CASES_KEY,
    DEFAULT_KEY,
    ELSE_KEY,
    RUN_AFTER_KEY,
    RUN_AFTER_SUCCEEDED,
)
from flowsmith.document.scope import ActionScope
from flowsmith.logging import get_logger

__all__ = ["ActionBinder"]

logger = get_logger(__name__)


class ActionBinder:
    """Chains the actions of a scope and of every nested action collection."""

    def bind(self, scope: ActionScope) -> int:
        """Bind ``scope`` and its nested collections.

        An existing ``runAfter`` entry for the predecessor is left untouched;
        missing ``runAfter`` objects are created.

        Returns:
            Number of run-after links added.
        """
        added = 0
        entries = scope.items()
        for (previous, _), (name, body) in zip(entries, entries[1:]):
            if not isinstance(body, dict):
                continue
            run_after = body.get(RUN_AFTER_KEY)
            if not isinstance(run_after, dict):
                run_after = {}
                body[RUN_AFTER_KEY] = run_after
            if previous not in run_after:
                run_after[previous] = [RUN_AFTER_SUCCEEDED]
                added += 1
                logger.debug("action_bound", action=name, run_after=previous)

        for name, body in entries:
            if isinstance(body, dict):
                for nested in self._nested_scopes(scope, name, body):
                    added += self.bind(nested)
        return added

    def _nested_scopes(
        self, scope: ActionScope, name: str, body: dict[str, Any]
    ) -> list[ActionScope]:
        # actions, cases.<case>.actions, default.actions, else.actions
        nested: list[ActionScope] = []
        base = (*scope.path, name)

        actions = body.get(ACTIONS_KEY)
        if isinstance(actions, dict):
            nested.append(ActionScope(actions, (*base, ACTIONS_KEY)))

        cases = body.get(CASES_KEY)
        if isinstance(cases, dict):
            for case_name, case in cases.items():
                if isinstance(case, dict) and isinstance(case.get(ACTIONS_KEY), dict):
                    nested.append(
                        ActionScope(
                            case[ACTIONS_KEY],
                            (*base, CASES_KEY, case_name, ACTIONS_KEY),
                        )
                    )

        for branch in (DEFAULT_KEY, ELSE_KEY):
            container = body.get(branch)
            if isinstance(container, dict) and isinstance(container.get(ACTIONS_KEY), dict):
                nested.append(
                    ActionScope(container[ACTIONS_KEY], (*base, branch, ACTIONS_KEY))
                )
        return nested
