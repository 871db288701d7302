"""Handler protocols and helpers shared by the conversion handlers.

Container handlers turn a WorkflowActivityContainer into one or more actions
and return the scope its children are added to. Activity handlers turn a leaf
WorkflowActivity into actions inserted into the current scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from flowsmith.assembly.context import AssemblyContext
from flowsmith.constants import ACTIONS_KEY
from flowsmith.document.scope import ActionScope, parse_action_path
from flowsmith.issues import IssueKind
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivity, WorkflowActivityContainer
from flowsmith.snippets.payload import RenderedPayload

__all__ = [
    "ContainerOutcome",
    "ContainerHandler",
    "ActivityHandler",
    "insert_actions",
    "locate_child_scope",
]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ContainerOutcome:
    """Result of converting a container.

    Attributes:
        converted: False when the container (and its subtree) was skipped.
        scope: Scope that receives the container's children.
    """

    converted: bool
    scope: ActionScope | None = None

    @classmethod
    def skipped(cls) -> ContainerOutcome:
        return cls(converted=False)


@runtime_checkable
class ContainerHandler(Protocol):
    """Protocol for container conversion strategies."""

    def convert(
        self,
        context: AssemblyContext,
        container: WorkflowActivityContainer,
        parent: ActionScope,
    ) -> ContainerOutcome:
        """Insert the container's action(s) into ``parent``.

        Args:
            context: Assembly state of the current workflow.
            container: The container being converted.
            parent: Scope the container's action(s) go into.

        Returns:
            The outcome; when converted, ``scope`` is where children go.
        """
        ...


@runtime_checkable
class ActivityHandler(Protocol):
    """Protocol for leaf activity conversion strategies."""

    def convert(
        self,
        context: AssemblyContext,
        activity: WorkflowActivity,
        parent: ActionScope,
    ) -> bool:
        """Insert the activity's action(s) into ``parent``.

        Returns:
            True if at least one action was inserted.
        """
        ...


def insert_actions(
    context: AssemblyContext,
    actions: dict[str, Any],
    scope: ActionScope,
    *,
    source: str,
) -> list[str]:
    """Insert every action into ``scope`` in order, skipping taken names.

    Returns:
        Names that were actually inserted.
    """
    inserted: list[str] = []
    for name, body in actions.items():
        if scope.add(name, body):
            inserted.append(name)
            logger.debug(
                "action_added",
                workflow=context.workflow,
                action=name,
                source=source,
                scope=scope.path_text,
            )
        else:
            logger.warning(
                "duplicate_action_name",
                workflow=context.workflow,
                action=name,
                source=source,
                scope=scope.path_text,
            )
    return inserted


def locate_child_scope(
    context: AssemblyContext,
    payload: RenderedPayload,
    action_name: str,
    parent: ActionScope,
) -> ActionScope | None:
    """Find where a container's children go.

    Uses the snippet's action path override (relative to ``parent``) or
    ``<action_name>.actions``. Records STRUCTURAL_PATH_NOT_FOUND on failure.
    """
    if payload.action_path:
        segments = parse_action_path(payload.action_path)
    else:
        segments = [action_name, ACTIONS_KEY]

    scope = parent.resolve(segments)
    if scope is None:
        path = ".".join((*parent.path, *segments))
        context.record(
            IssueKind.STRUCTURAL_PATH_NOT_FOUND,
            f"Unable to find the child action collection of '{action_name}'",
            path=path,
        )
    return scope
