"""Default conversion of activity containers."""

from __future__ import annotations

from flowsmith.assembly.context import AssemblyContext
from flowsmith.assembly.handlers.base import (
    ContainerOutcome,
    insert_actions,
    locate_child_scope,
)
from flowsmith.constants import ELEMENT_ACTIVITY_CONTAINER
from flowsmith.document.scope import ActionScope
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivityContainer
from flowsmith.snippets.payload import RenderedPayload

__all__ = ["DefaultContainerHandler", "render_container"]

logger = get_logger(__name__)


def render_container(
    context: AssemblyContext, container: WorkflowActivityContainer
) -> RenderedPayload | None:
    """Render the container's snippet (or the container placeholder).

    Returns None when no snippet applies or the snippet has no actions.
    """
    snippet = context.resolve(ELEMENT_ACTIVITY_CONTAINER, container.type)
    if snippet is None:
        return None

    payload = context.render(container, snippet)
    if payload is None or not payload.actions:
        logger.debug(
            "container_snippet_has_no_actions",
            workflow=context.workflow,
            container=container.name,
            snippet=snippet.resource_type,
        )
        return None
    return payload


class DefaultContainerHandler:
    """Inserts the container's actions and descends into the first one.

    The child scope is ``<firstAction>.actions`` unless the snippet supplies
    an action path override.
    """

    def convert(
        self,
        context: AssemblyContext,
        container: WorkflowActivityContainer,
        parent: ActionScope,
    ) -> ContainerOutcome:
        logger.debug(
            "converting_container",
            workflow=context.workflow,
            container=container.name,
            type=container.type,
        )
        payload = render_container(context, container)
        if payload is None or payload.first_action is None:
            return ContainerOutcome.skipped()

        insert_actions(context, payload.actions or {}, parent, source=container.name)

        first_name, _ = payload.first_action
        scope = locate_child_scope(context, payload, first_name, parent)
        if scope is None:
            return ContainerOutcome.skipped()
        return ContainerOutcome(converted=True, scope=scope)
