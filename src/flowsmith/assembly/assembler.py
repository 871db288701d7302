"""Recursive assembly of the workflow activity tree into actions."""

from __future__ import annotations

from flowsmith.assembly.context import AssemblyContext
from flowsmith.assembly.handlers.base import insert_actions
from flowsmith.assembly.registry import HandlerRegistry, create_default_registry
from flowsmith.constants import ELEMENT_ACTIVITY_CONTAINER
from flowsmith.document.scope import ActionScope
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivityContainer
from flowsmith.snippets.keys import prefix_key, snippet_key

__all__ = ["WorkflowAssembler"]

logger = get_logger(__name__)


class WorkflowAssembler:
    """Walks containers depth-first, dispatching each node to its handler.

    Args:
        registry: Handler tables; defaults to ``create_default_registry()``.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def assemble(
        self,
        context: AssemblyContext,
        container: WorkflowActivityContainer,
        parent: ActionScope,
    ) -> bool:
        """Convert ``container`` and its subtree into actions under ``parent``.

        Returns:
            False when the container was not converted; its subtree is then
            skipped entirely.
        """
        handler = self.registry.container_handler(container.type)
        outcome = handler.convert(context, container, parent)
        if not outcome.converted or outcome.scope is None:
            logger.debug(
                "container_skipped",
                workflow=context.workflow,
                container=container.name,
            )
            return False

        scope = outcome.scope
        count = self.add_prebuilt_actions(context, container, scope)
        if count:
            logger.debug(
                "prebuilt_actions_added",
                workflow=context.workflow,
                container=container.name,
                count=count,
            )

        for child in container.activities:
            if isinstance(child, WorkflowActivityContainer):
                self.assemble(context, child, scope)
            else:
                self.registry.activity_handler(child.type).convert(context, child, scope)
        return True

    def add_prebuilt_actions(
        self,
        context: AssemblyContext,
        container: WorkflowActivityContainer,
        scope: ActionScope,
    ) -> int:
        """Insert ``activitycontainer.<type>.*`` snippets, in registration order.

        The container's own ``activitycontainer.<type>`` snippet is not a
        pre-built action.
        """
        if not container.type:
            return 0

        prefix = prefix_key(snippet_key(ELEMENT_ACTIVITY_CONTAINER, container.type))
        count = 0
        for snippet in context.process_manager.snippets_with_prefix(prefix):
            payload = context.render(container, snippet)
            if payload is None or not payload.actions:
                continue
            count += len(
                insert_actions(context, payload.actions, scope, source=snippet.resource_type)
            )
        return count
