"""Default conversion of leaf activities."""

from __future__ import annotations

from flowsmith.assembly.context import AssemblyContext
from flowsmith.assembly.handlers.base import insert_actions
from flowsmith.constants import ELEMENT_ACTIVITY
from flowsmith.document.scope import ActionScope
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivity

__all__ = ["DefaultActivityHandler"]

logger = get_logger(__name__)


class DefaultActivityHandler:
    """Renders ``activity.<type>`` (or the activity placeholder) into ``parent``."""

    def convert(
        self,
        context: AssemblyContext,
        activity: WorkflowActivity,
        parent: ActionScope,
    ) -> bool:
        logger.debug(
            "converting_activity",
            workflow=context.workflow,
            activity=activity.name,
            type=activity.type,
        )
        snippet = context.resolve(ELEMENT_ACTIVITY, activity.type)
        if snippet is None:
            return False

        payload = context.render(activity, snippet)
        if payload is None or not payload.actions:
            return False

        return bool(insert_actions(context, payload.actions, parent, source=activity.name))
