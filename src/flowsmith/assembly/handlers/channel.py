"""Conversion of send and receive activities through channel snippets.

Every ``channel.send.*`` (or ``channel.receive.*``) snippet registered on the
process manager is rendered against the activity, in registration order.
When none are registered the activity is converted like any other.
"""

from __future__ import annotations

from flowsmith.assembly.context import AssemblyContext
from flowsmith.assembly.handlers.activity import DefaultActivityHandler
from flowsmith.assembly.handlers.base import insert_actions
from flowsmith.constants import ELEMENT_CHANNEL_RECEIVE, ELEMENT_CHANNEL_SEND
from flowsmith.document.scope import ActionScope
from flowsmith.logging import get_logger
from flowsmith.models.workflow import WorkflowActivity
from flowsmith.snippets.keys import prefix_key, snippet_key

__all__ = ["ChannelActivityHandler", "ReceiveActivityHandler", "SendActivityHandler"]

logger = get_logger(__name__)


class ChannelActivityHandler:
    """Renders every snippet of one channel element kind for an activity.

    Args:
        element_kind: ``channel.send`` or ``channel.receive``.
        fallback: Handler used when no channel snippet is registered.
    """

    def __init__(
        self,
        element_kind: str,
        fallback: DefaultActivityHandler | None = None,
    ) -> None:
        self.element_kind = element_kind
        self.fallback = fallback or DefaultActivityHandler()

    def convert(
        self,
        context: AssemblyContext,
        activity: WorkflowActivity,
        parent: ActionScope,
    ) -> bool:
        prefix = prefix_key(snippet_key(self.element_kind))
        snippets = context.process_manager.snippets_with_prefix(prefix)
        if not snippets:
            logger.debug(
                "no_channel_snippets",
                workflow=context.workflow,
                activity=activity.name,
                prefix=prefix,
            )
            return self.fallback.convert(context, activity, parent)

        converted = False
        for snippet in snippets:
            payload = context.render(activity, snippet)
            if payload is None or not payload.actions:
                continue
            if insert_actions(context, payload.actions, parent, source=activity.name):
                converted = True
        return converted


class SendActivityHandler(ChannelActivityHandler):
    def __init__(self, fallback: DefaultActivityHandler | None = None) -> None:
        super().__init__(ELEMENT_CHANNEL_SEND, fallback)


class ReceiveActivityHandler(ChannelActivityHandler):
    def __init__(self, fallback: DefaultActivityHandler | None = None) -> None:
        super().__init__(ELEMENT_CHANNEL_RECEIVE, fallback)
