"""Conversion handlers for containers and activities.

All container handlers conform to ContainerHandler and all activity handlers
to ActivityHandler, so the assembler can dispatch to them through the
registry without knowing the concrete strategy.
"""

from __future__ import annotations

from flowsmith.assembly.handlers.activity import DefaultActivityHandler
from flowsmith.assembly.handlers.base import (
    ActivityHandler,
    ContainerHandler,
    ContainerOutcome,
    insert_actions,
    locate_child_scope,
)
from flowsmith.assembly.handlers.channel import (
    ChannelActivityHandler,
    ReceiveActivityHandler,
    SendActivityHandler,
)
from flowsmith.assembly.handlers.container import DefaultContainerHandler
from flowsmith.assembly.handlers.decision import DecisionBranchHandler

__all__ = [
    "ActivityHandler",
    "ChannelActivityHandler",
    "ContainerHandler",
    "ContainerOutcome",
    "DecisionBranchHandler",
    "DefaultActivityHandler",
    "DefaultContainerHandler",
    "ReceiveActivityHandler",
    "SendActivityHandler",
    "insert_actions",
    "locate_child_scope",
]
