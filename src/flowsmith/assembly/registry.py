"""Type-directed dispatch of containers and activities to handlers.

Two independent tables map a workflow object type to its handler: one for
containers and one for leaf activities. Each table has a mandatory default
entry used for every unregistered type.
"""

from __future__ import annotations

from enum import Enum

from flowsmith.assembly.handlers import (
    ActivityHandler,
    ContainerHandler,
    DecisionBranchHandler,
    DefaultActivityHandler,
    DefaultContainerHandler,
    ReceiveActivityHandler,
    SendActivityHandler,
)
from flowsmith.logging import get_logger

__all__ = ["ActivityType", "HandlerRegistry", "create_default_registry"]

logger = get_logger(__name__)


class ActivityType(str, Enum):
    """Workflow object types with dedicated handlers."""

    DECISION_BRANCH = "DecisionBranch"
    RECEIVE = "Receive"
    SEND = "Send"


class HandlerRegistry:
    """Handler tables for containers and activities.

    Args:
        default_container: Handler for containers of unregistered types.
        default_activity: Handler for activities of unregistered types.
    """

    def __init__(
        self,
        default_container: ContainerHandler,
        default_activity: ActivityHandler,
    ) -> None:
        self.default_container = default_container
        self.default_activity = default_activity
        self._containers: dict[str, ContainerHandler] = {}
        self._activities: dict[str, ActivityHandler] = {}

    def register_container(self, type_name: str, handler: ContainerHandler) -> None:
        """Register (or replace) the handler for containers of ``type_name``."""
        self._containers[str(type_name)] = handler
        logger.debug("container_handler_registered", type=str(type_name))

    def register_activity(self, type_name: str, handler: ActivityHandler) -> None:
        """Register (or replace) the handler for activities of ``type_name``."""
        self._activities[str(type_name)] = handler
        logger.debug("activity_handler_registered", type=str(type_name))

    def container_handler(self, type_name: str) -> ContainerHandler:
        return self._containers.get(type_name, self.default_container)

    def activity_handler(self, type_name: str) -> ActivityHandler:
        return self._activities.get(type_name, self.default_activity)

    @property
    def container_types(self) -> list[str]:
        return list(self._containers)

    @property
    def activity_types(self) -> list[str]:
        return list(self._activities)


def create_default_registry() -> HandlerRegistry:
    """Build the registry used for Logic App Standard workflows.

    Example:
        ```python
        registry = create_default_registry()
        handler = registry.container_handler("DecisionBranch")
        ```
    """
    default_activity = DefaultActivityHandler()
    registry = HandlerRegistry(
        default_container=DefaultContainerHandler(),
        default_activity=default_activity,
    )
    registry.register_container(ActivityType.DECISION_BRANCH.value, DecisionBranchHandler())
    registry.register_activity(
        ActivityType.RECEIVE.value, ReceiveActivityHandler(default_activity)
    )
    registry.register_activity(ActivityType.SEND.value, SendActivityHandler(default_activity))
    return registry
