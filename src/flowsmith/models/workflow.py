"""Pydantic models for the workflow activity model.

The workflow activity model is produced upstream from the source orchestration
and handed to the assembly engine as a tree:

- WorkflowModel: the root container, plus the channels the workflow talks on
- WorkflowActivityContainer: a node that nests further activities and
  declares variables and messages
- WorkflowActivity: a leaf whose ``type`` selects the snippet used to render it

The engine treats the tree as read-only except for the ``UniqueId`` property
stamped onto an object each time it is rendered.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, Field, field_validator

from flowsmith.constants import PROPERTY_UNIQUE_ID

__all__ = [
    "WorkflowObject",
    "WorkflowChannel",
    "WorkflowVariable",
    "WorkflowMessage",
    "WorkflowActivity",
    "WorkflowActivityContainer",
    "WorkflowModel",
]


class WorkflowObject(BaseModel):
    """Base for every element of the workflow model.

    Attributes:
        name: Element name, also used to build debug output file names.
        type: Type tag used for snippet dispatch.
        key: Unique key of the element in the source model.
        description: Optional human-readable description.
        properties: Free-form properties available to snippet templates.
    """

    name: str = Field(..., min_length=1)
    type: str = ""
    key: str = ""
    description: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def unique_id(self) -> int | None:
        """Id stamped by the most recent render of this object, if any."""
        value = self.properties.get(PROPERTY_UNIQUE_ID)
        return value if isinstance(value, int) else None


class WorkflowChannel(WorkflowObject):
    """Communication endpoint of a workflow.

    Activator channels start a new workflow instance and become triggers.
    """

    activator: bool = False
    channel_type: str = ""


class WorkflowVariable(WorkflowObject):
    """Variable declared on a container."""

    data_type: str | None = None


class WorkflowMessage(WorkflowObject):
    """Message declared on a container."""

    message_type: str | None = None


class WorkflowActivity(WorkflowObject):
    """Leaf activity (send, receive, transform, ...)."""

    @property
    def is_container(self) -> bool:
        return False


class WorkflowActivityContainer(WorkflowActivity):
    """Activity that nests child activities.

    Children keep their declaration order, which is also the execution order
    encoded by the binder.

    Attributes:
        activities: Child activities; each is a leaf or another container.
        variables: Variables declared in this scope.
        messages: Messages declared in this scope.
    """

    activities: list[WorkflowActivity] = Field(default_factory=list)
    variables: list[WorkflowVariable] = Field(default_factory=list)
    messages: list[WorkflowMessage] = Field(default_factory=list)

    @field_validator("activities", mode="before")
    @classmethod
    def classify_activities(cls, value: Any) -> Any:
        """Build containers for child entries that carry an ``activities`` key."""
        if not isinstance(value, list):
            return value
        classified: list[Any] = []
        for item in value:
            if isinstance(item, dict) and "activities" in item:
                classified.append(WorkflowActivityContainer.model_validate(item))
            else:
                classified.append(item)
        return classified

    @property
    def is_container(self) -> bool:
        return True

    @property
    def child_containers(self) -> list[WorkflowActivityContainer]:
        return [a for a in self.activities if isinstance(a, WorkflowActivityContainer)]

    def iter_containers(self) -> Iterator[WorkflowActivityContainer]:
        """Yield this container and every nested container, depth-first."""
        yield self
        for child in self.child_containers:
            yield from child.iter_containers()


class WorkflowModel(WorkflowActivityContainer):
    """Root of the workflow activity model.

    Attributes:
        channels: Endpoints the workflow receives from and sends to.
    """

    channels: list[WorkflowChannel] = Field(default_factory=list)

    def activator_channels(self) -> list[WorkflowChannel]:
        """Return the channels that start a new workflow instance."""
        return [channel for channel in self.channels if channel.activator]
