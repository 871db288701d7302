"""Data models consumed by the workflow generator."""

from __future__ import annotations

from flowsmith.models.loader import load_migration_model
from flowsmith.models.migration import (
    MigrationModel,
    ProcessManager,
    ResourceTemplate,
    Snippet,
    TargetApplication,
    TargetEnvironment,
)
from flowsmith.models.workflow import (
    WorkflowActivity,
    WorkflowActivityContainer,
    WorkflowChannel,
    WorkflowMessage,
    WorkflowModel,
    WorkflowObject,
    WorkflowVariable,
)

__all__ = [
    "MigrationModel",
    "ProcessManager",
    "ResourceTemplate",
    "Snippet",
    "TargetApplication",
    "TargetEnvironment",
    "WorkflowActivity",
    "WorkflowActivityContainer",
    "WorkflowChannel",
    "WorkflowMessage",
    "WorkflowModel",
    "WorkflowObject",
    "WorkflowVariable",
    "load_migration_model",
]
