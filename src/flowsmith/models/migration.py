"""Pydantic models for the migration target handed to the generator.

A migration model lists the target applications; each application owns the
process managers whose workflows are generated. A process manager carries
the snippets registered for it by the analysis stage, the deployable resource
templates it belongs to, and its workflow activity model.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from flowsmith.models.workflow import WorkflowModel

__all__ = [
    "TargetEnvironment",
    "Snippet",
    "ResourceTemplate",
    "ProcessManager",
    "TargetApplication",
    "MigrationModel",
]


class TargetEnvironment(str, Enum):
    """Runtime the migration targets.

    Values:
        CONSUMPTION: Multi-tenant Logic Apps (one workflow per resource).
        STANDARD: Single-tenant Logic Apps hosting many workflows.
        STANDARDLITE: Standard without the optional platform services.
    """

    CONSUMPTION = "consumption"
    STANDARD = "standard"
    STANDARDLITE = "standardlite"

    @property
    def hosts_standard_workflows(self) -> bool:
        return self in (TargetEnvironment.STANDARD, TargetEnvironment.STANDARDLITE)


class Snippet(BaseModel):
    """Snippet registered against a process manager.

    Attributes:
        resource_type: Semantic key, ``<family>.<elementKind>.<typeTag>``.
        template_file: File path relative to a template search path.
        output_path: Directory (relative to the generation path) where the
            rendered snippet is written for debugging. Empty disables it.
    """

    resource_type: str = Field(..., min_length=1)
    template_file: str = Field(..., min_length=1)
    output_path: str | None = None


class ResourceTemplate(BaseModel):
    """Deployable resource the generated files belong to.

    Attributes:
        resource_type: Resource family, e.g. the Logic App Standard type.
        resource_name: Name of the deployed resource.
        parameters: Named parameters, including the output file path of each
            generated workflow document.
    """

    resource_type: str = Field(..., min_length=1)
    resource_name: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)


class ProcessManager(BaseModel):
    """Workflow-hosting intermediary produced by the analysis stage."""

    name: str = Field(..., min_length=1)
    key: str = ""
    snippets: list[Snippet] = Field(default_factory=list)
    resources: list[ResourceTemplate] = Field(default_factory=list)
    workflow_model: WorkflowModel | None = None

    def find_snippet(self, resource_type: str) -> Snippet | None:
        """Return the first snippet registered under exactly ``resource_type``."""
        wanted = resource_type.lower()
        for snippet in self.snippets:
            if snippet.resource_type.lower() == wanted:
                return snippet
        return None

    def snippets_with_prefix(self, prefix: str) -> list[Snippet]:
        """Return snippets whose key starts with ``prefix``, in registration order."""
        wanted = prefix.lower()
        return [s for s in self.snippets if s.resource_type.lower().startswith(wanted)]

    def find_resource(self, resource_type: str) -> ResourceTemplate | None:
        for resource in self.resources:
            if resource.resource_type.lower() == resource_type.lower():
                return resource
        return None


class TargetApplication(BaseModel):
    name: str = Field(..., min_length=1)
    process_managers: list[ProcessManager] = Field(default_factory=list)


class MigrationModel(BaseModel):
    """Root of the migration target.

    Attributes:
        target_environment: Runtime the generated workflows are deployed to.
        applications: Target applications in migration order.
    """

    target_environment: TargetEnvironment = TargetEnvironment.STANDARD
    applications: list[TargetApplication] = Field(default_factory=list)
