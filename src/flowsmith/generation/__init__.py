"""Generation of workflow documents for a migration model."""

from __future__ import annotations

from flowsmith.generation.artifacts import ArtifactKind
from flowsmith.generation.generator import GenerationReport, WorkflowGenerator

__all__ = ["ArtifactKind", "GenerationReport", "WorkflowGenerator"]
