"""Per-workflow state shared by the assembly handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowsmith.issues import IssueCollector, IssueKind
from flowsmith.logging import get_logger
from flowsmith.models.migration import ProcessManager, ResourceTemplate, Snippet
from flowsmith.models.workflow import WorkflowModel, WorkflowObject
from flowsmith.snippets.keys import placeholder_key, snippet_key
from flowsmith.snippets.payload import RenderedPayload
from flowsmith.snippets.resolver import SnippetResolver

__all__ = ["IdGenerator", "AssemblyContext"]

logger = get_logger(__name__)


class IdGenerator:
    """Monotonic counter stamped onto workflow objects as they are rendered.

    One generator exists per process manager build; it is never shared
    between workflows.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start

    def next(self) -> int:
        self._value += 1
        return self._value

    @property
    def current(self) -> int:
        """Last id handed out (0 before the first call to ``next``)."""
        return self._value


@dataclass
class AssemblyContext:
    """Everything a handler needs to render snippets for one workflow.

    Attributes:
        resolver: Resolves and renders snippets.
        process_manager: Owner of the snippets and the workflow model.
        resource_template: Resource the generated documents belong to.
        ids: Id generator of this workflow build.
        issues: Run-scoped issue collector.
    """

    resolver: SnippetResolver
    process_manager: ProcessManager
    resource_template: ResourceTemplate | None
    ids: IdGenerator = field(default_factory=IdGenerator)
    issues: IssueCollector = field(default_factory=IssueCollector)

    @property
    def workflow(self) -> str:
        return self.process_manager.name

    @property
    def model(self) -> WorkflowModel | None:
        return self.process_manager.workflow_model

    def resolve(self, element_kind: str, type_tag: str | None) -> Snippet | None:
        """Resolve a snippet, recording an issue when not even a placeholder exists."""
        snippet = self.resolver.resolve(self.process_manager, element_kind, type_tag)
        if snippet is None:
            self.issues.record(
                IssueKind.MISSING_PLACEHOLDER,
                self.workflow,
                f"No snippet registered for '{snippet_key(element_kind, type_tag)}' "
                "and no placeholder snippet",
                path=placeholder_key(element_kind),
            )
        return snippet

    def render(self, obj: WorkflowObject | None, snippet: Snippet) -> RenderedPayload | None:
        return self.resolver.render(
            self.process_manager,
            obj,
            self.resource_template,
            snippet,
            self.ids,
            self.issues,
        )

    def render_json(self, obj: WorkflowObject | None, snippet: Snippet) -> Any | None:
        return self.resolver.render_json(
            self.process_manager,
            obj,
            self.resource_template,
            snippet,
            self.ids,
            self.issues,
        )

    def record(self, kind: IssueKind, message: str, path: str | None = None) -> None:
        self.issues.record(kind, self.workflow, message, path=path)
