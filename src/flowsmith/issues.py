"""Issues recorded while generating workflows.

Generation is best-effort: problems that only affect one element, artifact or
workflow are recorded here and the run continues. Each recorded issue is also
logged at the level matching its severity.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from flowsmith.logging import get_logger

__all__ = [
    "IssueSeverity",
    "IssueKind",
    "GenerationIssue",
    "IssueCollector",
]

logger = get_logger(__name__)


class IssueSeverity(str, Enum):
    DEBUG = "debug"
    WARNING = "warning"
    ERROR = "error"


class IssueKind(str, Enum):
    """Kinds of problems recorded during generation.

    Values:
        MISSING_SNIPPET: A snippet file is on no template search path, or a
            required skeleton/process manager resource is absent.
        MISSING_PLACEHOLDER: Neither a type-specific nor a placeholder
            snippet is registered; the element is skipped.
        STRUCTURAL_PATH_NOT_FOUND: A container's child collection (or a
            decision branch's switch) could not be located.
        MISSING_WORKFLOW_MODEL: A process manager has no workflow model.
        MISSING_OUTPUT_PATH: The resource template has no file path
            parameter for an artifact.
        RENDER_FAILED: A snippet failed to render or produced invalid JSON.
    """

    MISSING_SNIPPET = "missing_snippet"
    MISSING_PLACEHOLDER = "missing_placeholder"
    STRUCTURAL_PATH_NOT_FOUND = "structural_path_not_found"
    MISSING_WORKFLOW_MODEL = "missing_workflow_model"
    MISSING_OUTPUT_PATH = "missing_output_path"
    RENDER_FAILED = "render_failed"

    @property
    def severity(self) -> IssueSeverity:
        return _SEVERITIES[self]


_SEVERITIES: dict[IssueKind, IssueSeverity] = {
    IssueKind.MISSING_SNIPPET: IssueSeverity.WARNING,
    IssueKind.MISSING_PLACEHOLDER: IssueSeverity.DEBUG,
    IssueKind.STRUCTURAL_PATH_NOT_FOUND: IssueSeverity.ERROR,
    IssueKind.MISSING_WORKFLOW_MODEL: IssueSeverity.ERROR,
    IssueKind.MISSING_OUTPUT_PATH: IssueSeverity.ERROR,
    IssueKind.RENDER_FAILED: IssueSeverity.ERROR,
}


@dataclass(frozen=True, slots=True)
class GenerationIssue:
    """A single recorded problem.

    Attributes:
        kind: What went wrong.
        workflow: Name of the process manager being generated.
        message: Human-readable description.
        path: Snippet key, file, or document path involved, if any.
    """

    kind: IssueKind
    workflow: str
    message: str
    path: str | None = None

    @property
    def severity(self) -> IssueSeverity:
        return self.kind.severity

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR

    def __str__(self) -> str:
        location = f" ({self.path})" if self.path else ""
        return f"[{self.workflow}] {self.message}{location}"


class IssueCollector:
    """Run-scoped list of recorded issues."""

    def __init__(self) -> None:
        self._issues: list[GenerationIssue] = []

    def record(
        self,
        kind: IssueKind,
        workflow: str,
        message: str,
        path: str | None = None,
    ) -> GenerationIssue:
        """Record an issue and log it at its severity."""
        issue = GenerationIssue(kind=kind, workflow=workflow, message=message, path=path)
        self._issues.append(issue)

        log_method = getattr(logger, issue.severity.value)
        log_method(kind.value, workflow=workflow, detail=message, path=path)
        return issue

    @property
    def issues(self) -> list[GenerationIssue]:
        return list(self._issues)

    @property
    def errors(self) -> list[GenerationIssue]:
        return [issue for issue in self._issues if issue.is_error]

    @property
    def warnings(self) -> list[GenerationIssue]:
        return [
            issue for issue in self._issues if issue.severity is IssueSeverity.WARNING
        ]

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self._issues)

    def of_kind(self, kind: IssueKind) -> list[GenerationIssue]:
        return [issue for issue in self._issues if issue.kind is kind]

    def __iter__(self) -> Iterator[GenerationIssue]:
        return iter(list(self._issues))

    def __len__(self) -> int:
        return len(self._issues)
