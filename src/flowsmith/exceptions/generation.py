"""Exceptions raised while loading models and generating workflows.

Exception Hierarchy:
    FlowsmithError
    ├── ModelLoadError (migration model file cannot be read or validated)
    ├── SnippetRenderError (template rendering or JSON parsing failed)
    ├── GenerationError (one or more workflows recorded errors)
    └── GenerationCancelledError (run stopped through the cancel event)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from flowsmith.exceptions.base import FlowsmithError

if TYPE_CHECKING:
    from flowsmith.generation.generator import GenerationReport
    from flowsmith.issues import GenerationIssue


class ModelLoadError(FlowsmithError):
    """Raised when a migration model file cannot be loaded.

    Attributes:
        file_path: Path to the file being loaded.
    """

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        super().__init__(message)


class SnippetRenderError(FlowsmithError):
    """Raised when a snippet cannot be rendered into a JSON fragment.

    Covers template syntax/runtime errors and rendered text that is not
    valid JSON.

    Attributes:
        template_file: The snippet template that failed.
        cause: Underlying error message.
    """

    def __init__(self, template_file: str, cause: str) -> None:
        self.template_file = template_file
        self.cause = cause
        super().__init__(f"Failed to render snippet '{template_file}': {cause}")


class GenerationError(FlowsmithError):
    """Raised after a run in which at least one error was recorded.

    Generation is best-effort: every workflow and artifact is attempted and
    the errors are reported together once the run is over.

    Attributes:
        issues: The error-level issues recorded during the run.
        report: The run report, including the files written before the
            run failed. None when raised outside a generation run.
    """

    def __init__(
        self,
        issues: Sequence[GenerationIssue],
        report: GenerationReport | None = None,
    ) -> None:
        self.issues = list(issues)
        self.report = report
        count = len(self.issues)
        noun = "error" if count == 1 else "errors"
        super().__init__(f"Workflow generation failed with {count} {noun}")


class GenerationCancelledError(FlowsmithError):
    """Raised when a run is cancelled before all workflows were built.

    Attributes:
        workflow: Name of the workflow that was about to be built.
    """

    def __init__(self, workflow: str) -> None:
        self.workflow = workflow
        super().__init__(f"Workflow generation cancelled before '{workflow}'")
