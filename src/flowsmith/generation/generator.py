"""Generation of Logic App Standard workflows for a migration model.

For every process manager of every target application the generator builds
the workflow definition and its auxiliary documents:

1. The definition skeleton is rendered, triggers, variables and messages are
   added, the activity tree is assembled into the root actions and sibling
   actions are bound.
2. The parameter skeletons are rendered and populated from the parameter
   snippets.
3. The connection and app setting skeletons are rendered as-is.

Each document is written independently: a missing skeleton or a snippet that
fails to render only skips the document being built. Problems are recorded
and the run continues. After the last workflow, GenerationError is raised
with the run report if any error was recorded.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flowsmith.assembly.assembler import WorkflowAssembler
from flowsmith.assembly.binder import ActionBinder
from flowsmith.assembly.context import AssemblyContext, IdGenerator
from flowsmith.assembly.declarations import (
    add_messages,
    add_parameters,
    add_triggers,
    add_variables,
)
from flowsmith.assembly.registry import HandlerRegistry
from flowsmith.config import FlowsmithConfig
from flowsmith.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_TEMPLATE_EXTENSIONS,
    RESOURCE_TYPE_LOGIC_APP_STANDARD,
)
from flowsmith.document.scope import ActionDocument
from flowsmith.exceptions import (
    GenerationCancelledError,
    GenerationError,
    SnippetRenderError,
)
from flowsmith.generation.artifacts import ArtifactKind
from flowsmith.issues import (
    GenerationIssue,
    IssueCollector,
    IssueKind,
    IssueSeverity,
)
from flowsmith.logging import bind_context, get_logger, unbind_context
from flowsmith.models.migration import MigrationModel, ProcessManager
from flowsmith.snippets.keys import snippet_key
from flowsmith.snippets.renderer import TemplateRenderer
from flowsmith.snippets.repository import FileRepository, SnippetRepository
from flowsmith.snippets.resolver import SnippetResolver

__all__ = ["GenerationReport", "WorkflowGenerator"]

logger = get_logger(__name__)


@dataclass
class GenerationReport:
    """Outcome of a generation run.

    Attributes:
        written_files: Every document written, in generation order.
        issues: Everything recorded during the run.
        workflows: Names of the process managers that were attempted.
        skipped: True when the target environment is not supported.
    """

    written_files: list[Path] = field(default_factory=list)
    issues: list[GenerationIssue] = field(default_factory=list)
    workflows: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def errors(self) -> list[GenerationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> list[GenerationIssue]:
        return [
            issue for issue in self.issues if issue.severity is IssueSeverity.WARNING
        ]

    @property
    def success(self) -> bool:
        return not self.errors


class WorkflowGenerator:
    """Builds workflow documents from snippets and workflow models.

    Args:
        template_paths: Directories searched, in order, for snippet files.
        generation_path: Root directory of every written file.
        extensions: File extensions rendered through Jinja2.
        json_indent: Indentation of written documents.
        registry: Handler registry used by the assembler.
        files: File repository (injectable for tests).
    """

    def __init__(
        self,
        template_paths: Sequence[Path],
        generation_path: Path,
        *,
        extensions: Iterable[str] = DEFAULT_TEMPLATE_EXTENSIONS,
        json_indent: int = DEFAULT_JSON_INDENT,
        registry: HandlerRegistry | None = None,
        files: FileRepository | None = None,
    ) -> None:
        self.template_paths = [Path(p) for p in template_paths]
        self.generation_path = Path(generation_path)
        self.files = files or FileRepository(json_indent=json_indent)
        self.resolver = SnippetResolver(
            SnippetRepository(self.template_paths, self.files),
            TemplateRenderer(extensions),
            self.generation_path,
        )
        self.assembler = WorkflowAssembler(registry)
        self.binder = ActionBinder()

    @classmethod
    def from_config(
        cls, config: FlowsmithConfig, registry: HandlerRegistry | None = None
    ) -> WorkflowGenerator:
        return cls(
            config.template_paths,
            config.generation_path,
            extensions=config.templating.extensions,
            json_indent=config.output.json_indent,
            registry=registry,
        )

    def generate(
        self,
        migration_model: MigrationModel,
        cancel_event: threading.Event | None = None,
    ) -> GenerationReport:
        """Generate every workflow of ``migration_model``.

        Args:
            migration_model: Target applications and their process managers.
            cancel_event: Checked before each workflow; when set, the run
                stops with GenerationCancelledError.

        Returns:
            The run report (when no error was recorded; otherwise it is
            attached to the raised GenerationError).

        Raises:
            GenerationError: If any error was recorded; raised only after
                every workflow was attempted.
            GenerationCancelledError: If ``cancel_event`` was set.
        """
        report = GenerationReport()
        target = migration_model.target_environment
        if not target.hosts_standard_workflows:
            logger.info("target_not_supported", target=target.value)
            report.skipped = True
            return report

        issues = IssueCollector()
        for application in migration_model.applications:
            if not application.process_managers:
                logger.debug("no_workflows_to_generate", application=application.name)
                continue

            for process_manager in application.process_managers:
                if cancel_event is not None and cancel_event.is_set():
                    logger.warning("generation_cancelled", workflow=process_manager.name)
                    raise GenerationCancelledError(process_manager.name)

                report.workflows.append(process_manager.name)
                bind_context(workflow=process_manager.name, application=application.name)
                try:
                    self._build_process_manager(process_manager, issues, report)
                finally:
                    unbind_context("workflow", "application")

        report.issues = issues.issues
        logger.info(
            "generation_completed",
            workflows=len(report.workflows),
            files=len(report.written_files),
            errors=len(report.errors),
            warnings=len(report.warnings),
        )
        if issues.has_errors:
            raise GenerationError(issues.errors, report=report)
        return report

    def _build_process_manager(
        self,
        process_manager: ProcessManager,
        issues: IssueCollector,
        report: GenerationReport,
    ) -> None:
        name = process_manager.name
        if not process_manager.snippets:
            logger.warning("process_manager_has_no_snippets", workflow=name)
            return

        model = process_manager.workflow_model
        if model is None:
            issues.record(
                IssueKind.MISSING_WORKFLOW_MODEL,
                name,
                f"Process manager '{name}' has no workflow model",
            )
            return

        if not self.template_paths:
            logger.warning("no_template_paths", workflow=name)
            return

        if not self.files.directory_exists(self.generation_path):
            logger.debug("creating_generation_path", path=str(self.generation_path))
            self.files.create_directory(self.generation_path)

        resource_template = process_manager.find_resource(RESOURCE_TYPE_LOGIC_APP_STANDARD)
        if resource_template is None:
            logger.warning(
                "resource_template_missing",
                workflow=name,
                resource_type=RESOURCE_TYPE_LOGIC_APP_STANDARD,
            )
            return

        context = AssemblyContext(
            resolver=self.resolver,
            process_manager=process_manager,
            resource_template=resource_template,
            ids=IdGenerator(),
            issues=issues,
        )

        logger.info("generating_workflow", workflow=name)
        for kind in ArtifactKind:
            try:
                written = self._build_artifact(context, kind)
            except SnippetRenderError as e:
                issues.record(
                    IssueKind.RENDER_FAILED,
                    name,
                    str(e),
                    path=e.template_file,
                )
                continue
            if written is not None:
                report.written_files.append(written)

    def _build_artifact(self, context: AssemblyContext, kind: ArtifactKind) -> Path | None:
        process_manager = context.process_manager
        key = snippet_key(kind.element_kind)
        snippet = process_manager.find_snippet(key)
        if snippet is None:
            logger.warning(
                "artifact_snippet_missing",
                workflow=context.workflow,
                artifact=kind.value,
                snippet=key,
            )
            return None

        parameters = context.resource_template.parameters if context.resource_template else {}
        output = parameters.get(kind.output_parameter)
        if not isinstance(output, str) or not output.strip():
            context.record(
                IssueKind.MISSING_OUTPUT_PATH,
                f"Resource template has no '{kind.output_parameter}' parameter "
                f"for the {kind.value} document",
                path=kind.output_parameter,
            )
            return None

        data = context.render_json(context.model, snippet)
        if data is None:
            return None

        if kind is ArtifactKind.DEFINITION:
            data = self._assemble_definition(context, data)
            if data is None:
                return None
        elif kind.populated:
            if isinstance(data, dict):
                add_parameters(context, data)
            else:
                context.record(
                    IssueKind.STRUCTURAL_PATH_NOT_FOUND,
                    f"The {kind.value} skeleton is not a JSON object",
                    path=snippet.template_file,
                )
                return None

        destination = self.generation_path / output.replace("\\", "/")
        self.files.write_json(destination, data)
        logger.debug(
            "artifact_written",
            workflow=context.workflow,
            artifact=kind.value,
            path=str(destination),
        )
        return destination

    def _assemble_definition(self, context: AssemblyContext, data: Any) -> Any | None:
        document = ActionDocument(data if isinstance(data, dict) else {})
        actions = document.actions
        if actions is None:
            context.record(
                IssueKind.STRUCTURAL_PATH_NOT_FOUND,
                "Workflow definition skeleton has no actions collection",
                path="definition.actions",
            )
            return None

        add_triggers(context, document)
        add_variables(context, document)
        add_messages(context, document)

        model = context.model
        if model is not None:
            self.assembler.assemble(context, model, actions)
        links = self.binder.bind(actions)
        logger.debug("actions_bound", workflow=context.workflow, links=links)
        return document.to_json()
