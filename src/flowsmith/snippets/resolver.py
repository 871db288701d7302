"""Snippet resolution and rendering.

The resolver turns a workflow object into a JSON fragment:

1. ``resolve`` picks the snippet registered for an element kind and type tag,
   falling back to the element kind's placeholder snippet.
2. ``render_json`` stamps a fresh unique id onto the object, locates the
   snippet file on the template search path, renders it with Jinja2 when it
   has a templating extension, optionally writes the rendered text to the
   debug output directory, and parses the result as JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from flowsmith.constants import PROPERTY_UNIQUE_ID
from flowsmith.exceptions import SnippetRenderError
from flowsmith.issues import IssueCollector, IssueKind
from flowsmith.logging import get_logger
from flowsmith.models.migration import ProcessManager, ResourceTemplate, Snippet
from flowsmith.models.workflow import WorkflowObject
from flowsmith.snippets.keys import placeholder_key, snippet_key
from flowsmith.snippets.payload import RenderedPayload
from flowsmith.snippets.renderer import TemplateRenderer
from flowsmith.snippets.repository import SnippetRepository
from flowsmith.utils.paths import safe_file_path

if TYPE_CHECKING:
    from flowsmith.assembly.context import IdGenerator

__all__ = ["SnippetResolver"]

logger = get_logger(__name__)


class SnippetResolver:
    """Resolves and renders the snippets registered against a process manager.

    Args:
        repository: Locates snippet files on the template search path.
        renderer: Jinja2 renderer for templated snippet files.
        generation_path: Root directory of generated output; debug copies of
            rendered snippets are written below it.
    """

    def __init__(
        self,
        repository: SnippetRepository,
        renderer: TemplateRenderer,
        generation_path: Path,
    ) -> None:
        self.repository = repository
        self.renderer = renderer
        self.generation_path = Path(generation_path)

    def resolve(
        self, owner: ProcessManager, element_kind: str, type_tag: str | None
    ) -> Snippet | None:
        """Find the snippet for ``element_kind``/``type_tag``.

        The type-specific snippet wins; otherwise the placeholder of the
        element kind is returned. None when neither is registered.
        """
        if type_tag:
            snippet = owner.find_snippet(snippet_key(element_kind, type_tag))
            if snippet is not None:
                return snippet
        return owner.find_snippet(placeholder_key(element_kind))

    def render_json(
        self,
        owner: ProcessManager,
        obj: WorkflowObject | None,
        resource_template: ResourceTemplate | None,
        snippet: Snippet,
        ids: IdGenerator,
        issues: IssueCollector | None = None,
    ) -> Any | None:
        """Render ``snippet`` and parse the result as JSON.

        ``obj`` receives a new ``UniqueId`` property on every call, so
        rendering the same object twice gives it a different id.

        Returns:
            The parsed JSON value, or None when the snippet file is not on
            any template path.

        Raises:
            SnippetRenderError: If rendering fails or the output is not JSON.
        """
        unique_id = ids.next()
        if obj is not None:
            obj.properties[PROPERTY_UNIQUE_ID] = unique_id

        path = self.repository.find(snippet.template_file)
        if path is None:
            message = (
                f"Snippet file '{snippet.template_file}' was not found on any "
                "template path"
            )
            if issues is not None:
                issues.record(
                    IssueKind.MISSING_SNIPPET,
                    owner.name,
                    message,
                    path=snippet.resource_type,
                )
            else:
                logger.warning(
                    "snippet_file_missing",
                    workflow=owner.name,
                    template_file=snippet.template_file,
                )
            return None

        raw = self.repository.load(path)
        templated = self.renderer.is_template(path)
        if templated:
            context = {
                "model": owner.workflow_model,
                "process_manager": owner,
                "resource_template": resource_template,
                "snippet": snippet,
                "workflow_object": obj,
            }
            text = self.renderer.render(
                raw, context, template_file=snippet.template_file
            )
        else:
            text = raw

        if snippet.output_path:
            self._write_debug_output(snippet, obj, path, text, unique_id, templated)

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SnippetRenderError(
                snippet.template_file, f"rendered output is not valid JSON: {e}"
            ) from e

    def render(
        self,
        owner: ProcessManager,
        obj: WorkflowObject | None,
        resource_template: ResourceTemplate | None,
        snippet: Snippet,
        ids: IdGenerator,
        issues: IssueCollector | None = None,
    ) -> RenderedPayload | None:
        """Render ``snippet`` into a typed payload (see ``render_json``)."""
        data = self.render_json(owner, obj, resource_template, snippet, ids, issues)
        if data is None:
            return None
        return RenderedPayload.from_json(data)

    def _write_debug_output(
        self,
        snippet: Snippet,
        obj: WorkflowObject | None,
        source: Path,
        text: str,
        unique_id: int,
        templated: bool,
    ) -> None:
        output_dir = self.generation_path / safe_file_path(snippet.output_path or "")
        name = safe_file_path(obj.name) if obj is not None else "workflow"
        files = self.repository.files

        if templated:
            # foo.json.j2 -> foo.json
            destination = output_dir / f"{unique_id}.{name}.{source.stem}"
            files.write_text(destination, text)
        else:
            destination = output_dir / f"{unique_id}.{name}.{source.name}"
            files.copy_file(source, destination)

        logger.debug(
            "snippet_debug_output_written",
            snippet=snippet.resource_type,
            path=str(destination),
        )
