"""Jinja2 rendering of snippet templates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, TemplateError

from flowsmith.constants import DEFAULT_TEMPLATE_EXTENSIONS
from flowsmith.exceptions import SnippetRenderError

__all__ = ["TemplateRenderer"]


class TemplateRenderer:
    """Renders snippet text with Jinja2.

    Snippets are JSON fragments, so output is never HTML-escaped and the
    trailing newline of the template is preserved.

    Attributes:
        env: Jinja2 environment shared by every render.
        extensions: Lower-cased file extensions treated as templates.
    """

    def __init__(self, extensions: Iterable[str] = DEFAULT_TEMPLATE_EXTENSIONS) -> None:
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.env = Environment(
            autoescape=False,  # JSON output, not markup
            keep_trailing_newline=True,
        )

    def is_template(self, path: Path | str) -> bool:
        """Whether ``path`` has one of the templating extensions."""
        return Path(path).suffix.lower() in self.extensions

    def render(
        self,
        text: str,
        context: Mapping[str, Any],
        *,
        template_file: str = "<string>",
    ) -> str:
        """Render ``text`` against ``context``.

        Raises:
            SnippetRenderError: If the template fails to compile or render.
        """
        try:
            template = self.env.from_string(text)
            return template.render(**context)
        except TemplateError as e:
            raise SnippetRenderError(template_file, str(e)) from e
