"""Snippet lookup, rendering and parsing.

Snippets are JSON fragments (optionally Jinja2 templates) registered against a
process manager under semantic keys. This package finds the snippet for a
workflow element, renders it and exposes the fragments it contributes.
"""

from __future__ import annotations

from flowsmith.snippets.keys import (
    parameter_key,
    placeholder_key,
    prefix_key,
    snippet_key,
)
from flowsmith.snippets.payload import RenderedPayload
from flowsmith.snippets.renderer import TemplateRenderer
from flowsmith.snippets.repository import FileRepository, SnippetRepository
from flowsmith.snippets.resolver import SnippetResolver

__all__ = [
    "FileRepository",
    "RenderedPayload",
    "SnippetRepository",
    "SnippetResolver",
    "TemplateRenderer",
    "parameter_key",
    "placeholder_key",
    "prefix_key",
    "snippet_key",
]
