"""flowsmith exception hierarchy.

All exceptions can be imported from this package:
    from flowsmith.exceptions import ConfigError, GenerationError
"""

from __future__ import annotations

from flowsmith.exceptions.base import FlowsmithError
from flowsmith.exceptions.config import ConfigError
from flowsmith.exceptions.generation import (
    GenerationCancelledError,
    GenerationError,
    ModelLoadError,
    SnippetRenderError,
)

__all__ = [
    "FlowsmithError",
    "ConfigError",
    "GenerationCancelledError",
    "GenerationError",
    "ModelLoadError",
    "SnippetRenderError",
]
