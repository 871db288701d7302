"""Path helpers for generated files."""

from __future__ import annotations

import re

__all__ = ["safe_file_path"]

# Characters that are not allowed in a single path segment
_UNSAFE_SEGMENT_CHARS = re.compile(r'[\\/:*?"<>| ]')


def safe_file_path(value: str) -> str:
    """Sanitize a relative path built from model names.

    Backslashes are normalized to forward slashes, doubled separators and
    empty segments are dropped, and characters that are invalid in file
    names (including spaces) are removed from each segment.

    Args:
        value: Raw path, possibly containing workflow object names.

    Returns:
        Forward-slash separated path with sanitized segments.

    Example:
        >>> safe_file_path("3.Receive Order?")
        '3.ReceiveOrder'
        >>> safe_file_path("debug\\\\snippets//a b")
        'debug/snippets/ab'
    """
    normalized = value.replace("\\", "/")
    segments = (_UNSAFE_SEGMENT_CHARS.sub("", part) for part in normalized.split("/"))
    return "/".join(segment for segment in segments if segment)
