"""Atomic writes for generated documents.

Generated workflow files are written through a temporary file that is renamed
into place, so an interrupted run never leaves a half-written document behind.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from atomicwrites import atomic_write  # type: ignore[import-untyped]

from flowsmith.constants import DEFAULT_JSON_INDENT

__all__ = [
    "write_json_atomic",
    "write_text_atomic",
]


def write_text_atomic(path: Path | str, content: str, *, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content``, creating parent directories.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with atomic_write(str(file_path), mode="w", encoding=encoding, overwrite=True) as f:
        f.write(content)


def write_json_atomic(
    path: Path | str,
    data: Any,
    *,
    indent: int | None = DEFAULT_JSON_INDENT,
) -> None:
    """Serialize ``data`` as JSON and write it atomically.

    Key order is preserved and non-ASCII characters are written as-is.

    Args:
        path: Destination file.
        data: JSON-serializable document.
        indent: Spaces per indentation level, None for compact output.

    Raises:
        OSError: If the write fails.
        TypeError: If ``data`` is not JSON-serializable.
    """
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    write_text_atomic(path, content)
