"""File access for snippet templates and generated documents.

``FileRepository`` is the only place that touches the file system, so tests
can point it at a temporary directory. ``SnippetRepository`` layers the
template search path on top of it.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from flowsmith.constants import DEFAULT_JSON_INDENT
from flowsmith.logging import get_logger
from flowsmith.utils.atomic import write_json_atomic, write_text_atomic

__all__ = ["FileRepository", "SnippetRepository"]

logger = get_logger(__name__)


class FileRepository:
    """Thin wrapper over the file operations used during generation.

    Attributes:
        json_indent: Indentation used by ``write_json``.
    """

    def __init__(self, json_indent: int = DEFAULT_JSON_INDENT) -> None:
        self.json_indent = json_indent

    def file_exists(self, path: Path) -> bool:
        return path.is_file()

    def directory_exists(self, path: Path) -> bool:
        return path.is_dir()

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        write_text_atomic(path, content)

    def write_json(self, path: Path, data: Any) -> None:
        """Write ``data`` as an indented JSON document."""
        write_json_atomic(path, data, indent=self.json_indent)

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy ``source`` over ``destination``, creating parent directories."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)


class SnippetRepository:
    """Locates snippet template files on an ordered search path.

    Args:
        template_paths: Directories searched in order.
        files: File repository used for every file operation.
    """

    def __init__(
        self,
        template_paths: Sequence[Path],
        files: FileRepository | None = None,
    ) -> None:
        self.template_paths = [Path(p) for p in template_paths]
        self.files = files or FileRepository()

    def find(self, template_file: str) -> Path | None:
        """Return the first search-path entry containing ``template_file``.

        Template file names may use either path separator.
        """
        relative = Path(template_file.replace("\\", "/"))
        for template_path in self.template_paths:
            candidate = template_path / relative
            if self.files.file_exists(candidate):
                logger.debug(
                    "snippet_file_found",
                    template_file=template_file,
                    path=str(candidate),
                )
                return candidate
        return None

    def load(self, path: Path) -> str:
        return self.files.read_text(path)
