"""Utility helpers for flowsmith."""

from __future__ import annotations

from flowsmith.utils.atomic import write_json_atomic, write_text_atomic
from flowsmith.utils.paths import safe_file_path

__all__ = ["safe_file_path", "write_json_atomic", "write_text_atomic"]
