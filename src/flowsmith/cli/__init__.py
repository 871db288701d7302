"""Command-line interface helpers for flowsmith."""

from __future__ import annotations

from flowsmith.cli.context import CLIContext, ExitCode
from flowsmith.cli.output import format_error, format_issues, format_summary

__all__ = ["CLIContext", "ExitCode", "format_error", "format_issues", "format_summary"]
