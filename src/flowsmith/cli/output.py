"""Text formatting for CLI output."""

from __future__ import annotations

from collections.abc import Sequence

from flowsmith.issues import GenerationIssue

__all__ = ["format_error", "format_issues", "format_summary"]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("Model not found", suggestion="Check the path"))
        Error: Model not found
        Suggestion: Check the path
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_issues(issues: Sequence[GenerationIssue]) -> list[str]:
    """One line per issue, prefixed with its kind."""
    return [f"{issue.kind.value}: {issue}" for issue in issues]


def format_summary(files: int, workflows: int, warnings: int) -> str:
    file_noun = "file" if files == 1 else "files"
    workflow_noun = "workflow" if workflows == 1 else "workflows"
    summary = f"Generated {files} {file_noun} for {workflows} {workflow_noun}"
    if warnings:
        warning_noun = "warning" if warnings == 1 else "warnings"
        summary += f" ({warnings} {warning_noun})"
    return summary
