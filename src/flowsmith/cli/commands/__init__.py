"""CLI commands."""

from __future__ import annotations

from flowsmith.cli.commands.generate import generate

__all__ = ["generate"]
