"""CLI context and exit codes for flowsmith."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from flowsmith.config import FlowsmithConfig

__all__ = ["ExitCode", "CLIContext"]


class ExitCode(IntEnum):
    """Exit codes of the flowsmith CLI.

    - 0 for success
    - 1 for failure (invalid input or errors recorded during generation)
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI options and the loaded configuration.

    Attributes:
        config: Loaded flowsmith configuration.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: FlowsmithConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False
