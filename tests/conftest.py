from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from click.testing import CliRunner

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.config",
    "tests.fixtures.snippets",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Runs automatically for every test so log output goes to stderr at
    WARNING level and never mixes with CLI stdout.
    """
    from flowsmith.logging import clear_context, configure_logging

    configure_logging(level=logging.WARNING)
    yield
    clear_context()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also saves and restores the current working directory so tests that
    use os.chdir() do not affect other tests.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Generator[None, None, None]:
    """Remove FLOWSMITH_ environment variables and isolate the user config."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("FLOWSMITH_"):
            del os.environ[key]
    # Keep ~/.config/flowsmith/config.yaml of the developer out of the tests
    monkeypatch.setattr(
        "flowsmith.config.get_user_config_path",
        lambda: temp_dir / "user-config" / "config.yaml",
    )
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_config_yaml() -> str:
    """Return sample flowsmith.yaml content for testing."""
    return """
template_paths:
  - "templates"
generation_path: "out"

templating:
  extensions: ["j2", ".Liquid"]

output:
  json_indent: 2

verbosity: "info"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner.

    Example:
        >>> def test_version(cli_runner):
        ...     from flowsmith.main import cli
        ...     result = cli_runner.invoke(cli, ["--version"])
        ...     assert result.exit_code == 0
    """
    from click.testing import CliRunner

    return CliRunner()
