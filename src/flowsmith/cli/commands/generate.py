from __future__ import annotations

from pathlib import Path

import click

from flowsmith.cli.context import CLIContext, ExitCode
from flowsmith.cli.output import format_error, format_issues, format_summary
from flowsmith.exceptions import (
    GenerationCancelledError,
    GenerationError,
    ModelLoadError,
)
from flowsmith.generation import WorkflowGenerator
from flowsmith.logging import get_logger
from flowsmith.models import load_migration_model


@click.command()
@click.argument(
    "model_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-t",
    "--template-path",
    "template_paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Snippet search directory (repeatable, searched in order). "
    "Replaces the configured template paths.",
)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root directory for generated files (overrides generation_path).",
)
@click.pass_context
def generate(
    ctx: click.Context,
    model_file: Path,
    template_paths: tuple[Path, ...],
    output: Path | None,
) -> None:
    """Generate Logic App Standard workflows from a migration model.

    MODEL_FILE is a YAML or JSON migration model listing the target
    applications and their process managers.

    Examples:
        flowsmith generate model.yaml -t templates -o out
        flowsmith -vv generate model.json --template-path custom --template-path base
    """
    logger = get_logger(__name__)
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]

    updates: dict[str, object] = {}
    if template_paths:
        updates["template_paths"] = list(template_paths)
    if output is not None:
        updates["generation_path"] = output
    config = cli_ctx.config.model_copy(update=updates)

    try:
        model = load_migration_model(model_file)
    except ModelLoadError as e:
        click.echo(format_error(e.message), err=True)
        raise SystemExit(ExitCode.FAILURE) from e

    generator = WorkflowGenerator.from_config(config)
    try:
        report = generator.generate(model)
    except GenerationError as e:
        if e.report is not None and not cli_ctx.quiet:
            for path in e.report.written_files:
                click.echo(str(path))
        click.echo(format_error(e.message, details=format_issues(e.issues)), err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except (GenerationCancelledError, KeyboardInterrupt) as e:
        click.echo(format_error("Generation interrupted"), err=True)
        raise SystemExit(ExitCode.INTERRUPTED) from e

    if report.skipped:
        click.echo(
            f"Target environment '{model.target_environment.value}' does not host "
            "Standard workflows, nothing to generate."
        )
        return

    logger.debug("generate_command_finished", files=len(report.written_files))
    if not cli_ctx.quiet:
        for path in report.written_files:
            click.echo(str(path))
    click.echo(
        format_summary(
            files=len(report.written_files),
            workflows=len(report.workflows),
            warnings=len(report.warnings),
        )
    )
