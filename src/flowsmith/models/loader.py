"""Load a migration model from a YAML or JSON file."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from flowsmith.exceptions import ModelLoadError
from flowsmith.logging import get_logger
from flowsmith.models.migration import MigrationModel

__all__ = ["load_migration_model"]

logger = get_logger(__name__)


def load_migration_model(path: Path | str) -> MigrationModel:
    """Read and validate a migration model file.

    ``.json`` files are parsed with the json module, anything else is treated
    as YAML (which also accepts JSON documents).

    Args:
        path: Path to the model file.

    Returns:
        The validated MigrationModel.

    Raises:
        ModelLoadError: If the file is missing, unparsable, or invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ModelLoadError(
            f"Migration model file not found: {file_path}", file_path=str(file_path)
        )

    try:
        text = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ModelLoadError(
            f"Unable to parse migration model: {e}", file_path=str(file_path)
        ) from e

    if data is None:
        logger.warning("migration_model_empty", path=str(file_path))
        data = {}

    try:
        model = MigrationModel.model_validate(data)
    except ValidationError as e:
        first_error = e.errors()[0]
        location = ".".join(str(loc) for loc in first_error["loc"])
        raise ModelLoadError(
            f"Invalid migration model at '{location}': {first_error['msg']}",
            file_path=str(file_path),
        ) from e

    logger.debug(
        "migration_model_loaded",
        path=str(file_path),
        applications=len(model.applications),
    )
    return model
