from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from flowsmith.constants import DEFAULT_JSON_INDENT, DEFAULT_TEMPLATE_EXTENSIONS
from flowsmith.exceptions import ConfigError
from flowsmith.logging import get_logger

__all__ = [
    "FlowsmithConfig",
    "TemplatingConfig",
    "OutputConfig",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILE = "flowsmith.yaml"


class TemplatingConfig(BaseModel):
    """Settings for snippet rendering.

    Attributes:
        extensions: File extensions rendered through Jinja2. Snippet files
            with any other extension are used verbatim.
    """

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEMPLATE_EXTENSIONS)
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lower-case extensions and make sure they start with a dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized


class OutputConfig(BaseModel):
    """Settings for generated documents."""

    json_indent: int = Field(default=DEFAULT_JSON_INDENT, ge=0, le=8)


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
                    if loaded is None:
                        logger.warning(
                            f"Config file {yaml_file} is empty, using defaults."
                        )
                    elif loaded:
                        self._config_data = loaded
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class FlowsmithConfig(BaseSettings):
    """Root configuration object containing all flowsmith settings.

    Attributes:
        template_paths: Directories searched, in order, for snippet files.
        generation_path: Root directory for every generated file.
        templating: Snippet rendering settings.
        output: Generated document settings.
        verbosity: Default log verbosity when no CLI flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOWSMITH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    template_paths: list[Path] = Field(default_factory=list)
    generation_path: Path = Field(default_factory=lambda: Path("generated"))
    templating: TemplatingConfig = Field(default_factory=TemplatingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @field_validator("template_paths")
    @classmethod
    def check_template_paths_exist(cls, v: list[Path]) -> list[Path]:
        """Warn about template paths that do not exist."""
        for path in v:
            if not path.is_dir():
                logger.warning(
                    f"Configured template path does not exist: {path}. "
                    "Snippets will not be found there."
                )
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init settings (explicit keyword arguments)
        2. Environment variables (FLOWSMITH_*)
        3. Project YAML config (./flowsmith.yaml or the path given to load_config)
        4. User YAML config (~/.config/flowsmith/config.yaml)
        """
        project_config_path = _project_config_override or (
            Path.cwd() / PROJECT_CONFIG_FILE
        )

        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


# Set by load_config() while building a config from an explicit file
_project_config_override: Path | None = None


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/flowsmith/config.yaml
    """
    return Path.home() / ".config" / "flowsmith" / "config.yaml"


def load_config(config_path: Path | None = None) -> FlowsmithConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to project config file.
            Defaults to ./flowsmith.yaml

    Returns:
        FlowsmithConfig instance with merged configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    global _project_config_override

    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILE

    if not config_path.exists():
        logger.info("No project configuration found, using defaults.")

    _project_config_override = config_path
    try:
        return FlowsmithConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _project_config_override = None
