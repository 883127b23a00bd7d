"""Configuration loading with file, environment and override support.

Precedence (highest to lowest):
1. Explicit overrides
2. Environment variables (SVG_PREVIEW_*)
3. Config file (explicit path or <project>/.svg-preview.json)
4. Defaults
"""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigError
from ..preview_logging import get_logger
from .models import PreviewConfig

logger = get_logger("config")

CONFIG_FILE_NAME = ".svg-preview.json"
ENV_PREFIX = "SVG_PREVIEW_"

# Flat keys accepted as overrides and environment variables
KEY_MAPPINGS: dict[str, str] = {
    "recursive": "extraction.recursive",
    "max_depth": "extraction.max_depth",
    "expression_marker": "extraction.expression_marker",
    "deep": "conversion.deep",
    "translate_attribute_names": "conversion.translate_attribute_names",
    "preview_width": "conversion.preview_width",
    "preview_height": "conversion.preview_height",
    "title": "render.title",
    "condensed": "render.condensed",
    "include_jsx": "render.include_jsx",
    "include_attributes": "render.include_attributes",
    "debug": "logging.debug",
    "verbose": "logging.verbose",
}


class ConfigLoader:
    """Loads PreviewConfig from defaults, a JSON file, env vars and overrides."""

    def __init__(
        self,
        project_path: Path | None = None,
        config_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize the configuration loader.

        Args:
            project_path: Directory searched for ``.svg-preview.json``.
                Defaults to the current directory.
            config_file: Explicit config file; takes the place of the
                project file when given.
            environ: Environment mapping (default: ``os.environ``).
        """
        self.project_path = Path(project_path) if project_path else Path.cwd()
        self.config_file = Path(config_file) if config_file else None
        self.environ = environ if environ is not None else os.environ

    def load(self, **overrides: Any) -> PreviewConfig:
        """Load configuration from all sources.

        Returns:
            Validated PreviewConfig.

        Raises:
            ConfigError: If the file is unreadable or values fail validation.
        """
        data: dict[str, Any] = {}

        file_data = self._load_file()
        if file_data:
            data = file_data

        for path, value in self._load_environment().items():
            self._set_path(data, path, value)

        for key, value in overrides.items():
            self._set_path(data, KEY_MAPPINGS.get(key, key), value)

        try:
            return PreviewConfig.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid preview configuration: {e}")
            raise ConfigError(f"Invalid preview configuration: {e}") from e

    def _resolve_file(self) -> Path | None:
        if self.config_file is not None:
            return self.config_file
        candidate = self.project_path / CONFIG_FILE_NAME
        return candidate if candidate.exists() else None

    def _load_file(self) -> dict[str, Any]:
        """Read the JSON config file, if any."""
        path = self._resolve_file()
        if path is None:
            logger.debug(f"No config file in {self.project_path}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}") from None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file {path}: {e}")
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from None
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        logger.info(f"Loaded preview config from {path}")
        return data

    def _load_environment(self) -> dict[str, str]:
        """Collect SVG_PREVIEW_* variables as dot-path -> raw string."""
        values: dict[str, str] = {}
        for name, value in self.environ.items():
            if not name.startswith(ENV_PREFIX):
                continue
            key = name[len(ENV_PREFIX) :].lower()
            if key in KEY_MAPPINGS:
                values[KEY_MAPPINGS[key]] = value
            else:
                logger.debug(f"Ignoring unknown environment variable {name}")
        return values

    @staticmethod
    def _set_path(data: dict[str, Any], path: str, value: Any) -> None:
        """Assign ``value`` at a dot-notation path, creating sections."""
        parts = path.split(".")
        target = data
        for part in parts[:-1]:
            section = target.get(part)
            if not isinstance(section, dict):
                section = {}
                target[part] = section
            target = section
        target[parts[-1]] = value


def load_config(config_file: Path | None = None, **overrides: Any) -> PreviewConfig:
    """Load preview configuration with precedence.

    Args:
        config_file: Path to a JSON config file OR a project directory
            (auto-detected).
        **overrides: Flat (``recursive=True``) or dotted
            (``**{"render.title": "x"}``) overrides.

    Returns:
        Configured PreviewConfig instance.
    """
    if config_file is not None and Path(config_file).is_dir():
        loader = ConfigLoader(project_path=Path(config_file))
    else:
        loader = ConfigLoader(config_file=config_file)

    return loader.load(**overrides)
