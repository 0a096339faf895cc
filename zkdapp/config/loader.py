"""
Configuration loader for zkwasm.config.json.

Handles locating, parsing and validating the project configuration file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from .models import ProjectConfig


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "zkwasm.config.json"


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


class ConfigLoader:
    """
    Loads and validates the project configuration.

    The configuration file is optional: a project without one is
    treated as using all defaults.
    """

    def __init__(self, project_root: Optional[Union[str, Path]] = None):
        """
        Initialize the config loader.

        Args:
            project_root: Project directory (defaults to the current directory)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self._config: Optional[ProjectConfig] = None
        self._found = False

    @property
    def config_path(self) -> Path:
        """Path of the configuration file inside the project."""
        return self.project_root / CONFIG_FILENAME

    def load(self) -> "ConfigLoader":
        """
        Load the configuration file if present.

        Returns:
            Self for method chaining

        Raises:
            ConfigError: If the project root is missing or the file is invalid
        """
        if not self.project_root.is_dir():
            raise ConfigError(f"Project directory does not exist: {self.project_root}")

        if self.config_path.is_file():
            data = self._read_json(self.config_path)
            self._config = self._parse(data)
            self._found = True
            logger.debug("Loaded configuration from %s", self.config_path)
        else:
            self._config = ProjectConfig()
            self._found = False
            logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, self.project_root)

        return self

    def _read_json(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a JSON file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a JSON object in {file_path}")
        return data

    def _parse(self, data: Dict[str, Any]) -> ProjectConfig:
        """Parse project configuration."""
        try:
            return ProjectConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid project configuration: {e}")

    @property
    def config(self) -> ProjectConfig:
        """Get loaded configuration (defaults if not loaded)."""
        if self._config is None:
            return ProjectConfig()
        return self._config

    @property
    def found(self) -> bool:
        """Whether a configuration file was found on load."""
        return self._found

    def resolve_output_dir(self) -> Path:
        """Absolute build output directory for this project."""
        output_dir = Path(self.config.output_dir)
        if not output_dir.is_absolute():
            output_dir = self.project_root / output_dir
        return output_dir.resolve()
