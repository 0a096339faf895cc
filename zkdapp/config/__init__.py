"""Configuration handling for zkWasm projects."""

from .models import (
    BuildConfig,
    DeploymentConfig,
    Environment,
    ProjectConfig,
)
from .loader import CONFIG_FILENAME, ConfigError, ConfigLoader

__all__ = [
    "BuildConfig",
    "DeploymentConfig",
    "Environment",
    "ProjectConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoader",
]
