"""
Pydantic models for project configuration.

These models define the schema of ``zkwasm.config.json``, the optional
per-project settings file written next to ``Cargo.toml``.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_OUTPUT_DIR = "./build-artifacts"
DEFAULT_TARGET = "wasm32-unknown-unknown"


class Environment(str, Enum):
    """Supported development environments."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


# ============================================================
# Build and Deployment Sections
# ============================================================

class BuildConfig(BaseModel):
    """Build settings for the WASM application."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    target: str = Field(default=DEFAULT_TARGET, description="Rust compilation target")
    optimize: bool = Field(default=False, description="Run optimized (release) builds")
    output_dir: str = Field(
        default=DEFAULT_OUTPUT_DIR,
        alias="outputDir",
        description="Directory holding build artifacts",
    )

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        """Reject blank output directories."""
        if not v or not v.strip():
            raise ValueError("outputDir must not be empty")
        return v.strip()


class DeploymentConfig(BaseModel):
    """Deployment settings."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    auto_check: bool = Field(
        default=True,
        alias="autoCheck",
        description="Run deployment checks before build",
    )
    environment: Optional[Environment] = Field(None, description="Deployment environment")


# ============================================================
# Project Configuration
# ============================================================

class ProjectConfig(BaseModel):
    """Complete contents of zkwasm.config.json."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    environment: Optional[Environment] = Field(None, description="Development environment")
    build: Optional[BuildConfig] = Field(None, description="Build settings")
    deployment: Optional[DeploymentConfig] = Field(None, description="Deployment settings")
    updated_at: Optional[str] = Field(None, alias="updatedAt", description="ISO timestamp of last update")

    @property
    def output_dir(self) -> str:
        """Build output directory, falling back to the conventional default."""
        if self.build is None:
            return DEFAULT_OUTPUT_DIR
        return self.build.output_dir
