"""Scaffolder configuration.

Typed request and run configuration.  All settings use Pydantic v2 models so
they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InputValidationError


class PackageManager(str, Enum):
    """Supported Node package managers."""

    NPM = "npm"
    PNPM = "pnpm"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

PRODUCTION_PACKAGES: tuple[str, ...] = (
    "express",
    "mysql2",
    "sequelize",
    "sequelize-typescript",
    "dotenv",
    "winston",
)

DEVELOPMENT_PACKAGES: tuple[str, ...] = (
    "typescript",
    "ts-node",
    "@types/express",
    "@types/node",
    "nodemon",
)

MANIFEST_SCRIPTS: dict[str, str] = {
    "build": "npx tsc",
    "start": "node dist/index.js",
    "dev": "NODE_ENV=development nodemon",
}


class ScaffoldRequest(BaseModel):
    """What the operator asked for: a project name and a package manager."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name of the new project")
    package_manager: PackageManager = Field(default=DEFAULT_PACKAGE_MANAGER)

    @field_validator("project_name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name is required")
        return value

    @classmethod
    def from_input(
        cls,
        project_name: str,
        package_manager: str | PackageManager = DEFAULT_PACKAGE_MANAGER,
    ) -> "ScaffoldRequest":
        """Build a request from raw user input.

        Raises:
            InputValidationError: If the name is empty or the package manager
                is not one of :class:`PackageManager`.
        """
        try:
            return cls(project_name=project_name, package_manager=package_manager)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            raise InputValidationError(messages) from exc


class DependencySet(BaseModel):
    """Packages installed into every generated project."""

    production: list[str] = Field(default_factory=lambda: list(PRODUCTION_PACKAGES))
    development: list[str] = Field(default_factory=lambda: list(DEVELOPMENT_PACKAGES))


class ScaffoldConfig(BaseModel):
    """Run configuration shared by the CLI and the scaffolder.

    Instances are typically created once by the CLI entry point and then
    passed to :class:`~express_scaffold.scaffolder.ProjectScaffolder`.
    """

    output_dir: Path = Field(default_factory=Path.cwd)
    package_manager: PackageManager = Field(default=DEFAULT_PACKAGE_MANAGER)
    dependencies: DependencySet = Field(default_factory=DependencySet)
    scripts: dict[str, str] = Field(default_factory=lambda: dict(MANIFEST_SCRIPTS))

    def project_root(self, request: ScaffoldRequest) -> Path:
        """Directory the project for *request* is generated into."""
        return self.output_dir / request.project_name

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_SCAFFOLD_OUTPUT_DIR, EXPRESS_SCAFFOLD_PACKAGE_MANAGER.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESS_SCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPRESS_SCAFFOLD_OUTPUT_DIR"])
        manager = os.environ.get("EXPRESS_SCAFFOLD_PACKAGE_MANAGER")
        if manager:
            try:
                kwargs["package_manager"] = PackageManager(manager.strip().lower())
            except ValueError as exc:
                choices = ", ".join(pm.value for pm in PackageManager)
                raise InputValidationError(
                    f"Unsupported package manager '{manager}' (expected one of: {choices})"
                ) from exc
        return cls(**kwargs)
