"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and a target directory and generates an Express +
TypeScript + MySQL + Sequelize project: the directory skeleton, every file
from the template registry, the installed dependencies and the ``build`` /
``start`` / ``dev`` scripts in ``package.json``.

Steps run strictly in order and the first failure aborts the rest.  Nothing is
rolled back: a failure part-way leaves a partially populated directory.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import PackageManager, ScaffoldConfig, ScaffoldRequest
from ..errors import FilesystemError
from ..utils import ensure_dir, print_step, print_success, write_text_file
from .manifest import manifest_path, update_scripts
from .package_manager import PackageManagerAdapter
from .templates import TemplateRegistry


# ---------------------------------------------------------------------------
# Directory skeleton
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/controllers",
    "src/models",
    "src/routes",
    "src/config",
    "src/middleware",
    "src/util",
    "src/__tests__",
)


@dataclass
class ScaffoldResult:
    """Outcome of a successful scaffold run."""

    root: Path
    request: ScaffoldRequest
    files_written: list[Path] = field(default_factory=list)
    manifest_path: Path | None = None
    manifest: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Materializes a project on disk and prepares its dependency environment.

    The template registry and the package-manager adapter are injected so
    tests (and alternative front-ends) can swap them out.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        registry: TemplateRegistry | None = None,
        adapter_factory: Callable[[PackageManager], PackageManagerAdapter] = PackageManagerAdapter,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.registry = registry or TemplateRegistry()
        self.adapter_factory = adapter_factory

    # -- Public API --------------------------------------------------------

    async def scaffold(
        self,
        project_name: str,
        package_manager: str | PackageManager | None = None,
    ) -> ScaffoldResult:
        """Validate raw input and generate the project under ``config.output_dir``.

        Raises:
            InputValidationError: Before anything touches the filesystem.
        """
        request = ScaffoldRequest.from_input(
            project_name, package_manager or self.config.package_manager
        )
        return await self.initialize(self.config.project_root(request), request)

    async def initialize(self, root: str | Path, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the complete project at *root*.

        Args:
            root: Project root directory.  Created if absent.
            request: Validated scaffold request.

        Returns:
            A ``ScaffoldResult`` describing what was written.
        """
        root = Path(root)
        result = ScaffoldResult(root=root, request=request)

        # 1. Create the skeleton directory structure
        self._create_directory_structure(root)

        # 2. Write every registry entry
        result.files_written = self._write_templates(root)

        # 3. Initialise the manifest and install dependencies
        adapter = self.adapter_factory(request.package_manager)
        print_step("Initializing project and installing dependencies...")
        await adapter.init(root)
        await adapter.install_prod(root, self.config.dependencies.production)
        await adapter.install_dev(root, self.config.dependencies.development)

        # 4. Inject the run scripts into package.json
        result.manifest = update_scripts(root, self.config.scripts)
        result.manifest_path = manifest_path(root)
        print_success("Dependencies installed and package.json updated successfully.")

        return result

    # -- Internal steps ----------------------------------------------------

    def _create_directory_structure(self, root: Path) -> None:
        for rel in ("", *PROJECT_DIRECTORIES):
            target = root / rel
            try:
                ensure_dir(target)
            except OSError as exc:
                raise FilesystemError(
                    f"Could not create directory {target}: {exc}", path=target
                ) from exc

    def _write_templates(self, root: Path) -> list[Path]:
        written: list[Path] = []
        for entry in self.registry.list_entries():
            dest = root / entry.relative_path
            try:
                write_text_file(dest, entry.content)
            except OSError as exc:
                raise FilesystemError(f"Could not write {dest}: {exc}", path=dest) from exc
            written.append(dest)
        return written
