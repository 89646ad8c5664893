"""Express project scaffolder -- generates a ready-to-run TypeScript API.

Creates the directory skeleton, writes the fixed template files (server entry
point, database connection, example model/controller/routes, logging utility
and project configuration), installs dependencies with npm or pnpm and adds
the ``build``, ``start`` and ``dev`` scripts to ``package.json``.

Quick usage::

    from express_scaffold.config import ScaffoldRequest
    from express_scaffold.scaffolder import ProjectScaffolder

    request = ScaffoldRequest.from_input("my-api", "pnpm")
    result = await ProjectScaffolder().initialize("/tmp/my-api", request)
"""

from express_scaffold.scaffolder.generator import (
    PROJECT_DIRECTORIES,
    ProjectScaffolder,
    ScaffoldResult,
)
from express_scaffold.scaffolder.package_manager import PackageManagerAdapter
from express_scaffold.scaffolder.templates import TemplateEntry, TemplateRegistry

__all__ = [
    "PROJECT_DIRECTORIES",
    "PackageManagerAdapter",
    "ProjectScaffolder",
    "ScaffoldResult",
    "TemplateEntry",
    "TemplateRegistry",
]
