"""Template registry for project scaffolding.

Provides the TemplateRegistry class which loads the generated-file assets from
the ``express_scaffold/scaffolder/templates/`` directory through a Jinja2
loader.  Assets are opaque text: they are read raw and never rendered, so no
request field (not even the project name) is substituted into them.  Every
generated project is therefore byte-identical regardless of its name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Generated path -> asset table
# ---------------------------------------------------------------------------

# Asset names avoid leading dots so packaging globs pick them up.
TEMPLATE_FILES: dict[str, str] = {
    "src/index.ts": "index.ts.j2",
    "src/config/database.ts": "database.ts.j2",
    "src/controllers/user.controller.ts": "user.controller.ts.j2",
    "src/models/user.ts": "user.model.ts.j2",
    "src/routes/index.ts": "routes.index.ts.j2",
    "src/routes/user.router.ts": "user.router.ts.j2",
    "src/util/util.ts": "util.ts.j2",
    "tsconfig.json": "tsconfig.json.j2",
    ".env.development": "env.development.j2",
    ".gitignore": "gitignore.j2",
    "nodemon.json": "nodemon.json.j2",
    "global.d.ts": "global.d.ts.j2",
}


@dataclass(frozen=True)
class TemplateEntry:
    """A single generated file: where it goes and what it contains."""

    relative_path: str
    content: str


# ---------------------------------------------------------------------------
# TemplateRegistry
# ---------------------------------------------------------------------------


class TemplateRegistry:
    """Fixed table of generated file paths and their text content.

    The registry is pure data: the same entries, in the same order, are
    returned on every call.  Asset sources are read once and cached.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        files: dict[str, str] | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.files = dict(TEMPLATE_FILES if files is None else files)
        # Only holds the loader; sources are never rendered.
        self.env = Environment(loader=FileSystemLoader(str(self.template_dir)))
        self._entries: tuple[TemplateEntry, ...] | None = None

    def list_entries(self) -> tuple[TemplateEntry, ...]:
        """Return every ``TemplateEntry`` in table order."""
        if self._entries is None:
            self._entries = tuple(
                TemplateEntry(relative_path=rel_path, content=self._read_source(asset))
                for rel_path, asset in self.files.items()
            )
        return self._entries

    def get(self, relative_path: str) -> TemplateEntry:
        """Return the entry generated at *relative_path*.

        Raises:
            KeyError: If no entry is registered for that path.
        """
        for entry in self.list_entries():
            if entry.relative_path == relative_path:
                return entry
        raise KeyError(relative_path)

    def paths(self) -> list[str]:
        """Return the relative output paths in table order."""
        return list(self.files)

    def list_templates(self) -> list[str]:
        """Return a sorted list of every ``.j2`` asset in the template directory."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir).as_posix())
            for p in self.template_dir.rglob("*.j2")
        )

    # -- Internal ----------------------------------------------------------

    def _read_source(self, asset: str) -> str:
        # Raw source, never rendered.
        source, _filename, _uptodate = self.env.loader.get_source(self.env, asset)
        return source
