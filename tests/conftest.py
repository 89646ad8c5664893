"""Shared pytest fixtures for the express-scaffold test suite.

Provides reusable fixtures for:
- Temporary project directories
- A fake package-manager adapter that never spawns npm/pnpm
- Mock asyncio subprocess helpers
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from express_scaffold.config import PackageManager, ScaffoldRequest
from express_scaffold.errors import SubprocessError


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Target root for a generated project (not created in advance)."""
    yield tmp_path / "test-project"


@pytest.fixture
def npm_request() -> ScaffoldRequest:
    return ScaffoldRequest.from_input("test-project", "npm")


# ---------------------------------------------------------------------------
# Fake package-manager adapter
# ---------------------------------------------------------------------------

class FakeAdapter:
    """Records every call and writes a minimal ``package.json`` on ``init``.

    ``fail_on`` names the operation ("init", "install_prod", "install_dev")
    that should raise ``SubprocessError`` instead of succeeding.
    """

    def __init__(
        self,
        manager: PackageManager = PackageManager.NPM,
        *,
        fail_on: str | None = None,
        initial_manifest: dict[str, Any] | None = None,
        write_manifest: bool = True,
    ) -> None:
        self.manager = manager
        self.fail_on = fail_on
        self.initial_manifest = initial_manifest
        self.write_manifest = write_manifest
        self.calls: list[tuple[str, Path, tuple[str, ...]]] = []

    def _maybe_fail(self, op: str) -> None:
        if self.fail_on == op:
            raise SubprocessError(
                {
                    "init": "initialize manifest",
                    "install_prod": "install production dependencies",
                    "install_dev": "install development dependencies",
                }[op],
                "command failed (exit 1): fake",
                command="fake",
                returncode=1,
            )

    async def init(self, cwd: str | Path) -> None:
        self.calls.append(("init", Path(cwd), ()))
        self._maybe_fail("init")
        manifest_file = Path(cwd) / "package.json"
        if self.write_manifest and not manifest_file.exists():
            manifest = self.initial_manifest or {
                "name": Path(cwd).name,
                "version": "1.0.0",
                "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            }
            manifest_file.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    async def install_prod(self, cwd: str | Path, packages: Sequence[str]) -> None:
        self.calls.append(("install_prod", Path(cwd), tuple(packages)))
        self._maybe_fail("install_prod")

    async def install_dev(self, cwd: str | Path, packages: Sequence[str]) -> None:
        self.calls.append(("install_dev", Path(cwd), tuple(packages)))
        self._maybe_fail("install_dev")


@pytest.fixture
def fake_adapter_factory():
    """Factory fixture: returns ``(adapter_factory, created_adapters)``.

    Usage:
        def test_x(fake_adapter_factory):
            factory, adapters = fake_adapter_factory(fail_on="install_prod")
            scaffolder = ProjectScaffolder(adapter_factory=factory)
    """
    def make(**kwargs: Any):
        created: list[FakeAdapter] = []

        def factory(manager: PackageManager) -> FakeAdapter:
            adapter = FakeAdapter(manager, **kwargs)
            created.append(adapter)
            return adapter

        return factory, created

    return make


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess with a configurable return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
