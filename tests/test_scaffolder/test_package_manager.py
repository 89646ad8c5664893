"""Unit tests for the package-manager adapter.

Tests cover:
- Command construction for npm and pnpm
- Successful runs (inherited stdio, correct cwd)
- Non-zero exits and missing executables raising SubprocessError
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from express_scaffold.config import PackageManager
from express_scaffold.errors import SubprocessError
from express_scaffold.scaffolder.package_manager import (
    STEP_INIT,
    STEP_INSTALL_DEV,
    STEP_INSTALL_PROD,
    PackageManagerAdapter,
)

pytestmark = pytest.mark.unit

WHICH = "express_scaffold.scaffolder.package_manager.shutil.which"


class TestCommands:
    def test_npm_commands(self):
        adapter = PackageManagerAdapter(PackageManager.NPM)
        assert adapter.init_command() == ["npm", "init", "-y"]
        assert adapter.install_command(["express"]) == ["npm", "install", "express"]
        assert adapter.install_dev_command(["typescript", "nodemon"]) == [
            "npm", "install", "--save-dev", "typescript", "nodemon",
        ]

    def test_pnpm_commands(self):
        adapter = PackageManagerAdapter("pnpm")
        assert adapter.init_command() == ["pnpm", "init"]
        assert adapter.install_command(["express"]) == ["pnpm", "add", "express"]
        assert adapter.install_dev_command(["typescript"]) == ["pnpm", "add", "-D", "typescript"]

    def test_unknown_manager_rejected(self):
        with pytest.raises(ValueError):
            PackageManagerAdapter("yarn")


class TestRun:
    async def test_init_runs_in_cwd(self, tmp_path: Path, mock_subprocess):
        proc = mock_subprocess(returncode=0)
        with patch(WHICH, return_value="/usr/bin/npm"), patch(
            "asyncio.create_subprocess_exec", return_value=proc
        ) as spawn:
            await PackageManagerAdapter("npm").init(tmp_path)

        args, kwargs = spawn.call_args
        assert args == ("/usr/bin/npm", "init", "-y")
        assert kwargs["cwd"] == str(tmp_path)
        # stdio is inherited, never piped
        assert "stdout" not in kwargs
        assert "stderr" not in kwargs

    async def test_install_passes_packages(self, tmp_path: Path, mock_subprocess):
        proc = mock_subprocess(returncode=0)
        with patch(WHICH, return_value="/usr/bin/pnpm"), patch(
            "asyncio.create_subprocess_exec", return_value=proc
        ) as spawn:
            await PackageManagerAdapter("pnpm").install_dev(tmp_path, ["typescript", "ts-node"])

        args, _ = spawn.call_args
        assert args == ("/usr/bin/pnpm", "add", "-D", "typescript", "ts-node")

    async def test_non_zero_exit_raises(self, tmp_path: Path, mock_subprocess):
        proc = mock_subprocess(returncode=1)
        with patch(WHICH, return_value="/usr/bin/npm"), patch(
            "asyncio.create_subprocess_exec", return_value=proc
        ):
            with pytest.raises(SubprocessError) as exc_info:
                await PackageManagerAdapter("npm").install_prod(tmp_path, ["express"])

        err = exc_info.value
        assert err.step == STEP_INSTALL_PROD
        assert err.returncode == 1
        assert err.command == "npm install express"
        assert STEP_INSTALL_PROD in str(err)

    async def test_missing_executable_raises(self, tmp_path: Path):
        with patch(WHICH, return_value=None), patch(
            "asyncio.create_subprocess_exec"
        ) as spawn:
            with pytest.raises(SubprocessError) as exc_info:
                await PackageManagerAdapter("pnpm").init(tmp_path)

        spawn.assert_not_called()
        assert exc_info.value.step == STEP_INIT
        assert "not found" in str(exc_info.value)

    async def test_spawn_failure_raises(self, tmp_path: Path):
        with patch(WHICH, return_value="/usr/bin/npm"), patch(
            "asyncio.create_subprocess_exec", side_effect=PermissionError("denied")
        ):
            with pytest.raises(SubprocessError) as exc_info:
                await PackageManagerAdapter("npm").install_dev(tmp_path, ["nodemon"])

        assert exc_info.value.step == STEP_INSTALL_DEV
        assert isinstance(exc_info.value.__cause__, PermissionError)
