"""Package-manager adapter.

Wraps ``npm`` / ``pnpm`` invocations used to initialise a generated project
and install its dependencies.  Commands run one at a time with the child's
stdout/stderr inherited from this process, so the operator sees the package
manager's own output.  There is no timeout: a hung package manager hangs the
scaffold.
"""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Sequence
from pathlib import Path

from ..config import PackageManager
from ..errors import SubprocessError


STEP_INIT = "initialize manifest"
STEP_INSTALL_PROD = "install production dependencies"
STEP_INSTALL_DEV = "install development dependencies"

_INIT_ARGS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["init", "-y"],
    PackageManager.PNPM: ["init"],
}

_INSTALL_ARGS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["install"],
    PackageManager.PNPM: ["add"],
}

_INSTALL_DEV_ARGS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["install", "--save-dev"],
    PackageManager.PNPM: ["add", "-D"],
}


async def _run_inherited(step: str, cmd: list[str], cwd: str | Path) -> None:
    """Run *cmd* in *cwd* with inherited stdio.

    Raises SubprocessError if the executable cannot be spawned or exits with
    a non-zero code.
    """
    cmd_str = " ".join(cmd)
    # Resolve through PATH so Windows .cmd shims are found.
    executable = shutil.which(cmd[0])
    if executable is None:
        raise SubprocessError(
            step,
            f"'{cmd[0]}' was not found on PATH",
            command=cmd_str,
        )

    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            *cmd[1:],
            cwd=str(cwd),
        )
    except OSError as exc:
        raise SubprocessError(
            step,
            f"could not start '{cmd_str}': {exc}",
            command=cmd_str,
        ) from exc

    returncode = await process.wait()
    if returncode != 0:
        raise SubprocessError(
            step,
            f"command failed (exit {returncode}): {cmd_str}",
            command=cmd_str,
            returncode=returncode,
        )


class PackageManagerAdapter:
    """Runs the chosen package manager's init and install commands."""

    def __init__(self, manager: PackageManager | str = PackageManager.NPM) -> None:
        self.manager = PackageManager(manager)

    @property
    def executable(self) -> str:
        return self.manager.value

    # -- Command construction ----------------------------------------------

    def init_command(self) -> list[str]:
        return [self.executable, *_INIT_ARGS[self.manager]]

    def install_command(self, packages: Sequence[str]) -> list[str]:
        return [self.executable, *_INSTALL_ARGS[self.manager], *packages]

    def install_dev_command(self, packages: Sequence[str]) -> list[str]:
        return [self.executable, *_INSTALL_DEV_ARGS[self.manager], *packages]

    # -- Operations ----------------------------------------------------------

    async def init(self, cwd: str | Path) -> None:
        """Create ``package.json`` in *cwd*."""
        await _run_inherited(STEP_INIT, self.init_command(), cwd)

    async def install_prod(self, cwd: str | Path, packages: Sequence[str]) -> None:
        """Install *packages* as production dependencies."""
        await _run_inherited(STEP_INSTALL_PROD, self.install_command(packages), cwd)

    async def install_dev(self, cwd: str | Path, packages: Sequence[str]) -> None:
        """Install *packages* as development dependencies."""
        await _run_inherited(STEP_INSTALL_DEV, self.install_dev_command(packages), cwd)
