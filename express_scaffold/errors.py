"""Error taxonomy for the scaffolder.

Every failure surfaced to the operator is a ``ScaffoldError``.  None of them
are retried and none trigger cleanup: a failed run leaves whatever was already
written on disk, and the operator fixes the cause and reruns.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InputValidationError(ScaffoldError, ValueError):
    """Raised when user input is rejected before any filesystem action."""


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be created or written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class SubprocessError(ScaffoldError):
    """Raised when a package-manager command cannot be spawned or exits non-zero."""

    def __init__(
        self,
        step: str,
        message: str,
        command: str = "",
        returncode: int | None = None,
    ) -> None:
        self.step = step
        self.command = command
        self.returncode = returncode
        super().__init__(f"{step}: {message}")


class ManifestError(ScaffoldError):
    """Raised when ``package.json`` is missing, unparsable or cannot be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)
