"""Command-line front-end for the scaffolder.

Collects the project name and package manager (from flags or interactive
prompts), then hands off to :class:`ProjectScaffolder`.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Prompt

from . import __version__
from .config import PackageManager, ScaffoldConfig, ScaffoldRequest
from .errors import ScaffoldError
from .scaffolder import ProjectScaffolder
from .utils import console, print_error, print_success, print_summary_table


PACKAGE_MANAGER_CHOICES = [pm.value for pm in PackageManager]


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def prompt_project_name() -> str:
    """Ask for the project name until a non-empty value is given."""
    while True:
        name = Prompt.ask("Enter the project name", console=console).strip()
        if name:
            return name
        print_error("Project name is required")


def prompt_package_manager(default: PackageManager) -> PackageManager:
    """Ask which package manager to use, restricted to the supported ones."""
    answer = Prompt.ask(
        "Choose your package manager",
        choices=PACKAGE_MANAGER_CHOICES,
        default=default.value,
        console=console,
    )
    return PackageManager(answer)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="express-scaffold",
        description="CLI to scaffold an Express, TypeScript, MySQL, Sequelize project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  express-scaffold init\n"
            "  express-scaffold init --name my-api --package-manager pnpm\n"
            "  express-scaffold init --name my-api -o ./projects\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    init = subparsers.add_parser("init", help="Initialize a new project")
    init.add_argument(
        "--name", "-n",
        dest="project_name",
        default=None,
        help="Project name (prompted if omitted)",
    )
    init.add_argument(
        "--package-manager", "-p",
        choices=PACKAGE_MANAGER_CHOICES,
        default=None,
        help="Package manager to use (prompted if omitted, default: npm)",
    )
    init.add_argument(
        "--output-dir", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cd_hint(root: Path) -> Path:
    """Return *root* relative to the working directory when it lies below it."""
    root = root.resolve()
    try:
        return root.relative_to(Path.cwd().resolve())
    except ValueError:
        return root


def run_init(args: argparse.Namespace, config: ScaffoldConfig) -> int:
    """Execute ``init``.  Returns the process exit code."""
    if args.output_dir:
        config.output_dir = Path(args.output_dir)

    project_name = args.project_name
    if project_name is None:
        project_name = prompt_project_name()

    if args.package_manager is not None:
        package_manager = PackageManager(args.package_manager)
    elif args.project_name is None:
        package_manager = prompt_package_manager(config.package_manager)
    else:
        package_manager = config.package_manager

    request = ScaffoldRequest.from_input(project_name, package_manager)
    root = config.project_root(request)

    scaffolder = ProjectScaffolder(config)
    result = asyncio.run(scaffolder.initialize(root, request))

    print_success(f"Project {request.project_name} initialized successfully.")
    console.print(f"cd {escape(str(cd_hint(result.root)))}")
    console.print()
    print_summary_table(
        {
            "Project root": str(result.root),
            "Package manager": request.package_manager.value,
            "Files written": str(len(result.files_written)),
            "Scripts": ", ".join(sorted(config.scripts)),
        },
        title="Scaffold Summary",
    )
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``express-scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
        if args.command == "init":
            code = run_init(args, config)
        else:  # pragma: no cover - argparse rejects unknown commands
            parser.error(f"Unknown command: {args.command}")
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
