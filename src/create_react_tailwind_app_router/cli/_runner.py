"""Runs the optional npm / git steps after the project has been copied."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from create_react_tailwind_app_router.cli._logging import get_logger
from create_react_tailwind_app_router.cli._types import ScaffoldRequest

logger = get_logger(__name__)

INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")

COMMIT_MESSAGE = "Initial commit from create-react-tailwind-app-router"

GIT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("git", "init"),
    ("git", "add", "-A"),
    ("git", "commit", "-m", COMMIT_MESSAGE),
)


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner(Protocol):
    def run(self, command: Sequence[str], cwd: Path) -> CommandResult: ...


class SubprocessRunner:
    """Runs commands with inherited stdio so their output streams to the user."""

    def run(self, command: Sequence[str], cwd: Path) -> CommandResult:
        # Resolve through PATH (and PATHEXT on Windows, where npm is npm.cmd).
        executable = shutil.which(command[0])
        if executable is None:
            return CommandResult(127, stderr=f"{command[0]}: command not found")

        logger.debug(f"Running {' '.join(command)} in {cwd}")
        try:
            result = subprocess.run([executable, *command[1:]], cwd=cwd, check=False)
        except FileNotFoundError:
            return CommandResult(127, stderr=f"{command[0]}: command not found")
        except OSError as e:
            return CommandResult(126, stderr=str(e))
        return CommandResult(result.returncode)


def _describe_failure(command: Sequence[str], result: CommandResult) -> str:
    detail = f": {result.stderr.strip()}" if result.stderr.strip() else ""
    return f"`{' '.join(command)}` exited with code {result.exit_code}{detail}"


def install_dependencies(runner: CommandRunner, project_dir: Path) -> list[str]:
    """Run the package manager install. Returns warnings, empty on success."""
    result = runner.run(INSTALL_COMMAND, project_dir)
    if result.ok:
        return []
    return [
        f"Installing dependencies failed ({_describe_failure(INSTALL_COMMAND, result)}). "
        f"Run `cd {project_dir.name} && npm install` yourself."
    ]


def init_git(runner: CommandRunner, project_dir: Path) -> list[str]:
    """Run git init, add and commit. Every step runs even if an earlier one failed."""
    warnings: list[str] = []
    for command in GIT_COMMANDS:
        result = runner.run(command, project_dir)
        if not result.ok:
            warnings.append(
                f"Git step failed ({_describe_failure(command, result)}). "
                f"Run `{' '.join(command)}` in {project_dir.name} yourself."
            )
    return warnings


@dataclass(frozen=True)
class PostScaffoldReport:
    installed: bool
    warnings: list[str]


def run_post_scaffold(request: ScaffoldRequest, runner: CommandRunner) -> PostScaffoldReport:
    """Install first so lockfiles land in the initial commit."""
    warnings: list[str] = []
    installed = False
    if request.install:
        install_warnings = install_dependencies(runner, request.target_dir)
        installed = not install_warnings
        warnings += install_warnings
    if request.init_git:
        warnings += init_git(runner, request.target_dir)
    return PostScaffoldReport(installed=installed, warnings=warnings)
