"""Project materialization: turn collected options into a project on disk."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from create_x402_agent_app.core.commands import CommandRunner, SubprocessRunner, run_sequence
from create_x402_agent_app.core.config import (
    ENV_FILE_TEMPLATE,
    ENV_FILENAME,
    INITIAL_COMMIT_MESSAGE,
    NO_EXCLUSIONS,
    ProjectOptions,
)
from create_x402_agent_app.core.filesystem import copy_tree
from create_x402_agent_app.core.manifest import update_manifest_name
from create_x402_agent_app.errors import ProjectExistsError, TemplateNotFoundError

if TYPE_CHECKING:
    from create_x402_agent_app.cli.ui import StepTracker

logger = logging.getLogger(__name__)

INSTALL_WARNING = "Failed to install dependencies. You can install them manually."
GIT_WARNING = "Failed to initialize git. You can do this manually."

STEPS = [
    ("mkdir", "Create project directory"),
    ("copy", "Copy template files"),
    ("manifest", "Configure package.json"),
    ("env", "Create environment file"),
    ("install", "Install dependencies"),
    ("git", "Initialize git repository"),
    ("final", "Finalize"),
]


@dataclass
class ProjectResult:
    """Outcome of a materialization run.

    ``installed`` and ``git_initialized`` are None when the step was not
    requested and False when it soft-failed.
    """

    project_path: Path
    files_copied: int = 0
    installed: bool | None = None
    git_initialized: bool | None = None

    @property
    def warnings(self) -> list[str]:
        messages: list[str] = []
        if self.installed is False:
            messages.append(INSTALL_WARNING)
        if self.git_initialized is False:
            messages.append(GIT_WARNING)
        return messages


def resolve_project_path(project_name: str, cwd: Path) -> Path:
    return cwd / project_name


def git_init_commands() -> list[list[str]]:
    return [
        ["git", "init"],
        ["git", "add", "."],
        ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
    ]


def install_command(package_manager: str) -> list[str]:
    return [package_manager, "install"]


def materialize_project(
    options: ProjectOptions,
    *,
    cwd: Path,
    template_dir: Path,
    runner: CommandRunner | None = None,
    env_content: str = ENV_FILE_TEMPLATE,
    tracker: "StepTracker | None" = None,
) -> ProjectResult:
    """Create the project described by ``options`` under ``cwd``.

    Steps run in a fixed order: create directory, copy template, patch
    package.json, write .env, install dependencies, initialize git. The
    first four are fatal; install and git only record a soft failure on
    the result.

    Args:
        options: Validated project options
        cwd: Directory the project name is resolved against
        template_dir: Staged template to copy from (copied unfiltered)
        runner: Command runner for install/git, defaults to subprocess
        env_content: Content written to the generated .env file
        tracker: Optional step tracker updated as each step runs

    Returns:
        ProjectResult describing the created project

    Raises:
        ProjectExistsError: If anything already exists at the target path
        TemplateNotFoundError: If ``template_dir`` is not a directory
        ManifestError: If package.json cannot be patched
        OSError: On any other filesystem failure in the fatal steps
    """
    runner = runner or SubprocessRunner()
    project_path = resolve_project_path(options.project_name, cwd)

    if project_path.exists():
        raise ProjectExistsError(project_path)
    if not template_dir.is_dir():
        raise TemplateNotFoundError(template_dir)

    result = ProjectResult(project_path=project_path)

    with _step(tracker, "mkdir"):
        project_path.mkdir(parents=True)
    _complete(tracker, "mkdir", str(project_path))

    with _step(tracker, "copy"):
        copied = copy_tree(template_dir, project_path, NO_EXCLUSIONS)
    result.files_copied = len(copied)
    _complete(tracker, "copy", f"{len(copied)} files")

    with _step(tracker, "manifest"):
        update_manifest_name(project_path, options.project_name)
    _complete(tracker, "manifest", f"name: {options.project_name}")

    with _step(tracker, "env"):
        (project_path / ENV_FILENAME).write_text(env_content, encoding="utf-8")
    _complete(tracker, "env", ENV_FILENAME)

    if options.install_deps:
        if tracker:
            tracker.start("install", f"{options.package_manager} install")
        install_result = runner.run(install_command(options.package_manager), project_path)
        result.installed = install_result.ok
        if install_result.ok:
            _complete(tracker, "install", options.package_manager)
        else:
            logger.warning("%s install failed (exit %d)", options.package_manager, install_result.returncode)
            if tracker:
                tracker.warn("install", INSTALL_WARNING)
    elif tracker:
        tracker.skip("install", "not requested")

    if options.init_git:
        if tracker:
            tracker.start("git")
        failure = run_sequence(runner, git_init_commands(), project_path)
        result.git_initialized = failure is None
        if failure is None:
            _complete(tracker, "git", "initial commit created")
        else:
            logger.warning("git setup failed (exit %d): %s", failure.returncode, failure.stderr.strip())
            if tracker:
                tracker.warn("git", GIT_WARNING)
    elif tracker:
        tracker.skip("git", "not requested")

    _complete(tracker, "final", "project ready")
    return result


@contextmanager
def _step(tracker: "StepTracker | None", key: str) -> Iterator[None]:
    """Mark a tracker step running, and errored if the body raises."""
    if tracker:
        tracker.start(key)
    try:
        yield
    except Exception as exc:
        if tracker:
            tracker.error(key, str(exc))
        raise


def _complete(tracker: "StepTracker | None", key: str, detail: str = "") -> None:
    if tracker:
        tracker.complete(key, detail)


def next_steps(options: ProjectOptions, result: ProjectResult | None = None) -> list[str]:
    """Return the shell commands shown after a successful run."""
    package_manager = options.package_manager
    installed = result.installed if result is not None else options.install_deps

    lines = [f"cd {options.project_name}", "# Add your API keys to .env file"]
    if not installed:
        lines.append(f"{package_manager} install")
    runner_cmd = "npx" if package_manager == "npm" else package_manager
    lines.append(f"{runner_cmd} vercel dev")
    return lines


__all__ = [
    "GIT_WARNING",
    "INSTALL_WARNING",
    "ProjectResult",
    "STEPS",
    "git_init_commands",
    "install_command",
    "materialize_project",
    "next_steps",
    "resolve_project_path",
]
