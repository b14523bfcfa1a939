"""Interactive collection of project options."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_x402_agent_app.core.config import (
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_PROJECT_NAME,
    PACKAGE_MANAGER_CHOICES,
    ProjectOptions,
)
from create_x402_agent_app.core.validation import validate_project_name
from create_x402_agent_app.errors import ProjectCancelledError

from .ui import select_with_arrows

Validator = Callable[[str], Optional[str]]


class Prompter(Protocol):
    """Ask questions and return answers; every method returns None when the user cancels."""

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str | None: ...

    def select(self, message: str, options: Dict[str, str], default: str | None = None) -> str | None: ...

    def confirm(self, message: str, default: bool = True) -> bool | None: ...


class ConsolePrompter:
    """Prompter backed by rich prompts and the arrow-key selector."""

    def __init__(self, console: Console | None = None, interactive_select: bool | None = None):
        self.console = console or Console()
        if interactive_select is None:
            interactive_select = sys.stdin.isatty()
        self.interactive_select = interactive_select

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str | None:
        while True:
            try:
                if default is None:
                    value = Prompt.ask(f"[bold]{message}[/bold]", console=self.console)
                else:
                    value = Prompt.ask(f"[bold]{message}[/bold]", console=self.console, default=default)
            except (KeyboardInterrupt, EOFError):
                return None
            value = value.strip()
            error = validate(value) if validate else None
            if error is None:
                return value
            self.console.print(f"[red]{error}[/red]")

    def select(self, message: str, options: Dict[str, str], default: str | None = None) -> str | None:
        if self.interactive_select:
            return select_with_arrows(options, message, default, console=self.console)
        try:
            return Prompt.ask(
                f"[bold]{message}[/bold]",
                console=self.console,
                choices=list(options),
                default=default or next(iter(options)),
            )
        except (KeyboardInterrupt, EOFError):
            return None

    def confirm(self, message: str, default: bool = True) -> bool | None:
        try:
            return Confirm.ask(f"[bold]{message}[/bold]", console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            return None


def default_project_options(project_name: str | None = None) -> ProjectOptions:
    """Options used with --yes: nothing is asked and the name is taken verbatim."""
    return ProjectOptions(
        project_name=project_name or DEFAULT_PROJECT_NAME,
        package_manager=DEFAULT_PACKAGE_MANAGER,
        install_deps=True,
        init_git=True,
    )


def collect_project_options(
    project_name: str | None,
    prompter: Prompter,
    *,
    skip_prompts: bool = False,
) -> ProjectOptions:
    """Determine the four project options.

    Questions are asked in a fixed order: name (only when not given
    positionally), package manager, install dependencies, initialize git.
    A cancelled later question keeps its default.

    Raises:
        ProjectCancelledError: If the name question is cancelled and no
            positional name was supplied
    """
    if skip_prompts:
        return default_project_options(project_name)

    if not project_name:
        answer = prompter.text(
            "What is your project named?",
            default=DEFAULT_PROJECT_NAME,
            validate=validate_project_name,
        )
        if not answer:
            raise ProjectCancelledError()
        project_name = answer

    package_manager = prompter.select(
        "Which package manager do you want to use?",
        PACKAGE_MANAGER_CHOICES,
        default=DEFAULT_PACKAGE_MANAGER,
    )
    install_deps = prompter.confirm("Install dependencies?", default=True)
    init_git = prompter.confirm("Initialize git repository?", default=True)

    return ProjectOptions(
        project_name=project_name,
        package_manager=package_manager or DEFAULT_PACKAGE_MANAGER,
        install_deps=True if install_deps is None else install_deps,
        init_git=True if init_git is None else init_git,
    )


__all__ = [
    "ConsolePrompter",
    "Prompter",
    "collect_project_options",
    "default_project_options",
]
