"""Create command: collect options and materialize a new project."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel

from create_x402_agent_app.cli.helpers import configure_logging, print_debug_environment
from create_x402_agent_app.cli.prompts import ConsolePrompter, Prompter, collect_project_options
from create_x402_agent_app.cli.ui import StepTracker
from create_x402_agent_app.core.commands import CommandRunner, SubprocessRunner
from create_x402_agent_app.core.config import DOCUMENTATION_LINKS, ProjectOptions
from create_x402_agent_app.core.templates import get_template_dir
from create_x402_agent_app.errors import ProjectCancelledError, ProjectExistsError
from create_x402_agent_app.generator import STEPS, ProjectResult, materialize_project, next_steps

CREATE_COMMAND_DOC = """
Create a new x402 AI Agent application.

Interactive Mode (default):
- Asks for the project name (unless given), package manager,
  whether to install dependencies and whether to initialize git

Non-Interactive Mode (--yes):
- Skips all prompts
- Uses npm, installs dependencies and initializes git
- Project name defaults to my-x402-agent

Examples:
  create-x402-agent-app                 # Interactive mode
  create-x402-agent-app my-agent        # Interactive, name supplied
  create-x402-agent-app my-agent --yes  # Defaults, no questions
"""


def _print_summary(console: Console, options: ProjectOptions, result: ProjectResult) -> None:
    package_manager = options.package_manager
    steps_lines = [f"  [white]{line}[/white]" for line in next_steps(options, result)]
    steps_lines.append("")
    steps_lines.append("  [bright_black]Or for frontend-only development:[/bright_black]")
    steps_lines.append(f"  [white]{package_manager} run dev[/white]")

    console.print("\n[bold green]✓ Project created successfully![/bold green]\n")
    console.print(Panel("\n".join(steps_lines), title="Next Steps", border_style="cyan", padding=(1, 2)))

    docs_lines = [f"  [white]{link}[/white]" for link in DOCUMENTATION_LINKS]
    console.print("\n[bright_black]Documentation:[/bright_black]")
    console.print("\n".join(docs_lines))
    console.print()


def register_create_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
    prompter_factory: Callable[[Console], Prompter] = ConsolePrompter,
    runner: CommandRunner | None = None,
    template_dir: Path | None = None,
) -> None:
    """Attach the create command to ``app`` with injectable collaborators."""

    @app.command(help=CREATE_COMMAND_DOC)
    def create(
        project_name: Optional[str] = typer.Argument(None, help="Name of your project"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip prompts and use defaults"),
        debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output on failure"),
    ) -> None:
        configure_logging(debug, console)
        show_banner()

        try:
            options = collect_project_options(project_name, prompter_factory(console), skip_prompts=yes)
        except ProjectCancelledError as exc:
            console.print(f"\n[red]✖ {exc}[/red]\n")
            raise typer.Exit(1)

        cwd = Path.cwd()
        source = template_dir or get_template_dir(console=console)
        if (cwd / options.project_name).exists():
            console.print()
            console.print(
                Panel(
                    f"Directory '[cyan]{options.project_name}[/cyan]' already exists\n"
                    "Please choose a different project name or remove the existing directory.",
                    title="[red]Directory Conflict[/red]",
                    border_style="red",
                    padding=(1, 2),
                )
            )
            raise typer.Exit(1)

        tracker = StepTracker("Create x402 Agent App")
        for key, label in STEPS:
            tracker.add(key, label)

        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            try:
                result = materialize_project(
                    options,
                    cwd=cwd,
                    template_dir=source,
                    runner=runner or SubprocessRunner(),
                    tracker=tracker,
                )
            except Exception as exc:
                tracker.error("final", "failed")
                failure = exc
            else:
                failure = None

        console.print(tracker.render())

        if failure is not None:
            if isinstance(failure, ProjectExistsError):
                console.print(f"\n[red]✖ {failure}[/red]\n")
            else:
                console.print(Panel(f"Failed to create project: {failure}", title="Failure", border_style="red"))
            if debug:
                print_debug_environment(console)
            raise typer.Exit(1)

        for warning in result.warnings:
            console.print(f"[yellow]⚠ {warning}[/yellow]")

        _print_summary(console, options, result)


__all__ = ["CREATE_COMMAND_DOC", "register_create_command"]
