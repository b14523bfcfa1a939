"""Prepare-template command: refresh the bundled template from a parent project."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from create_x402_agent_app.cli.helpers import configure_logging, print_debug_environment
from create_x402_agent_app.core.config import DEFAULT_EXCLUDE_RULES, ExclusionRules
from create_x402_agent_app.core.templates import BUNDLED_TEMPLATE_DIR
from create_x402_agent_app.packager import prepare_template


def register_prepare_command(
    app: typer.Typer,
    *,
    console: Console,
    rules: ExclusionRules = DEFAULT_EXCLUDE_RULES,
    default_template_dir: Path = BUNDLED_TEMPLATE_DIR,
) -> None:
    """Attach the prepare-template command to ``app``."""

    @app.command()
    def prepare(
        project_root: Optional[Path] = typer.Argument(
            None, help="Parent project to snapshot (defaults to the current directory)"
        ),
        template_dir: Optional[Path] = typer.Option(
            None, "--template-dir", help="Staging directory to rebuild (defaults to the bundled template)"
        ),
        debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output"),
    ) -> None:
        """Snapshot a project into the template directory, leaving out build output and secrets."""
        configure_logging(debug, console)

        source = project_root or Path.cwd()
        target = template_dir or default_template_dir

        console.print("[cyan]Preparing template directory...[/cyan]\n")
        console.print("[cyan]Copying project files...[/cyan]")
        try:
            result = prepare_template(source, target, rules)
        except (OSError, ValueError) as exc:
            console.print(Panel(f"Template preparation failed: {exc}", title="Failure", border_style="red"))
            if debug:
                print_debug_environment(console)
            raise typer.Exit(1)

        console.print(f"[green]✓[/green] Copied {len(result.copied)} file(s)")
        if result.gitignore_created:
            console.print("[green]✓[/green] Wrote default .gitignore")
        console.print("\n[bold green]Template prepared successfully![/bold green]\n")
        console.print(f"Template location: [cyan]{result.template_dir}[/cyan]\n")


__all__ = ["register_prepare_command"]
