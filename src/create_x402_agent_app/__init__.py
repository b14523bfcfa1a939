"""
create-x402-agent-app - scaffold a new x402 AI agent application.

Usage:
    create-x402-agent-app
    create-x402-agent-app my-agent
    create-x402-agent-app my-agent --yes

Maintainers refresh the bundled template with:
    prepare-x402-template ../x402-agent
"""

import typer

from create_x402_agent_app.cli.commands import register_create_command, register_prepare_command
from create_x402_agent_app.cli.helpers import console, show_banner

__version__ = "0.1.0"

app = typer.Typer(
    name="create-x402-agent-app",
    help="Create a new x402 AI Agent application",
    add_completion=False,
)

register_create_command(app, console=console, show_banner=show_banner)

prepare_app = typer.Typer(
    name="prepare-x402-template",
    help="Prepare the bundled template from a parent project",
    add_completion=False,
)

register_prepare_command(prepare_app, console=console)


def main():
    app()


def prepare_main():
    prepare_app()


if __name__ == "__main__":
    main()
