"""Shared console, banner and logging setup for the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from create_x402_agent_app.core.config import BANNER, TAGLINE

console = Console()


def show_banner(target: Console | None = None) -> None:
    """Display the ASCII art banner."""
    target = target or console
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_cyan", "cyan", "bright_blue"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        styled_banner.append(line + "\n", style=f"bold {colors[i % len(colors)]}")

    target.print(Align.center(styled_banner))
    target.print(Align.center(Text(TAGLINE, style="italic bright_black")))
    target.print()


def configure_logging(debug: bool, target: Console | None = None) -> None:
    """Route log records through Rich; DEBUG when ``debug`` is set, errors only otherwise."""
    package_logger = logging.getLogger("create_x402_agent_app")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)

    handler = RichHandler(console=target or console, show_path=False, rich_tracebacks=debug)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.ERROR)
    package_logger.propagate = False


def print_debug_environment(target: Console | None = None) -> None:
    target = target or console
    _env_pairs = [
        ("Python", sys.version.split()[0]),
        ("Platform", sys.platform),
        ("CWD", str(Path.cwd())),
    ]
    _label_width = max(len(k) for k, _ in _env_pairs)
    env_lines = [f"{k.ljust(_label_width)} → [bright_black]{v}[/bright_black]" for k, v in _env_pairs]
    target.print(Panel("\n".join(env_lines), title="Debug Environment", border_style="magenta"))


__all__ = ["configure_logging", "console", "print_debug_environment", "show_banner"]
