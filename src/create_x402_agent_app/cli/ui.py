"""Terminal widgets for the create flow: the live step tree and the arrow-key picker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

# status -> (symbol markup, label style, detail style)
STATUS_STYLES: Dict[str, tuple[str, str, str]] = {
    "pending": ("[green dim]○[/green dim]", "bright_black", "bright_black"),
    "running": ("[cyan]○[/cyan]", "white", "bright_black"),
    "done": ("[green]●[/green]", "white", "bright_black"),
    "warning": ("[yellow]●[/yellow]", "white", "yellow"),
    "error": ("[red]●[/red]", "white", "red"),
    "skipped": ("[yellow]○[/yellow]", "white", "bright_black"),
}


@dataclass
class Step:
    key: str
    label: str
    status: str = "pending"
    detail: str = ""

    def markup(self) -> str:
        symbol, label_style, detail_style = STATUS_STYLES.get(self.status, (" ", "white", "bright_black"))
        line = f"{symbol} [{label_style}]{self.label}[/{label_style}]"
        detail = self.detail.strip()
        if detail:
            line += f" [{detail_style}]({detail})[/{detail_style}]"
        return line


class StepTracker:
    """Ordered set of named steps rendered as a Rich tree.

    Every change calls the attached refresh callback so a surrounding
    ``Live`` display can redraw.
    """

    def __init__(self, title: str):
        self.title = title
        self.steps: List[Step] = []
        self._refresh_cb: Optional[Callable[[], None]] = None

    def attach_refresh(self, cb: Callable[[], None]) -> None:
        self._refresh_cb = cb

    def add(self, key: str, label: str) -> None:
        if self._find(key) is None:
            self.steps.append(Step(key, label))
            self._maybe_refresh()

    def start(self, key: str, detail: str = "") -> None:
        self._update(key, "running", detail)

    def complete(self, key: str, detail: str = "") -> None:
        self._update(key, "done", detail)

    def warn(self, key: str, detail: str = "") -> None:
        self._update(key, "warning", detail)

    def error(self, key: str, detail: str = "") -> None:
        self._update(key, "error", detail)

    def skip(self, key: str, detail: str = "") -> None:
        self._update(key, "skipped", detail)

    def status_of(self, key: str) -> str | None:
        step = self._find(key)
        return step.status if step else None

    def _find(self, key: str) -> Step | None:
        return next((s for s in self.steps if s.key == key), None)

    def _update(self, key: str, status: str, detail: str) -> None:
        step = self._find(key)
        if step is None:
            # unknown keys are appended using the key as label
            step = Step(key, key)
            self.steps.append(step)
        step.status = status
        if detail:
            step.detail = detail
        self._maybe_refresh()

    def _maybe_refresh(self) -> None:
        if self._refresh_cb:
            self._refresh_cb()

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            tree.add(step.markup())
        return tree


def get_key() -> str:
    """Read one keypress and normalize navigation keys to names."""
    key = readchar.readkey()

    if key in (readchar.key.UP, readchar.key.CTRL_P):
        return "up"
    if key in (readchar.key.DOWN, readchar.key.CTRL_N):
        return "down"
    if key == readchar.key.ENTER:
        return "enter"
    if key in (readchar.key.ESC, "\x1b"):
        return "escape"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return key


def _selection_panel(options: Dict[str, str], prompt_text: str, selected_index: int) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=3)
    table.add_column(style="white", justify="left")

    for i, (key, description) in enumerate(options.items()):
        marker = "▶" if i == selected_index else " "
        table.add_row(marker, f"[cyan]{key}[/cyan] [dim]({description})[/dim]")

    table.add_row("", "")
    table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")
    return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    console: Console | None = None,
) -> str | None:
    """Let the user pick one of ``options`` with the arrow keys.

    Returns the selected key, or None when the user cancels with Esc or Ctrl-C.
    """
    console = console or Console()
    option_keys = list(options)
    selected_index = option_keys.index(default_key) if default_key in option_keys else 0

    console.print()
    with Live(
        _selection_panel(options, prompt_text, selected_index),
        console=console,
        transient=True,
        auto_refresh=False,
    ) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                key = "escape"

            if key == "enter":
                return option_keys[selected_index]
            if key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                return None
            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)

            live.update(_selection_panel(options, prompt_text, selected_index), refresh=True)


__all__ = [
    "STATUS_STYLES",
    "Step",
    "StepTracker",
    "get_key",
    "select_with_arrows",
]
