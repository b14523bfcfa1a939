"""Template directory discovery."""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console

from .config import TEMPLATE_DIR_ENV

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "template"


def get_template_dir(override_path: str | Path | None = None, console: Console | None = None) -> Path:
    """Return the directory the generator copies from.

    Precedence: ``override_path``, then the ``CREATE_X402_TEMPLATE_DIR``
    environment variable, then the template bundled with the package.
    Overrides that do not point at a directory are ignored with a warning.
    """
    console = console or Console(stderr=True)

    if override_path:
        override = Path(override_path).expanduser().resolve()
        if override.is_dir():
            return override
        console.print(f"[yellow]--template-dir set to {override}, but no directory exists there. Ignoring.[/yellow]")

    env_root = os.environ.get(TEMPLATE_DIR_ENV)
    if env_root:
        root_path = Path(env_root).expanduser().resolve()
        if root_path.is_dir():
            return root_path
        console.print(
            f"[yellow]{TEMPLATE_DIR_ENV} set to {root_path}, but no directory exists there. Ignoring.[/yellow]"
        )

    return BUNDLED_TEMPLATE_DIR


__all__ = ["BUNDLED_TEMPLATE_DIR", "get_template_dir"]
