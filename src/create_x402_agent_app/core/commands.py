"""Narrow subprocess seam used for dependency install and git setup."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Run a command to completion and report how it went."""

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult: ...


class SubprocessRunner:
    """CommandRunner backed by :func:`subprocess.run`.

    Output is captured rather than streamed. A missing executable is
    reported as exit code 127 instead of raising.
    """

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        logger.debug("Running %s in %s", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(
                returncode=127,
                stdout="",
                stderr=f"{args[0]} executable not found on PATH",
            )
        result = CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if not result.ok:
            logger.debug("%s exited with %d: %s", args[0], result.returncode, result.stderr.strip())
        return result


def run_sequence(runner: CommandRunner, commands: Sequence[Sequence[str]], cwd: Path) -> CommandResult | None:
    """Run ``commands`` in order, stopping at the first failure.

    Returns:
        The failing result, or None when every command succeeded
    """
    for args in commands:
        result = runner.run(args, cwd)
        if not result.ok:
            return result
    return None


__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner", "run_sequence"]
