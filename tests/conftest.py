from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Sequence

import pytest
from rich.console import Console

from create_x402_agent_app.core.commands import CommandResult


class RecordingRunner:
    """CommandRunner that records invocations and fails chosen executables."""

    def __init__(self, fail: Sequence[str] = ()):
        self.fail = set(fail)
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), cwd))
        key = " ".join(args[:2])
        if args[0] in self.fail or key in self.fail:
            return CommandResult(returncode=1, stdout="", stderr="boom")
        return CommandResult(returncode=0, stdout="", stderr="")

    @property
    def commands(self) -> list[list[str]]:
        return [args for args, _ in self.calls]


class ScriptedPrompter:
    """Prompter answering from a queue; None entries simulate cancellation."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked: list[str] = []

    def _next(self, message: str):
        self.asked.append(message)
        return self.answers.pop(0) if self.answers else None

    def text(self, message, default=None, validate=None):
        return self._next(message)

    def select(self, message, options, default=None):
        return self._next(message)

    def confirm(self, message, default=True):
        return self._next(message)


@pytest.fixture()
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def test_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A small staged template with a package.json named 'template'."""
    root = tmp_path / "template"
    (root / "client" / "src").mkdir(parents=True)
    manifest = {
        "name": "template",
        "version": "0.1.0",
        "private": True,
        "scripts": {"dev": "vite"},
        "dependencies": {"react": "^18.3.1"},
    }
    (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    (root / ".gitignore").write_text("node_modules\n.env\n", encoding="utf-8")
    (root / "README.md").write_text("# Template\n", encoding="utf-8")
    (root / "client" / "src" / "main.tsx").write_text("export {};\n", encoding="utf-8")
    return root


@pytest.fixture()
def failing_runner():
    """Factory for a RecordingRunner whose listed commands fail."""
    return RecordingRunner


@pytest.fixture()
def scripted_prompter():
    """Factory for a ScriptedPrompter answering from the given queue."""
    return ScriptedPrompter
