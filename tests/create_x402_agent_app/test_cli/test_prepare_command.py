from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console
from typer import Typer
from typer.testing import CliRunner

from create_x402_agent_app.cli.commands.prepare import register_prepare_command


def _app(default_template_dir: Path) -> tuple[Typer, Console]:
    console = Console(file=io.StringIO(), force_terminal=False, width=200)
    app = Typer()
    register_prepare_command(app, console=console, default_template_dir=default_template_dir)
    return app, console


def _project(root: Path) -> Path:
    (root / "client").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "x402-agent"}', encoding="utf-8")
    (root / "client" / "App.tsx").write_text("export {};\n", encoding="utf-8")
    (root / ".env").write_text("SECRET=1\n", encoding="utf-8")
    return root


def test_prepare_uses_current_directory_by_default(tmp_path: Path, monkeypatch) -> None:
    project = _project(tmp_path / "x402-agent")
    staging = tmp_path / "staging"
    monkeypatch.chdir(project)
    app, console = _app(staging)

    result = CliRunner().invoke(app, [], catch_exceptions=False)

    assert result.exit_code == 0, console.file.getvalue()
    assert (staging / "package.json").is_file()
    assert (staging / "client" / "App.tsx").is_file()
    assert not (staging / ".env").exists()
    text = console.file.getvalue()
    assert "Template prepared successfully!" in text
    assert "Copied 2 file(s)" in text
    assert "Wrote default .gitignore" in text


def test_prepare_with_explicit_paths(tmp_path: Path) -> None:
    project = _project(tmp_path / "x402-agent")
    target = tmp_path / "explicit"
    app, console = _app(tmp_path / "unused")

    result = CliRunner().invoke(app, [str(project), "--template-dir", str(target)], catch_exceptions=False)

    assert result.exit_code == 0, console.file.getvalue()
    assert (target / "package.json").is_file()
    assert not (tmp_path / "unused").exists()


def test_prepare_missing_project_root_fails(tmp_path: Path) -> None:
    app, console = _app(tmp_path / "staging")

    result = CliRunner().invoke(app, [str(tmp_path / "missing")], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Template preparation failed" in console.file.getvalue()


def test_prepare_refuses_project_root_as_template_dir(tmp_path: Path) -> None:
    project = _project(tmp_path / "x402-agent")
    app, console = _app(project)

    result = CliRunner().invoke(app, [str(project)], catch_exceptions=False)

    assert result.exit_code == 1
    assert (project / "package.json").is_file()
