from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer import Typer
from typer.testing import CliRunner

from create_x402_agent_app.cli.commands.create import register_create_command
from create_x402_agent_app.generator import INSTALL_WARNING


@pytest.fixture()
def build_app(template_dir: Path, recording_runner):
    """Return a factory wiring the create command to fakes."""

    def _build(prompter=None, runner=None, template=None) -> tuple[Typer, Console, list[str]]:
        console = Console(file=io.StringIO(), force_terminal=False, width=200)
        outputs: list[str] = []
        app = Typer()

        def fake_show_banner():  # noqa: D401
            outputs.append("banner")

        def prompter_factory(_console: Console):
            if prompter is None:
                raise AssertionError("prompter should not be used")
            return prompter

        register_create_command(
            app,
            console=console,
            show_banner=fake_show_banner,
            prompter_factory=prompter_factory,
            runner=runner or recording_runner,
            template_dir=template or template_dir,
        )
        return app, console, outputs

    return _build


def _output(console: Console) -> str:
    return console.file.getvalue()


def test_yes_flag_creates_project_with_defaults(build_app, recording_runner, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    app, console, outputs = build_app()

    result = CliRunner().invoke(app, ["foo-bar", "--yes"], catch_exceptions=False)

    assert result.exit_code == 0, _output(console)
    project = tmp_path / "foo-bar"
    manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "foo-bar"
    assert manifest["dependencies"] == {"react": "^18.3.1"}
    assert "VITE_NETWORK=base" in (project / ".env").read_text(encoding="utf-8")
    assert recording_runner.commands[0] == ["npm", "install"]
    assert recording_runner.commands[1] == ["git", "init"]
    assert outputs == ["banner"]
    text = _output(console)
    assert "Project created successfully!" in text
    assert "npx vercel dev" in text
    assert "npm run dev" in text
    assert "https://x402-agent.vercel.app" in text


def test_yes_flag_without_name_uses_default_name(build_app, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    app, console, _ = build_app()

    result = CliRunner().invoke(app, ["-y"], catch_exceptions=False)

    assert result.exit_code == 0, _output(console)
    assert (tmp_path / "my-x402-agent" / "package.json").is_file()


def test_interactive_answers_drive_generation(
    build_app, scripted_prompter, recording_runner, tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.chdir(tmp_path)
    prompter = scripted_prompter("agent-x", "yarn", False, False)
    app, console, _ = build_app(prompter=prompter)

    result = CliRunner().invoke(app, [], catch_exceptions=False)

    assert result.exit_code == 0, _output(console)
    assert (tmp_path / "agent-x" / ".env").is_file()
    assert recording_runner.calls == []
    text = _output(console)
    assert "yarn install" in text
    assert "yarn vercel dev" in text


def test_cancelled_name_prompt_exits_without_changes(build_app, scripted_prompter, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    before = sorted(p.name for p in tmp_path.iterdir())
    app, console, _ = build_app(prompter=scripted_prompter(None))

    result = CliRunner().invoke(app, [], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Project creation cancelled" in _output(console)
    assert sorted(p.name for p in tmp_path.iterdir()) == before


def test_existing_directory_exits_non_zero(build_app, recording_runner, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "taken").mkdir()
    (tmp_path / "taken" / "keep.txt").write_text("mine", encoding="utf-8")
    app, console, _ = build_app()

    result = CliRunner().invoke(app, ["taken", "--yes"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "already exists" in _output(console)
    assert [p.name for p in (tmp_path / "taken").iterdir()] == ["keep.txt"]
    assert recording_runner.calls == []


def test_install_failure_still_exits_zero(build_app, failing_runner, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    runner = failing_runner(fail=["npm"])
    app, console, _ = build_app(runner=runner)

    result = CliRunner().invoke(app, ["demo", "--yes"], catch_exceptions=False)

    assert result.exit_code == 0, _output(console)
    text = _output(console)
    assert INSTALL_WARNING in text
    assert "npm install" in text
    assert "Project created successfully!" in text


def test_fatal_error_exits_non_zero(build_app, template_dir: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (template_dir / "package.json").unlink()
    app, console, _ = build_app()

    result = CliRunner().invoke(app, ["demo", "--yes"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Failed to create project" in _output(console)
    assert (tmp_path / "demo").exists()


def test_missing_template_exits_non_zero(build_app, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    app, console, _ = build_app(template=tmp_path / "nowhere")

    result = CliRunner().invoke(app, ["demo", "--yes", "--debug"], catch_exceptions=False)

    assert result.exit_code == 1
    text = _output(console)
    assert "Template directory not found" in text
    assert "Debug Environment" in text
    assert not (tmp_path / "demo").exists()


def test_non_utf8_manifest_reports_failure_panel(build_app, template_dir: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (template_dir / "package.json").write_bytes(b'{"name": "\xff\xfe"}')
    app, console, _ = build_app()

    result = CliRunner().invoke(app, ["demo", "--yes"], catch_exceptions=False)

    assert result.exit_code == 1
    text = _output(console)
    assert "Failed to create project" in text
    assert "not valid UTF-8" in text


def test_unexpected_error_is_reported_with_debug_panel(build_app, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    def explode(project_path, project_name):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr("create_x402_agent_app.generator.update_manifest_name", explode)
    app, console, _ = build_app()

    result = CliRunner().invoke(app, ["demo", "--yes", "--debug"], catch_exceptions=False)

    assert result.exit_code == 1
    text = _output(console)
    assert "Failed to create project: maximum recursion depth exceeded" in text
    assert "Debug Environment" in text
