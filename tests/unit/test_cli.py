"""Tests for CLI commands."""

import importlib
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from acf_blocks.cli import app, build_definition, load_definition
from acf_blocks.core.config import BuilderOptions
from acf_blocks.core.errors import DefinitionLoadError


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep table cells on one line."""
    app_module = importlib.import_module("acf_blocks.cli.app")
    monkeypatch.setattr(app_module, "console", Console(width=200))


@pytest.fixture
def definition(fixtures_dir: Path) -> Path:
    return fixtures_dir / "hero_blocks.py"


def test_inspect(cli_runner: CliRunner, definition: Path) -> None:
    result = cli_runner.invoke(app, ["inspect", str(definition)])
    assert result.exit_code == 0, result.output
    assert "group_hero-banner" in result.output
    assert "group_call-to-action" in result.output
    assert "Layout" in result.output


def test_dump_to_stdout(cli_runner: CliRunner, definition: Path) -> None:
    result = cli_runner.invoke(app, ["dump", str(definition)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [b["name"] for b in payload["blocks"]] == ["group_hero-banner", "group_call-to-action"]
    assert payload["blocks"][0]["render_callback"] == "acf_blocks.core.builder.Builder.render_block"
    hero = payload["field_groups"][0]
    assert hero["fields"][0]["placeholder"] == "Enter heading"
    assert [f["name"] for f in hero["fields"][2]["sub_fields"]] == ["title", "caption"]


def test_dump_to_file(cli_runner: CliRunner, definition: Path, tmp_path: Path) -> None:
    output = tmp_path / "records.json"
    result = cli_runner.invoke(app, ["dump", str(definition), "-o", str(output)])
    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text())
    assert payload["field_groups"][1]["fields"] == []


def test_dump_uses_config(cli_runner: CliRunner, definition: Path, tmp_path: Path) -> None:
    config = tmp_path / "acf-blocks.toml"
    config.write_text('[builder]\nblock_mode = "preview"\n')
    result = cli_runner.invoke(app, ["dump", str(definition), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["blocks"][0]["mode"] == "preview"


def test_missing_define(cli_runner: CliRunner, fixtures_dir: Path) -> None:
    result = cli_runner.invoke(app, ["inspect", str(fixtures_dir / "broken_blocks.py")])
    assert result.exit_code == 1
    assert "define" in result.output


def test_missing_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(app, ["dump", str(tmp_path / "nope.py")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_load_definition_returns_define(definition: Path) -> None:
    assert callable(load_definition(definition))


def test_load_definition_import_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.py"
    path.write_text("raise RuntimeError('boom')\n")
    with pytest.raises(DefinitionLoadError, match="boom"):
        load_definition(path)


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "acf-blocks" in result.output


def test_failing_define(cli_runner: CliRunner, fixtures_dir: Path) -> None:
    result = cli_runner.invoke(app, ["dump", str(fixtures_dir / "failing_blocks.py")])
    assert result.exit_code == 1
    assert "missing theme setting" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_build_definition_wraps_define_errors(fixtures_dir: Path) -> None:
    with pytest.raises(DefinitionLoadError, match="Error running"):
        build_definition(fixtures_dir / "failing_blocks.py", BuilderOptions())
