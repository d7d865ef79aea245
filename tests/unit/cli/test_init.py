"""Unit tests for the init command."""

import logging
from pathlib import Path

from layoutkit import __version__
from layoutkit.blueprint.io import load_blueprint
from layoutkit.cli.commands.init import create_starter_blueprint
from layoutkit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestCreateStarterBlueprint:
    """Tests for create_starter_blueprint function."""

    def test_contents(self) -> None:
        """The starter blueprint declares folders and a README."""
        blueprint = create_starter_blueprint("demo")

        assert blueprint.data == {"project": "demo"}
        assert [e.path for e in blueprint.folders] == ["src", "docs"]
        assert [e.path for e in blueprint.files] == ["README.md"]


class TestInitCommand:
    """Tests for layoutkit init command."""

    def test_writes_blueprint(self, tmp_path: Path) -> None:
        """init writes a loadable blueprint."""
        output = tmp_path / "layout.toml"

        result = runner.invoke(app, ["init", str(output), "--name", "demo"])

        assert result.exit_code == 0, result.output
        assert load_blueprint(output).name == "demo"

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        output = tmp_path / "layout.toml"
        output.write_text("keep me")

        result = runner.invoke(app, ["init", str(output)])

        assert result.exit_code == 1
        assert output.read_text() == "keep me"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file."""
        output = tmp_path / "layout.toml"
        output.write_text("old")

        result = runner.invoke(app, ["init", str(output), "--force", "-n", "x"])

        assert result.exit_code == 0, result.output
        assert load_blueprint(output).name == "x"


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows help."""
        result = runner.invoke(app, [])

        assert "ensure" in result.output

    def test_logging_silent_by_default(self, tmp_path: Path) -> None:
        """Without --verbose the layoutkit logger only passes CRITICAL records."""
        result = runner.invoke(app, ["init", str(tmp_path / "l.toml")])

        assert result.exit_code == 0, result.output

        assert logging.getLogger("layoutkit").level == logging.CRITICAL

    def test_verbose_enables_debug_logging(self, tmp_path: Path) -> None:
        """--verbose lowers the layoutkit logger to DEBUG."""
        result = runner.invoke(app, ["--verbose", "init", str(tmp_path / "l.toml")])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("layoutkit").level == logging.DEBUG

    def test_options_after_argument(self, tmp_path: Path) -> None:
        """Options may follow the positional argument."""
        output = tmp_path / "layout.toml"

        result = runner.invoke(app, ["init", str(output), "-n", "late", "--force"])

        assert result.exit_code == 0, result.output
        assert load_blueprint(output).name == "late"
