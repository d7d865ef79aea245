"""Unit tests for the ensure command."""

from pathlib import Path

from layoutkit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _write_blueprint(path: Path, body: str) -> Path:
    path.write_text(body)
    return path


class TestEnsureCommand:
    """Tests for layoutkit ensure command."""

    def test_creates_layout(self, tmp_path: Path, sample_blueprint_toml: str) -> None:
        """The blueprint is applied below --base with merged data."""
        blueprint = _write_blueprint(tmp_path / "layout.toml", sample_blueprint_toml)
        base = tmp_path / "out"
        base.mkdir()
        config = tmp_path / "config.toml"

        result = runner.invoke(
            app, ["ensure", str(blueprint), "--base", str(base), "--config", str(config)]
        )

        assert result.exit_code == 0, result.output
        assert (base / "src").is_dir()
        assert (base / "README.md").read_text() == "# demo by alice"
        assert "Created Paths" in result.stdout

    def test_missing_blueprint(self, tmp_path: Path) -> None:
        """A missing blueprint file exits with code 1."""
        result = runner.invoke(
            app,
            ["ensure", str(tmp_path / "nope.toml"), "--config", str(tmp_path / "c.toml")],
        )

        assert result.exit_code == 1
        assert "Blueprint not found" in result.output

    def test_missing_base(self, tmp_path: Path, sample_blueprint_toml: str) -> None:
        """A missing base directory exits with code 1."""
        blueprint = _write_blueprint(tmp_path / "layout.toml", sample_blueprint_toml)

        result = runner.invoke(
            app,
            [
                "ensure",
                str(blueprint),
                "--base",
                str(tmp_path / "missing"),
                "--config",
                str(tmp_path / "c.toml"),
            ],
        )

        assert result.exit_code == 1
        assert "Base directory does not exist" in result.output

    def test_failure_exit_code(self, tmp_path: Path) -> None:
        """A setup error exits with code 1 after listing partial results."""
        blueprint = _write_blueprint(
            tmp_path / "layout.toml",
            '[[content]]\ntype = "folder"\npath = "a"\n\n'
            '[[content]]\ntype = "file"\npath = "blocker/f.txt"\n',
        )
        base = tmp_path / "out"
        base.mkdir()
        (base / "blocker").write_text("file, not a folder")

        result = runner.invoke(
            app,
            ["ensure", str(blueprint), "-b", str(base), "-c", str(tmp_path / "c.toml")],
        )

        assert result.exit_code == 1
        assert (base / "a").is_dir()
        assert "Setup aborted" in result.output

    def test_config_data_is_implicit(self, tmp_path: Path) -> None:
        """Config [data] values fill placeholders the blueprint does not set."""
        blueprint = _write_blueprint(
            tmp_path / "layout.toml",
            '[[content]]\ntype = "file"\npath = "f.txt"\ntemplate = "{{author}}/{{base_name}}"\n',
        )
        config = tmp_path / "config.toml"
        config.write_text('[data]\nauthor = "Jane"\n')
        base = tmp_path / "proj"
        base.mkdir()

        result = runner.invoke(
            app, ["ensure", str(blueprint), "-b", str(base), "-c", str(config)]
        )

        assert result.exit_code == 0, result.output
        assert (base / "f.txt").read_text() == "Jane/proj"
