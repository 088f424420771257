"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ansi_to_image.cli.app import create_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sample(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_bytes(b"\x1b[31mA\x1b[0mB")
    return path


class TestTokensCommand:
    """Tests for `ansi-to-image tokens`."""

    def test_json(self, runner: CliRunner, sample: Path) -> None:
        result = runner.invoke(create_app(), ["tokens", str(sample), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["chars_count"] == 2
        assert data["tokens"] == [
            {"color": "#c5c8c6"},
            {"color": "#cc6666"},
            {"char": "A"},
            {"color": "#c5c8c6"},
            {"char": "B"},
        ]

    def test_plain(self, runner: CliRunner, sample: Path) -> None:
        result = runner.invoke(create_app(), ["tokens", str(sample)])
        assert result.exit_code == 0, result.output
        assert "#cc6666" in result.stdout
        assert "2 characters" in result.stdout

    def test_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["tokens", "-", "--json"], input="\x1b[32mZ")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["tokens"][1] == {"color": "#b5bd68"}

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["tokens", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1

    def test_color_config(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        config = tmp_path / "colors.json"
        config.write_text(json.dumps({"normal": {"red": "#ff0000"}}))
        result = runner.invoke(create_app(), ["tokens", str(sample), "--json", "--colors", str(config)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["tokens"][1] == {"color": "#ff0000"}

    def test_bad_color_config(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        config = tmp_path / "colors.json"
        config.write_text(json.dumps({"normal": {"red": "red"}}))
        result = runner.invoke(create_app(), ["tokens", str(sample), "--colors", str(config)])
        assert result.exit_code == 1

    def test_color_config_not_utf8(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        config = tmp_path / "colors.json"
        config.write_bytes(b"\xff\xfe")
        result = runner.invoke(create_app(), ["tokens", str(sample), "--colors", str(config)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestPaletteCommand:
    """Tests for `ansi-to-image palette`."""

    def test_json(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["palette", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert len(data) == 269
        assert data[256] == {"index": 256, "name": "foreground", "color": "#c5c8c6"}
        assert data[196]["name"] is None
        assert data[196]["color"] == "#ff0000"

    def test_table(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["palette"])
        assert result.exit_code == 0, result.output
        assert "dim_foreground" in result.stdout


@pytest.mark.slow
class TestRenderCommand:
    """Tests for `ansi-to-image render`."""

    def test_render(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.png"
        result = runner.invoke(create_app(), ["render", str(sample), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.exists()
        assert "Generated" in result.stdout

    def test_missing_font(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            create_app(),
            ["render", str(sample), "-o", str(tmp_path / "out.png"), "--font", str(tmp_path / "nope.ttf")],
        )
        assert result.exit_code == 1

    def test_verbose(self, runner: CliRunner, sample: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.png"
        result = runner.invoke(create_app(), ["-v", "render", str(sample), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.exists()
