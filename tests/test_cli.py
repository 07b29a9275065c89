"""Tests for spritemapper CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from conftest import icons_manifest_data
from spritemapper.cli import main


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help lists every subcommand."""
    result = cli_runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for command in ("names", "position", "css", "validate"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version displays version information."""
    result = cli_runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


class TestNames:
    def test_lists_sprites(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that names prints the map summary and one line per sprite."""
        result = cli_runner.invoke(main, ["names", str(write_manifest())])
        assert result.exit_code == 0
        assert "icons (100x50, 4 sprites)" in result.output
        assert "new_hover  20x10 at 40,5" in result.output

    def test_missing_manifest(self, cli_runner: CliRunner) -> None:
        """Test that a nonexistent manifest path is rejected by click."""
        result = cli_runner.invoke(main, ["names", "does-not-exist.yaml"])
        assert result.exit_code != 0

    def test_invalid_manifest(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that an invalid manifest fails with exit code 1."""
        result = cli_runner.invoke(main, ["names", str(write_manifest({"name": "x"}))])
        assert result.exit_code == 1
        assert "Missing required 'width'" in result.output


class TestPosition:
    def test_pixel_offsets(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that pixel offsets are applied to the sprite's position."""
        result = cli_runner.invoke(
            main,
            ["position", str(write_manifest()), "new", "--offset-x=3px", "--offset-y=-2px"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "-7px -7px"

    def test_percentages(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that --percentages expresses the position relative to free space."""
        result = cli_runner.invoke(
            main, ["position", str(write_manifest()), "new", "--percentages"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "12.5% 12.5%"

    def test_unknown_sprite(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that an unknown sprite name lists the valid ones."""
        result = cli_runner.invoke(main, ["position", str(write_manifest()), "old"])
        assert result.exit_code == 1
        assert "No sprite called old" in result.output

    def test_bad_offset(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that a length with an unsupported unit fails gracefully."""
        result = cli_runner.invoke(
            main, ["position", str(write_manifest()), "new", "--offset-x=3em"]
        )
        assert result.exit_code == 1
        assert "Position failed" in result.output


class TestCss:
    def test_rules(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that css emits the base class then one rule per sprite."""
        result = cli_runner.invoke(main, ["css", str(write_manifest())])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == (
            ".icons-sprite { background: url('/images/icons-s1a2b3.png') no-repeat; }"
        )
        assert ".icons-new { background-position: -10px -5px; }" in lines
        assert ".icons-banner { background-position: 0 -40px; }" in lines

    def test_percentages(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that -p switches every rule to percentages."""
        result = cli_runner.invoke(main, ["css", str(write_manifest()), "-p"])
        assert result.exit_code == 0
        assert ".icons-new { background-position: 12.5% 12.5%; }" in result.output

    def test_selectors_escaped(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that punctuation in sprite names is escaped in selectors."""
        data = icons_manifest_data()
        data["sprites"][0]["name"] = "arrow.up"
        result = cli_runner.invoke(main, ["css", str(write_manifest(data))])
        assert result.exit_code == 0
        assert ".icons-arrow\\.up { background-position: -10px -5px; }" in result.output

    def test_leading_digit_map_name(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that a map name starting with a digit is hex-escaped."""
        data = {**icons_manifest_data(), "name": "16px"}
        result = cli_runner.invoke(main, ["css", str(write_manifest(data))])
        assert result.exit_code == 0
        assert result.output.startswith(".\\31 6px-sprite {")
        assert ".\\31 6px-new {" in result.output

    def test_sprite_named_like_base_class(
        self, cli_runner: CliRunner, write_manifest
    ) -> None:
        """Test that a sprite called 'sprite' is rejected instead of overriding the base rule."""
        data = icons_manifest_data()
        data["sprites"][2]["name"] = "sprite"
        result = cli_runner.invoke(main, ["css", str(write_manifest(data))])
        assert result.exit_code == 1
        assert "CSS generation failed" in result.output
        assert "collides with base class .icons-sprite" in result.output
        assert "background-position" not in result.output


class TestValidate:
    def test_valid(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that a clean manifest validates without warnings."""
        path = write_manifest(sheet_size=(100, 50))
        result = cli_runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Manifest is valid" in result.output
        assert "warning" not in result.output

    def test_warnings_reported(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that non-fatal problems are listed but still exit 0."""
        data = icons_manifest_data()
        data["sprites"][1]["left"] = 20
        result = cli_runner.invoke(
            main, ["validate", str(write_manifest(data)), "--no-check-sheet-image"]
        )
        assert result.exit_code == 0
        assert "1 warning(s)" in result.output
        assert "Sprites 'new' and 'new_hover' overlap" in result.output

    def test_invalid(self, cli_runner: CliRunner, tmp_path) -> None:
        """Test that a malformed manifest fails validation."""
        path = tmp_path / "bad.yaml"
        path.write_text("- not a mapping\n", encoding="utf-8")
        result = cli_runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_unreadable_sheet_image(self, cli_runner: CliRunner, write_manifest) -> None:
        """Test that a sheet file Pillow cannot decode is a warning, not a crash."""
        path = write_manifest(sheet_size=(100, 50))
        (path.parent / "icons-s1a2b3.png").write_bytes(b"not a png")
        result = cli_runner.invoke(main, ["validate", str(path)])
        assert result.exception is None
        assert result.exit_code == 0
        assert "1 warning(s)" in result.output
        assert "Sheet image is unreadable" in result.output
