"""Tests for spritemapper.utils: shared helpers."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest
from PIL import Image, UnidentifiedImageError

from spritemapper.utils import (
    compute_mime_type,
    escape_css_identifier,
    file_to_data_url,
    image_size,
    normalize_option_name,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_png(path: Path, width: int = 4, height: int = 2) -> Path:
    """Save a small transparent PNG and return its path."""
    Image.new("RGBA", (width, height), (0, 0, 0, 0)).save(path, format="PNG")
    return path


# ---------------------------------------------------------------------------
# Sheet files
# ---------------------------------------------------------------------------


class TestComputeMimeType:
    """Tests for compute_mime_type()."""

    def test_known_extension(self) -> None:
        """.gif maps to image/gif."""
        assert compute_mime_type("icons.gif") == "image/gif"

    def test_unknown_extension_defaults_to_png(self) -> None:
        """An unrecognised extension falls back to image/png."""
        assert compute_mime_type("icons.sheet") == "image/png"


class TestFileToDataUrl:
    """Tests for file_to_data_url()."""

    def test_encodes_file(self, tmp_path: Path) -> None:
        """File bytes round through base64 unchanged."""
        sheet = _write_png(tmp_path / "icons.png")
        url = file_to_data_url(sheet)
        assert url.startswith("data:image/png;base64,")
        assert base64.b64decode(url.split(",", 1)[1]) == sheet.read_bytes()

    def test_explicit_media_type(self, tmp_path: Path) -> None:
        """An explicit media type overrides the extension guess."""
        sheet = _write_png(tmp_path / "icons.png")
        assert file_to_data_url(sheet, "image/webp").startswith("data:image/webp;")

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing sheet raises FileNotFoundError naming the path."""
        with pytest.raises(FileNotFoundError, match="icons.png"):
            file_to_data_url(tmp_path / "icons.png")


class TestImageSize:
    """Tests for image_size()."""

    def test_reads_dimensions(self, tmp_path: Path) -> None:
        """(width, height) comes from the image header."""
        assert image_size(_write_png(tmp_path / "icons.png", 30, 12)) == (30, 12)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Bytes Pillow cannot identify raise UnidentifiedImageError."""
        bogus = tmp_path / "icons.png"
        bogus.write_bytes(b"not an image")
        with pytest.raises(UnidentifiedImageError):
            image_size(bogus)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestNormalizeOptionName:
    """Tests for normalize_option_name()."""

    @pytest.mark.parametrize("name", ["$layout-mode", "layout-mode", "layout_mode"])
    def test_spellings_agree(self, name: str) -> None:
        """Dollar prefix and dashes are both dropped."""
        assert normalize_option_name(name) == "layout_mode"


class TestEscapeCssIdentifier:
    """Tests for escape_css_identifier()."""

    @pytest.mark.parametrize("name", ["icons-new", "new_hover", "Arrow2", "café"])
    def test_safe_names_unchanged(self, name: str) -> None:
        """Letters, digits, dashes, underscores and non-ASCII pass through."""
        assert escape_css_identifier(name) == name

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("arrow.up", "arrow\\.up"),
            ("a b", "a\\ b"),
            ("x/y:z", "x\\/y\\:z"),
            ("icons-{new}", "icons-\\{new\\}"),
        ],
    )
    def test_punctuation_escaped(self, name: str, expected: str) -> None:
        """Selector metacharacters are backslash-escaped."""
        assert escape_css_identifier(name) == expected

    def test_leading_digit_hex_escaped(self) -> None:
        """A leading digit becomes a hex escape; later digits stay literal."""
        assert escape_css_identifier("16px") == "\\31 6px"
