"""Shared fixtures for spritemapper tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from PIL import Image

from spritemapper.models import SpriteEntry, SpriteMap

# ---------------------------------------------------------------------------
# Sprite map fixtures
# ---------------------------------------------------------------------------


def icons_manifest_data() -> dict[str, Any]:
    """A 100x50 sheet: three 20x10 icons on one row and a full-width banner."""
    return {
        "name": "icons",
        "path": "icons",
        "uniqueness_hash": "1a2b3",
        "width": 100,
        "height": 50,
        "sprites": [
            {"name": "new", "file": "icons/new.png", "left": 10, "top": 5, "width": 20, "height": 10},
            {"name": "new_hover", "file": "icons/new_hover.png", "left": 40, "top": 5, "width": 20, "height": 10},
            {"name": "red", "file": "icons/red.png", "left": 70, "top": 5, "width": 20, "height": 10},
            {"name": "banner", "file": "icons/banner.png", "left": 0, "top": 40, "width": 100, "height": 10},
        ],
    }


@pytest.fixture()
def icons_map() -> SpriteMap:
    return SpriteMap(**icons_manifest_data())


@pytest.fixture()
def new_sprite(icons_map: SpriteMap) -> SpriteEntry:
    entry = icons_map.image_for("new")
    assert entry is not None
    return entry


@pytest.fixture()
def write_manifest(tmp_path: Path):
    """Factory writing a manifest (and optionally its sheet PNG) to tmp_path."""

    def _write(
        data: dict[str, Any] | None = None,
        sheet_size: tuple[int, int] | None = None,
        name: str = "icons.yaml",
    ) -> Path:
        payload = icons_manifest_data() if data is None else data
        if sheet_size is not None:
            sheet = tmp_path / "icons-s1a2b3.png"
            Image.new("RGBA", sheet_size, (0, 0, 0, 0)).save(sheet, format="PNG")
            payload = {**payload, "filename": str(sheet)}
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return path

    return _write
