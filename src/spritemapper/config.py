"""YAML manifest loading and validation for packed sprite maps."""

from __future__ import annotations

from itertools import combinations
from pathlib import Path
from typing import Any

import yaml
from PIL import UnidentifiedImageError
from pydantic import ValidationError

from spritemapper.errors import ManifestError
from spritemapper.logging import get_logger
from spritemapper.models import SpriteMap
from spritemapper.utils import image_size

logger = get_logger("config")


def validate_manifest_path(path: str | Path) -> Path:
    """Resolve and validate that a manifest file exists.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"Manifest file not found: {resolved}")
    return resolved


def _parse_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        ManifestError: If the YAML is malformed or not a mapping.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ManifestError(f"Malformed YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(
            f"Expected a YAML mapping at top level, got {type(data).__name__}"
        )

    return data


def build_sprite_map(data: dict[str, Any], source: str = "<manifest>") -> SpriteMap:
    """Validate a parsed manifest mapping into a :class:`SpriteMap`.

    Raises:
        ManifestError: If required sections are missing or fail validation.
    """
    for key in ("name", "width", "height"):
        if key not in data:
            raise ManifestError(f"Missing required '{key}' in {source}")
    sprites = data.get("sprites", [])
    if not isinstance(sprites, list):
        raise ManifestError(
            f"'sprites' must be a YAML sequence, got {type(sprites).__name__}"
        )
    # Maps named after a folder often omit the path stem.
    data = {"path": data["name"], **data}
    try:
        return SpriteMap(**data)
    except ValidationError as exc:
        raise ManifestError(f"Invalid sprite map in {source}: {exc}") from exc


def load_manifest(path: str | Path) -> SpriteMap:
    """Load and validate a sprite-map manifest from a YAML file.

    Args:
        path: Path to the manifest written by the sprite packer.

    Returns:
        A validated ``SpriteMap``.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ManifestError: If the YAML is malformed or fails validation.
    """
    resolved = validate_manifest_path(path)
    sprite_map = build_sprite_map(_parse_yaml(resolved), source=str(resolved))
    if sprite_map.filename:
        sheet = _resolve_sheet_file(sprite_map.filename, resolved)
        if sheet.is_file():
            sprite_map = sprite_map.model_copy(update={"filename": str(sheet)})
    logger.info(
        "Loaded sprite map: %s (%d sprites, %dx%d)",
        sprite_map.name,
        len(sprite_map.sprites),
        sprite_map.width,
        sprite_map.height,
        extra={"sprite_map": sprite_map.name},
    )
    return sprite_map


def _resolve_sheet_file(filename: str, manifest_path: Path) -> Path:
    """Locate a sheet image given relative to the cwd or to the manifest."""
    sheet = Path(filename)
    if sheet.is_absolute():
        return sheet
    if sheet.is_file():
        return sheet.resolve()
    # Fall back to a path relative to the manifest itself
    return manifest_path.resolve().parent / sheet


def _sheet_size_warnings(sprite_map: SpriteMap, sheet_path: Path) -> list[str]:
    try:
        actual = image_size(sheet_path)
    except (UnidentifiedImageError, OSError) as exc:
        return [f"Sheet image is unreadable: {exc}"]
    expected = (sprite_map.width, sprite_map.height)
    if actual == expected:
        return []
    return [
        f"Sheet image is {actual[0]}x{actual[1]} but the manifest "
        f"declares {expected[0]}x{expected[1]}"
    ]


def validate_manifest(
    path: str | Path,
    *,
    check_sheet_image: bool = True,
) -> list[str]:
    """Validate a manifest and report non-fatal problems.

    Performs everything ``load_manifest()`` does plus:

    - The map contains at least one sprite
    - No two sprites overlap in the sheet
    - The sheet image exists and its size matches the manifest
      (when ``check_sheet_image=True`` and a filename is given)

    Returns:
        List of warning strings (empty if no warnings).

    Raises:
        FileNotFoundError: If the manifest doesn't exist.
        ManifestError: If the manifest fails to load.
    """
    sprite_map = load_manifest(path)
    warnings: list[str] = []

    if not sprite_map.sprites:
        warnings.append(f"Sprite map '{sprite_map.name}' contains no sprites")

    for first, second in combinations(sprite_map.sprites, 2):
        if first.overlaps(second):
            warnings.append(f"Sprites '{first.name}' and '{second.name}' overlap")

    if check_sheet_image and sprite_map.filename:
        sheet_path = Path(sprite_map.filename)
        if not sheet_path.is_file():
            warnings.append(f"Sheet image does not exist: {sprite_map.filename}")
        else:
            warnings.extend(_sheet_size_warnings(sprite_map, sheet_path))

    for warning in warnings:
        logger.warning("%s", warning, extra={"sprite_map": sprite_map.name})
    return warnings
