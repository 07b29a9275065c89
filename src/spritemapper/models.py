"""Pydantic models for sprite maps and the sprites laid out inside them."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from spritemapper.constants import DEFAULT_IMAGES_URL, VALID_SELECTORS


class SpriteEntry(BaseModel):
    """A single source image placed inside a sprite sheet.

    Attributes:
        name: Identifier, unique within its sheet (e.g. "new", "new_hover").
        file: Path of the original source image.
        left: X offset of the sprite's top-left corner within the sheet.
        top: Y offset of the sprite's top-left corner within the sheet.
        width: Sprite width in pixels.
        height: Sprite height in pixels.
    """

    name: str
    file: str = ""
    left: int = Field(default=0, ge=0)
    top: int = Field(default=0, ge=0)
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    @field_validator("name")
    @classmethod
    def _name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("sprite name must not be empty")
        return v

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def overlaps(self, other: "SpriteEntry") -> bool:
        """Whether the two sprites share at least one pixel."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class SpriteMap(BaseModel):
    """A packed sprite sheet and its layout, as produced by the packer.

    Attributes:
        name: Map name, derived from the folder the sprites came from.
        path: Stem of the generated image path (e.g. "icons").
        filename: Location of the generated sheet image on disk.
        uniqueness_hash: Cache-busting hash computed by the packer.
        images_url: URL prefix generated images are served from.
        width: Total sheet width in pixels.
        height: Total sheet height in pixels.
        sprites: Sprites in layout order.
        options: Extra keyword options passed to ``sprite-map()``.
    """

    name: str
    path: str = ""
    filename: str = ""
    uniqueness_hash: str = ""
    images_url: str = DEFAULT_IMAGES_URL
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    sprites: list[SpriteEntry] = []
    options: dict[str, Any] = {}

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    @model_validator(mode="after")
    def _validate_layout(self) -> "SpriteMap":
        seen: set[str] = set()
        for sprite in self.sprites:
            if sprite.name in seen:
                raise ValueError(f"Duplicate sprite name: {sprite.name!r}")
            seen.add(sprite.name)
            if sprite.right > self.width or sprite.bottom > self.height:
                raise ValueError(
                    f"Sprite {sprite.name!r} ({sprite.width}x{sprite.height} at "
                    f"{sprite.left},{sprite.top}) extends beyond the "
                    f"{self.width}x{self.height} sheet"
                )
        return self

    @property
    def label(self) -> str:
        """``path/name``, as used in error messages."""
        return f"{self.path}/{self.name}"

    @property
    def sprite_names(self) -> list[str]:
        return [s.name for s in self.sprites]

    def image_for(self, name: str) -> SpriteEntry | None:
        """Return the sprite called *name*, or ``None``."""
        for sprite in self.sprites:
            if sprite.name == name:
                return sprite
        return None

    def state_for(self, name: str, state: str) -> SpriteEntry | None:
        """Return the ``<name>_<state>`` variant of a sprite, or ``None``."""
        return self.image_for(f"{name}_{state}")

    def has_state(self, name: str, state: str) -> bool:
        return self.state_for(name, state) is not None

    def parent_of(self, name: str) -> SpriteEntry | None:
        """Return the sprite *name* is a selector-state variant of, if any."""
        base, sep, state = name.rpartition("_")
        if not sep or state not in VALID_SELECTORS:
            return None
        return self.image_for(base)
