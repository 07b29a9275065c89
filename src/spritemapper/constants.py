"""Shared constants for sprite functions and manifests."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Selector states
# ---------------------------------------------------------------------------

# Pseudo-class states a sprite may have a variant for, named ``<sprite>_<state>``.
VALID_SELECTORS: tuple[str, ...] = ("hover", "active", "target", "focus")

# ---------------------------------------------------------------------------
# Manifest defaults
# ---------------------------------------------------------------------------

DEFAULT_IMAGES_URL: str = "/images"
DEFAULT_MIME_TYPE: str = "image/png"

# ---------------------------------------------------------------------------
# CSS color keywords
# ---------------------------------------------------------------------------

# A sprite named e.g. ``red`` reaches the function as a color value, so the
# keyword has to be recovered from its channels.
COLOR_KEYWORDS: dict[str, tuple[int, int, int]] = {
    "aqua": (0, 255, 255),
    "black": (0, 0, 0),
    "blue": (0, 0, 255),
    "fuchsia": (255, 0, 255),
    "gray": (128, 128, 128),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "maroon": (128, 0, 0),
    "navy": (0, 0, 128),
    "olive": (128, 128, 0),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "red": (255, 0, 0),
    "silver": (192, 192, 192),
    "teal": (0, 128, 128),
    "white": (255, 255, 255),
    "yellow": (255, 255, 0),
}

COLOR_NAMES_BY_RGB: dict[tuple[int, int, int], str] = {
    rgb: name for name, rgb in COLOR_KEYWORDS.items()
}
