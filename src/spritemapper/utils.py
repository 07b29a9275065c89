"""Shared helpers for reading generated sheet images."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path

from PIL import Image

from spritemapper.constants import DEFAULT_MIME_TYPE


def compute_mime_type(path: str | Path) -> str:
    """Guess the MIME type of an image file from its extension."""
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or DEFAULT_MIME_TYPE


def file_to_data_url(path: str | Path, media_type: str | None = None) -> str:
    """Read a file and encode it as a base64 data URL.

    Args:
        path: File to inline.
        media_type: MIME type; guessed from the extension when omitted.

    Returns:
        A data URL string: ``data:{media_type};base64,{encoded_data}``

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Sprite sheet not found: {p}")
    encoded = base64.b64encode(p.read_bytes()).decode("ascii")
    return f"data:{media_type or compute_mime_type(p)};base64,{encoded}"


def image_size(path: str | Path) -> tuple[int, int]:
    """Return ``(width, height)`` of an image file without decoding pixels."""
    with Image.open(path) as img:
        return img.size


def normalize_option_name(name: str) -> str:
    """``sprite-map()`` options accept ``$layout-mode`` or ``$layout_mode`` alike."""
    return name.lstrip("$").replace("-", "_")


def escape_css_identifier(name: str) -> str:
    """Escape *name* so it can be used verbatim as a CSS class name.

    ASCII characters other than letters, digits, ``-`` and ``_`` are
    backslash-escaped; a leading digit becomes a hex escape.
    """
    out: list[str] = []
    for i, ch in enumerate(name):
        if i == 0 and ch.isdigit():
            out.append(f"\\{ord(ch):x} ")
        elif not ch.isascii() or ch.isalnum() or ch in "-_":
            out.append(ch)
        else:
            out.append(f"\\{ch}")
    return "".join(out)
