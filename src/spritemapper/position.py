"""Background-position computation for a sprite inside its sheet.

Pixel mode moves the sheet so the sprite's top-left corner lands on the
element origin::

    x = offset_x - sprite.left
    y = offset_y - sprite.top

Percentage mode expresses the same alignment relative to the free space
left over once the sprite is subtracted from the sheet::

    x = (offset_x + sprite.left) / (sheet.width - sprite.width) * 100

A result of exactly zero is always unit-less.
"""

from __future__ import annotations

from spritemapper.models import SpriteEntry, SpriteMap
from spritemapper.values import Length, Unit, ValueList

ZERO = Length(magnitude=0)


def nonzero_or(value: float, default: float) -> float:
    """Return *value* unless it is exactly zero, else *default*."""
    return value if value != 0 else default


# Lengths render with at most this many decimals.
PRECISION = 5


def _tagged(value: float, unit: Unit) -> Length:
    value = round(value, PRECISION) + 0.0
    return Length(magnitude=value, unit=Unit.NONE if value == 0 else unit)


def _percent_axis(
    offset: Length, sprite_offset: int, sheet_size: int, sprite_size: int
) -> Length:
    # A sprite spanning the whole axis leaves no free space; divide by 1.
    free_space = nonzero_or(sheet_size - sprite_size, 1)
    return _tagged(
        (offset.magnitude + sprite_offset) / free_space * 100, Unit.PERCENT
    )


def _pixel_axis(offset: Length, sprite_offset: int) -> Length:
    return _tagged(offset.magnitude - sprite_offset, Unit.PX)


def percent_offset_x_passthrough(offset_x: Length) -> Length:
    """Pixel-mode handling of an x offset given as a percentage.

    The percentage is returned unchanged and the sprite's left offset is
    ignored. Existing style sheets rely on this, although the value
    arguably should be scaled to the sheet width instead.
    """
    return offset_x


def compute_position(
    sheet: SpriteMap,
    entry: SpriteEntry,
    offset_x: Length = ZERO,
    offset_y: Length = ZERO,
    use_percentages: bool = False,
) -> ValueList:
    """Compute the CSS ``background-position`` that shows *entry*.

    *sheet* and *entry* may be any objects exposing ``width``/``height``
    (and ``left``/``top`` for the entry); *entry* must belong to *sheet*.

    Args:
        sheet: The sprite sheet layout.
        entry: The sprite to display.
        offset_x: Horizontal adjustment, in pixels or percent.
        offset_y: Vertical adjustment, in pixels or percent.
        use_percentages: Express the result as percentages of the free space.

    Returns:
        A space-separated ``(x, y)`` list of lengths.
    """
    if use_percentages:
        x = _percent_axis(offset_x, entry.left, sheet.width, entry.width)
        y = _percent_axis(offset_y, entry.top, sheet.height, entry.height)
    else:
        if offset_x.is_percentage:
            x = percent_offset_x_passthrough(offset_x)
        else:
            x = _pixel_axis(offset_x, entry.left)
        y = _pixel_axis(offset_y, entry.top)
    return ValueList(items=(x, y))
