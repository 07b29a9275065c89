"""Style-sheet value types passed to and returned from sprite functions.

Every value is an immutable pydantic model that renders itself to CSS
text through ``to_css()``.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

from spritemapper.constants import COLOR_NAMES_BY_RGB

_LENGTH_RX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(px|%)?\s*$")


class Unit(str, Enum):
    """Unit tag carried by a :class:`Length`."""

    NONE = ""
    PX = "px"
    PERCENT = "%"


def format_number(value: float) -> str:
    """Render a number the way CSS expects it (no trailing zeros, 5 decimals max)."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    return f"{value:.5f}".rstrip("0").rstrip(".")


class Length(BaseModel):
    """A number tagged with a unit: unit-less, pixels, or a percentage.

    Attributes:
        magnitude: The numeric value.
        unit: The unit tag.
    """

    magnitude: float
    unit: Unit = Unit.NONE

    model_config = {"frozen": True}

    @classmethod
    def px(cls, magnitude: float) -> "Length":
        return cls(magnitude=magnitude, unit=Unit.PX)

    @classmethod
    def percent(cls, magnitude: float) -> "Length":
        return cls(magnitude=magnitude, unit=Unit.PERCENT)

    @classmethod
    def parse(cls, text: str) -> "Length":
        """Parse CSS text such as ``"3px"``, ``"-2"`` or ``"50%"``.

        Raises:
            ValueError: If *text* is not a number with an optional px/% unit.
        """
        match = _LENGTH_RX.match(text)
        if match is None:
            raise ValueError(f"{text!r} is not a pixel or percentage length")
        magnitude = float(match.group(1))
        if not math.isfinite(magnitude):
            raise ValueError(f"{text!r} is out of range")
        return cls(magnitude=magnitude, unit=Unit(match.group(2) or ""))

    @property
    def is_percentage(self) -> bool:
        return self.unit is Unit.PERCENT

    def to_css(self) -> str:
        return f"{format_number(self.magnitude)}{self.unit.value}"


class StringValue(BaseModel):
    """A string or bare identifier."""

    value: str
    quoted: bool = False

    model_config = {"frozen": True}

    def to_css(self) -> str:
        if self.quoted:
            escaped = self.value.replace('"', '\\"')
            return f'"{escaped}"'
        return self.value


class BoolValue(BaseModel):
    value: bool

    model_config = {"frozen": True}

    def to_css(self) -> str:
        return "true" if self.value else "false"


class ColorValue(BaseModel):
    """An sRGB color, optionally translucent.

    Attributes:
        r: Red channel (0–255).
        g: Green channel (0–255).
        b: Blue channel (0–255).
        a: Alpha (0.0–1.0).
    """

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def keyword(self) -> str | None:
        """The CSS color keyword for this color, if it has one."""
        if self.a != 1.0:
            return None
        return COLOR_NAMES_BY_RGB.get(self.rgb)

    def to_css(self) -> str:
        if self.a != 1.0:
            return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"
        return self.keyword or "#{:02x}{:02x}{:02x}".format(*self.rgb)


class UrlValue(BaseModel):
    url: str

    model_config = {"frozen": True}

    def to_css(self) -> str:
        return f"url('{self.url}')"


CssValue = Union[Length, StringValue, BoolValue, ColorValue, UrlValue]


class ValueList(BaseModel):
    """An ordered list of values, space-separated by default."""

    items: tuple[CssValue, ...] = ()
    separator: str = " "

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> CssValue:
        return self.items[index]

    def to_css(self) -> str:
        return self.separator.join(item.to_css() for item in self.items)
