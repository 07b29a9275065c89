"""spritemapper error hierarchy.

All custom exceptions inherit from SpriteMapperError, enabling callers
to catch the base class for blanket error handling or specific
subclasses for targeted recovery.
"""

from __future__ import annotations

from collections.abc import Iterable


class SpriteMapperError(Exception):
    """Base exception for all spritemapper errors."""


class ManifestError(SpriteMapperError):
    """Raised when a sprite-map manifest cannot be loaded or validated."""


class NotASpriteMapError(SpriteMapperError):
    """Raised when a function expecting a sprite map receives something else."""

    def __init__(self, function_name: str = "sprite") -> None:
        self.function_name = function_name
        super().__init__(
            f"The first argument to {function_name}() must be a sprite map."
        )


class UnknownSpriteError(SpriteMapperError):
    """Raised when a sprite name is not present in a sprite map.

    Attributes:
        sprite: The requested sprite name.
        valid_names: Names the map does contain, in layout order.
    """

    def __init__(
        self, sprite: str, map_label: str, valid_names: Iterable[str]
    ) -> None:
        self.sprite = sprite
        self.valid_names = list(valid_names)
        super().__init__(
            f"No sprite called {sprite} found in sprite map {map_label}. "
            f"Did you mean one of: {', '.join(self.valid_names)}"
        )


class InvalidArgumentTypeError(SpriteMapperError):
    """Raised when an argument has the wrong value type (e.g. a non-length offset)."""


class InvalidSelectorError(SpriteMapperError):
    """Raised for unsupported selector states or illegal CSS identifiers."""


class MissingSelectorStateError(SpriteMapperError):
    """Raised when a sprite has no variant for the requested selector state."""


class UnknownFunctionError(SpriteMapperError):
    """Raised when no registered function matches a name and arity."""
