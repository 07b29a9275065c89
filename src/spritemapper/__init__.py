"""spritemapper: CSS sprite-map helper functions for style-sheet expressions."""

from spritemapper.config import build_sprite_map, load_manifest, validate_manifest
from spritemapper.errors import (
    InvalidArgumentTypeError,
    InvalidSelectorError,
    ManifestError,
    MissingSelectorStateError,
    NotASpriteMapError,
    SpriteMapperError,
    UnknownFunctionError,
    UnknownSpriteError,
)
from spritemapper.functions import FUNCTIONS
from spritemapper.logging import get_logger, setup_logging
from spritemapper.models import SpriteEntry, SpriteMap
from spritemapper.position import compute_position, nonzero_or
from spritemapper.registry import FunctionRegistry
from spritemapper.values import (
    BoolValue,
    ColorValue,
    Length,
    StringValue,
    Unit,
    UrlValue,
    ValueList,
)

__all__ = [
    "BoolValue",
    "ColorValue",
    "FUNCTIONS",
    "FunctionRegistry",
    "InvalidArgumentTypeError",
    "InvalidSelectorError",
    "Length",
    "ManifestError",
    "MissingSelectorStateError",
    "NotASpriteMapError",
    "SpriteEntry",
    "SpriteMap",
    "SpriteMapperError",
    "StringValue",
    "Unit",
    "UnknownFunctionError",
    "UnknownSpriteError",
    "UrlValue",
    "ValueList",
    "build_sprite_map",
    "compute_position",
    "get_logger",
    "load_manifest",
    "nonzero_or",
    "setup_logging",
    "validate_manifest",
]
