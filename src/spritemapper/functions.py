"""Sprite helper functions exposed to style-sheet expressions.

Every function takes and returns style-sheet values (see
:mod:`spritemapper.values`) and is registered in :data:`FUNCTIONS` under
its CSS name for each accepted arity::

    $icons: sprite-map("icons.yaml");
    background: sprite($icons, new) no-repeat;

renders as::

    background: url('/images/icons-s1a2b3.png') -10px -5px no-repeat;

Layout, hashing and image generation all happen in the packer that
wrote the manifest. These functions validate arguments, look sprites up
and convert units.
"""

from __future__ import annotations

import re
from typing import Any

from spritemapper.config import load_manifest
from spritemapper.constants import VALID_SELECTORS
from spritemapper.errors import (
    InvalidArgumentTypeError,
    InvalidSelectorError,
    MissingSelectorStateError,
    NotASpriteMapError,
    UnknownSpriteError,
)
from spritemapper.logging import get_logger
from spritemapper.models import SpriteEntry, SpriteMap
from spritemapper.position import ZERO, compute_position
from spritemapper.registry import FunctionRegistry
from spritemapper.utils import file_to_data_url, normalize_option_name
from spritemapper.values import (
    BoolValue,
    ColorValue,
    Length,
    StringValue,
    Unit,
    UrlValue,
    ValueList,
)

logger = get_logger("functions")

FUNCTIONS = FunctionRegistry()

IDENTIFIER_RX = re.compile(
    r"\A-?(?:[_a-zA-Z]|[^\x00-\x7f]|\\.)(?:[_a-zA-Z0-9-]|[^\x00-\x7f]|\\.)*\Z"
)

FALSE = BoolValue(value=False)

# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def verify_map(sprite_map: Any, function_name: str = "sprite") -> SpriteMap:
    if not isinstance(sprite_map, SpriteMap):
        raise NotASpriteMapError(function_name)
    return sprite_map


def convert_sprite_name(sprite: Any, function_name: str = "sprite") -> str:
    """Turn a sprite argument into a sprite name.

    Sprites called ``red`` or ``true`` arrive as a color or a boolean
    because of how the expression was parsed, so those are converted
    back to their keyword.

    Raises:
        InvalidArgumentTypeError: If *sprite* cannot name a sprite.
    """
    if isinstance(sprite, str):
        return sprite
    if isinstance(sprite, StringValue):
        return sprite.value
    if isinstance(sprite, BoolValue):
        return sprite.to_css()
    if isinstance(sprite, ColorValue) and sprite.keyword is not None:
        return sprite.keyword
    if isinstance(sprite, Length) and sprite.unit is Unit.NONE:
        return sprite.to_css()
    raise InvalidArgumentTypeError(
        f"The second argument to {function_name}() must be a sprite name."
    )


def _string(value: Any, argument: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, StringValue):
        return value.value
    raise InvalidArgumentTypeError(f"${argument}: {value!r} is not a string")


def _length(value: Any, argument: str) -> Length:
    if isinstance(value, Length):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentTypeError(f"${argument}: {value!r} is not a number")
    if isinstance(value, (int, float)):
        return Length(magnitude=value)
    if isinstance(value, str):
        try:
            return Length.parse(value)
        except ValueError as exc:
            raise InvalidArgumentTypeError(f"${argument}: {exc}") from exc
    raise InvalidArgumentTypeError(f"${argument}: {value!r} is not a number")


def _truthy(value: Any) -> bool:
    if isinstance(value, BoolValue):
        return value.value
    return bool(value)


def _image_for(sprite_map: SpriteMap, name: str) -> SpriteEntry:
    image = sprite_map.image_for(name)
    if image is None:
        raise UnknownSpriteError(name, sprite_map.label, sprite_map.sprite_names)
    return image


def _selector(selector: Any) -> str:
    state = _string(selector, "selector")
    if state not in VALID_SELECTORS:
        raise InvalidSelectorError(
            f"Invalid selector {state!r}, did you mean one of: "
            f"{', '.join(VALID_SELECTORS)}"
        )
    return state


# ---------------------------------------------------------------------------
# Sheet metadata
# ---------------------------------------------------------------------------


@FUNCTIONS.register("sprite-width", ["map"], ["map", "sprite"])
def sprite_width(sprite_map: Any, sprite: Any = None) -> Length:
    """Width of the sprite sheet, or of one sprite in it."""
    sprite_map = verify_map(sprite_map, "sprite-width")
    if sprite is None:
        return Length.px(sprite_map.width)
    name = convert_sprite_name(sprite, "sprite-width")
    return Length.px(_image_for(sprite_map, name).width)


@FUNCTIONS.register("sprite-height", ["map"], ["map", "sprite"])
def sprite_height(sprite_map: Any, sprite: Any = None) -> Length:
    """Height of the sprite sheet, or of one sprite in it."""
    sprite_map = verify_map(sprite_map, "sprite-height")
    if sprite is None:
        return Length.px(sprite_map.height)
    name = convert_sprite_name(sprite, "sprite-height")
    return Length.px(_image_for(sprite_map, name).height)


@FUNCTIONS.register("sprite-names", ["map"])
def sprite_names(sprite_map: Any) -> ValueList:
    sprite_map = verify_map(sprite_map, "sprite-names")
    return ValueList(items=tuple(StringValue(value=n) for n in sprite_map.sprite_names))


@FUNCTIONS.register("sprite-path", ["map"])
def sprite_path(sprite_map: Any) -> StringValue:
    """Filesystem path of the generated sheet."""
    sprite_map = verify_map(sprite_map, "sprite-path")
    return StringValue(value=sprite_map.filename)


@FUNCTIONS.register("sprite-map-name", ["map"])
@FUNCTIONS.register("sprite-name", ["map"])
def sprite_map_name(sprite_map: Any) -> StringValue:
    """Name of the map, derived from the folder holding its sprites."""
    sprite_map = verify_map(sprite_map, "sprite-map-name")
    return StringValue(value=sprite_map.name)


@FUNCTIONS.register("sprite-file", ["map", "sprite"])
def sprite_file(sprite_map: Any, sprite: Any) -> StringValue:
    """Path of the original image a sprite was packed from."""
    name = convert_sprite_name(sprite, "sprite-file")
    sprite_map = verify_map(sprite_map, "sprite-file")
    return StringValue(value=_image_for(sprite_map, name).file)


@FUNCTIONS.register("sprite-url", ["map"])
def sprite_url(sprite_map: Any) -> UrlValue:
    """URL of the generated sheet, including its cache-busting hash."""
    sprite_map = verify_map(sprite_map, "sprite-url")
    base = sprite_map.images_url.rstrip("/")
    return UrlValue(
        url=f"{base}/{sprite_map.path}-s{sprite_map.uniqueness_hash}.png"
    )


@FUNCTIONS.register("inline-sprite", ["map"])
def inline_sprite(sprite_map: Any) -> UrlValue:
    """The generated sheet embedded as a data URL.

    Example::

        #{$icon-sprite-base-class} {
          background-image: inline-sprite($icon-sprites);
        }
    """
    sprite_map = verify_map(sprite_map, "inline-sprite")
    return UrlValue(url=file_to_data_url(sprite_map.filename))


@FUNCTIONS.register("sprite-map", ["glob"], var_kwargs=True)
def sprite_map(glob: Any, **kwargs: Any) -> SpriteMap:
    """Load the sprite map described by a manifest.

    Keyword options are stored on the map with dashes normalised to
    underscores, so ``$layout-mode`` and ``$layout_mode`` are the same.
    """
    loaded = load_manifest(_string(glob, "glob"))
    if not kwargs:
        return loaded
    options = {**loaded.options}
    for key, value in kwargs.items():
        options[normalize_option_name(key)] = value
    return loaded.model_copy(update={"options": options})


# ---------------------------------------------------------------------------
# Positioning
# ---------------------------------------------------------------------------


@FUNCTIONS.register(
    "sprite-position",
    ["map"],
    ["map", "sprite"],
    ["map", "sprite", "offset-x"],
    ["map", "sprite", "offset-x", "offset-y"],
    ["map", "sprite", "offset-x", "offset-y", "use-percentages"],
)
def sprite_position(
    sprite_map: Any,
    sprite: Any = None,
    offset_x: Any = ZERO,
    offset_y: Any = ZERO,
    use_percentages: Any = FALSE,
) -> ValueList:
    """Position of a sprite in its sheet, for use as ``background-position``.

    Example::

        background-position: sprite-position($icons, new, 3px, -2px);

    With ``use_percentages`` true the position is expressed in percent::

        background-position: sprite-position($icons, new, 0, 0, true);

    Raises:
        InvalidArgumentTypeError: If an offset is not a length, or the
            sprite argument is not a name.
        NotASpriteMapError: If *sprite_map* is not a sprite map.
        UnknownSpriteError: If the sprite is not in the map.
    """
    x_offset = _length(offset_x, "offset-x")
    y_offset = _length(offset_y, "offset-y")
    sprite_map = verify_map(sprite_map, "sprite-position")
    if sprite is None:
        raise InvalidArgumentTypeError(
            "The second argument to sprite-position() must be a sprite name."
        )
    name = convert_sprite_name(sprite, "sprite-position")
    image = _image_for(sprite_map, name)
    position = compute_position(
        sprite_map, image, x_offset, y_offset, _truthy(use_percentages)
    )
    logger.debug(
        "Position of %s in %s: %s",
        name,
        sprite_map.name,
        position.to_css(),
        extra={"sprite_map": sprite_map.name, "sprite": name},
    )
    return position


@FUNCTIONS.register(
    "sprite",
    ["map", "sprite"],
    ["map", "sprite", "offset-x"],
    ["map", "sprite", "offset-x", "offset-y"],
    ["map", "sprite", "offset-x", "offset-y", "use-percentages"],
)
def sprite(
    sprite_map: Any,
    sprite: Any,
    offset_x: Any = ZERO,
    offset_y: Any = ZERO,
    use_percentages: Any = FALSE,
) -> ValueList:
    """Sheet URL and sprite position, for the ``background`` shorthand."""
    name = convert_sprite_name(sprite, "sprite")
    verify_map(sprite_map)
    url = sprite_url(sprite_map)
    position = sprite_position(sprite_map, name, offset_x, offset_y, use_percentages)
    return ValueList(items=(url, *position.items))


# ---------------------------------------------------------------------------
# Selector states
# ---------------------------------------------------------------------------


@FUNCTIONS.register("sprite-does-not-have-parent", ["map", "sprite"])
def sprite_does_not_have_parent(sprite_map: Any, sprite: Any) -> BoolValue:
    """True unless the sprite is a ``_hover``-style variant of another sprite."""
    name = convert_sprite_name(sprite, "sprite-does-not-have-parent")
    sprite_map = verify_map(sprite_map, "sprite-does-not-have-parent")
    _image_for(sprite_map, name)
    return BoolValue(value=sprite_map.parent_of(name) is None)


@FUNCTIONS.register("sprite-has-selector", ["map", "sprite", "selector"])
def sprite_has_selector(sprite_map: Any, sprite: Any, selector: Any) -> BoolValue:
    name = convert_sprite_name(sprite, "sprite-has-selector")
    sprite_map = verify_map(sprite_map, "sprite-has-selector")
    state = _selector(selector)
    return BoolValue(value=sprite_map.has_state(name, state))


@FUNCTIONS.register("sprite-selector-file", ["map", "sprite", "selector"])
def sprite_selector_file(sprite_map: Any, sprite: Any, selector: Any) -> StringValue:
    """Name of the sprite used for *selector*, e.g. ``new_hover``."""
    name = convert_sprite_name(sprite, "sprite-selector-file")
    sprite_map = verify_map(sprite_map, "sprite-selector-file")
    state = _string(selector, "selector")
    variant = sprite_map.state_for(name, state)
    if variant is None:
        raise MissingSelectorStateError(
            f"Sprite: {name} does not have a {state} state"
        )
    return StringValue(value=variant.name)


@FUNCTIONS.register("sprite-has-valid-selector", ["selector"])
def sprite_has_valid_selector(selector: Any) -> BoolValue:
    """Whether *selector* can be used as a CSS class name."""
    text = _string(selector, "selector")
    if not IDENTIFIER_RX.match(text):
        raise InvalidSelectorError(f"{text} must be a legal css identifier")
    return BoolValue(value=True)
