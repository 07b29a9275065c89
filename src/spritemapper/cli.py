"""Command-line interface for spritemapper.

Provides commands for inspecting sprite-map manifests, computing sprite
positions and emitting the matching CSS rules.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from spritemapper.config import load_manifest, validate_manifest
from spritemapper.errors import ManifestError, SpriteMapperError
from spritemapper.functions import sprite_position, sprite_url
from spritemapper.logging import setup_logging
from spritemapper.utils import escape_css_identifier
from spritemapper.values import BoolValue

console = Console()

_manifest_argument = click.argument(
    "manifest_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable detailed logging",
)


def _setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING, verbose=verbose)


def _fail(message: str, exc: Exception, verbose: bool) -> NoReturn:
    console.print(
        f"[bold red]✗[/] {message}: {escape(str(exc))}",
        highlight=False,
        soft_wrap=True,
    )
    if verbose:
        console.print_exception()
    sys.exit(1)


@click.group()
@click.version_option(package_name="spritemapper")
def main() -> None:
    """spritemapper: CSS sprite-map positions, URLs and names."""
    pass


@main.command()
@_manifest_argument
@_verbose_option
def names(manifest_path: Path, verbose: bool) -> None:
    """List the sprites in a sprite-map manifest.

    Example:

        \b
        spritemapper names sprites/icons.yaml
    """
    _setup_logging(verbose)
    try:
        sprite_map = load_manifest(manifest_path)
    except SpriteMapperError as e:
        _fail("Could not load manifest", e, verbose)

    console.print(
        f"[bold]{escape(sprite_map.name)}[/] ({sprite_map.width}x{sprite_map.height}, "
        f"{len(sprite_map.sprites)} sprites)",
        highlight=False,
    )
    for entry in sprite_map.sprites:
        console.print(
            f"  {entry.name}  {entry.width}x{entry.height} at {entry.left},{entry.top}",
            highlight=False,
            markup=False,
        )


@main.command()
@_manifest_argument
@click.argument("sprite")
@click.option("--offset-x", "-x", default="0", help="Horizontal offset (e.g. 3px, 50%)")
@click.option("--offset-y", "-y", default="0", help="Vertical offset (e.g. -2px)")
@click.option(
    "--percentages",
    "-p",
    is_flag=True,
    help="Express the position in percentages",
)
@_verbose_option
def position(
    manifest_path: Path,
    sprite: str,
    offset_x: str,
    offset_y: str,
    percentages: bool,
    verbose: bool,
) -> None:
    """Print the background-position that displays SPRITE.

    Example:

        \b
        spritemapper position sprites/icons.yaml new --offset-x 3px
        spritemapper position sprites/icons.yaml new --percentages
    """
    _setup_logging(verbose)
    try:
        sprite_map = load_manifest(manifest_path)
        result = sprite_position(
            sprite_map, sprite, offset_x, offset_y, BoolValue(value=percentages)
        )
    except SpriteMapperError as e:
        _fail("Position failed", e, verbose)

    console.print(result.to_css(), highlight=False, markup=False)


@main.command()
@_manifest_argument
@click.option(
    "--percentages",
    "-p",
    is_flag=True,
    help="Express positions in percentages",
)
@_verbose_option
def css(manifest_path: Path, percentages: bool, verbose: bool) -> None:
    """Emit a CSS rule for every sprite in the map.

    A base class ``.<map>-sprite`` carries the sheet URL; each sprite
    gets a ``.<map>-<sprite>`` rule with its background-position.
    """
    _setup_logging(verbose)
    try:
        sprite_map = load_manifest(manifest_path)
        base_class = escape_css_identifier(f"{sprite_map.name}-sprite")
        lines = [
            f".{base_class} "
            f"{{ background: {sprite_url(sprite_map).to_css()} no-repeat; }}"
        ]
        for entry in sprite_map.sprites:
            selector = escape_css_identifier(f"{sprite_map.name}-{entry.name}")
            if selector == base_class:
                raise ManifestError(
                    f"Sprite '{entry.name}' collides with base class .{base_class}"
                )
            pos = sprite_position(
                sprite_map, entry.name, 0, 0, BoolValue(value=percentages)
            )
            lines.append(
                f".{selector} {{ background-position: {pos.to_css()}; }}"
            )
    except SpriteMapperError as e:
        _fail("CSS generation failed", e, verbose)

    for line in lines:
        console.print(line, highlight=False, markup=False, soft_wrap=True)


@main.command()
@_manifest_argument
@click.option(
    "--no-check-sheet-image",
    is_flag=True,
    help="Skip comparing the sheet image against the manifest",
)
@_verbose_option
def validate(manifest_path: Path, no_check_sheet_image: bool, verbose: bool) -> None:
    """Validate a sprite-map manifest.

    Checks:
    - YAML syntax and structure
    - Sprite name uniqueness and bounds
    - Overlapping sprites
    - Sheet image existence and size (optional)
    """
    _setup_logging(verbose)
    try:
        warnings = validate_manifest(
            manifest_path, check_sheet_image=not no_check_sheet_image
        )
    except SpriteMapperError as e:
        _fail("Validation failed", e, verbose)

    console.print("[bold green]✓[/] Manifest is valid")
    if warnings:
        console.print()
        console.print(f"[bold yellow]⚠[/] {len(warnings)} warning(s):")
        for warning in warnings:
            console.print(
                f"  • {warning}", highlight=False, markup=False, soft_wrap=True
            )


if __name__ == "__main__":
    main()
