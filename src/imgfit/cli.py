"""imgfit command-line interface.

Computes shrink-to-fit dimensions from the shell and provides helpers for
inspecting and validating configuration files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
import yaml

from imgfit.errors import ConfigError, InvalidDimensionsError
from imgfit.fit import fit
from imgfit.settings import FitSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Shrink image dimensions to fit a bounding box", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "imgfit.cli"

WIDTH_ARGUMENT = typer.Argument(..., help="Source width")
HEIGHT_ARGUMENT = typer.Argument(..., help="Source height")
MAX_WIDTH_OPTION = typer.Option(None, "--max-width", "-W", help="Maximum width")
MAX_HEIGHT_OPTION = typer.Option(None, "--max-height", "-H", help="Maximum height")
STRICT_OPTION = typer.Option(
    None, "--strict/--no-strict", help="Reject zero, negative and non-finite values"
)
PIXELS_OPTION = typer.Option(None, "--pixels/--no-pixels", help="Print whole pixels")
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> FitSettings:
    try:
        return FitSettings.load(config)
    except (ConfigError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command("fit")
def fit_command(
    width: float = WIDTH_ARGUMENT,
    height: float = HEIGHT_ARGUMENT,
    max_width: float | None = MAX_WIDTH_OPTION,
    max_height: float | None = MAX_HEIGHT_OPTION,
    strict: bool | None = STRICT_OPTION,
    pixels: bool | None = PIXELS_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print WIDTHxHEIGHT shrunk to fit the bounding box."""
    _configure_logging(debug)
    settings = _load_settings(config)

    box_width = settings.max_width if max_width is None else max_width
    box_height = settings.max_height if max_height is None else max_height
    use_strict = settings.strict if strict is None else strict
    use_pixels = settings.pixels if pixels is None else pixels

    try:
        result = fit(width, height, box_width, box_height, strict=use_strict)
        if use_pixels:
            px_width, px_height = result.to_pixels()
            typer.echo(f"{px_width}x{px_height}")
        else:
            typer.echo(f"{result.width:g}x{result.height:g}")
    except InvalidDimensionsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        FitSettings.load(file)
        typer.echo("Config valid")
    except ConfigError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(config: Path | None = CONFIG_OPTION):
    """Print the effective settings as YAML."""
    settings = _load_settings(config)
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False), nl=False)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
