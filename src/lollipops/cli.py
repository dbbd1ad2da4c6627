"""
Lollipops Fonts CLI
===================

Command line access to font resolution and label width measurement.
"""

import logging
import sys
from pathlib import Path

import click

from .core.config import AppConfig, load_config
from .core.exceptions import ConfigurationError
from .fonts import FontRegistry, FontResolver, TextMeasurer

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration YAML file",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """Lollipops font tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        ctx.obj = load_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_obj
def resolve(config: AppConfig):
    """Find and load the default font, printing its name."""
    registry = FontRegistry()
    result = FontResolver(registry, config.fonts).load_default_font()
    if not result.success:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    click.echo(registry.name)


@cli.command()
@click.argument("text")
@click.option("--size", "-s", type=int, default=12, show_default=True, help="Font size")
@click.option("--dpi", type=int, default=None, help="Output DPI (defaults to configuration)")
@click.option(
    "--font",
    "-f",
    "font_path",
    type=click.Path(path_type=Path),
    default=None,
    help="TrueType font to use instead of the automatic default",
)
@click.pass_obj
def measure(config: AppConfig, text, size, dpi, font_path):
    """Print the pixel width of TEXT."""
    registry = FontRegistry()
    resolver = FontResolver(registry, config.fonts)

    if font_path is not None:
        result = resolver.load_font(font_path.stem, font_path)
    else:
        result = resolver.load_default_font()

    if not result.success:
        logger.warning(f"No font loaded, estimating width: {result.error}")

    measurer = TextMeasurer(registry, dpi or config.drawing.dpi)
    click.echo(measurer.measure_font(text, size))


if __name__ == "__main__":
    cli()
