"""
geobuffer CLI entrypoint: buffers the shapes of a vector file and writes the
resulting polygons.
"""

import sys

import click  # type: ignore
from click import echo

from geobuffer.core.config import ConfigManager, ConfigValidationError
from geobuffer.core.errors import GeoBufferError
from geobuffer.core.logger import Logger
from geobuffer.geo.measure import FACTORS
from geobuffer.services.buffer import BufferService

logger = Logger.get_logger(__name__)


@click.group()
def cli():
    """geobuffer: geodesic buffers around points, lines and polygons."""
    Logger.setup()


@cli.command(name="buffer")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.option("--radius", "-r", type=float, required=True, help="Buffer distance")
@click.option(
    "--units",
    "-u",
    type=click.Choice(sorted(FACTORS)),
    default=None,
    help="Distance units (defaults to the configured default_units)",
)
@click.option(
    "--resolution",
    "-n",
    type=int,
    default=None,
    help="Vertices per full circle (defaults to 64)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML, TOML or JSON file overriding the defaults",
)
def buffer_cmd(input_path, output_path, radius, units, resolution, config_path):
    """Buffer every shape in INPUT_PATH and write polygons to OUTPUT_PATH."""
    try:
        config = ConfigManager(config_path)
        service = BufferService(config=config, logger=logger)
        result = service.buffer_file(input_path, output_path, radius, units, resolution)
        echo(f"✅  Buffered {len(result['features'])} feature(s) to `{output_path}`")
    except (GeoBufferError, ConfigValidationError) as e:
        echo(f"❌  Buffering failed: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
