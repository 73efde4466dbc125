"""Command line interface for roadtrip.

    roadtrip plan roads.txt      # solve every trip in the input
    roadtrip check roads.txt     # report size and strong connectivity
    roadtrip dump roads.txt      # re-emit the parsed road map
    cat roads.txt | roadtrip plan
"""

from __future__ import annotations

import io
import logging
import sys
from typing import NoReturn, TextIO

import click

from .config import ObservabilityConfig, get_config
from .container import Container
from .domain.errors import DisconnectedMapError, RoadTripError
from .io.road_map_writer import write_road_map
from .ports.graph import RoadMapRepositoryPort
from .services import RoutePlannerService


def _configure_logging(config: ObservabilityConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.level.upper()
    logging.basicConfig(level=level, format=config.format, stream=sys.stderr)


def _container(ctx: click.Context, input_file: TextIO) -> Container:
    return Container.create_default(ctx.obj["config"], stream=input_file)


def _fail(ctx: click.Context, error: RoadTripError) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Plan shortest-distance and shortest-time routes on a road map."""
    config = get_config()
    _configure_logging(config.observability, verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.pass_context
def plan(ctx: click.Context, input_file: TextIO) -> None:
    """Solve every trip listed after the road map in INPUT_FILE."""
    planner = _container(ctx, input_file).resolve(RoutePlannerService)
    try:
        click.echo(planner.report())
    except DisconnectedMapError as e:
        click.echo(e.message)
        ctx.exit(1)
    except RoadTripError as e:
        _fail(ctx, e)


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.pass_context
def check(ctx: click.Context, input_file: TextIO) -> None:
    """Report the size of the road map and whether it is strongly connected."""
    repository = _container(ctx, input_file).resolve(RoadMapRepositoryPort)
    try:
        road_map = repository.load_road_map()
    except RoadTripError as e:
        _fail(ctx, e)

    connected = road_map.is_strongly_connected()
    click.echo(f"Locations: {road_map.vertex_count()}")
    click.echo(f"Road segments: {road_map.edge_count()}")
    click.echo(f"Strongly connected: {'yes' if connected else 'no'}")


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.pass_context
def dump(ctx: click.Context, input_file: TextIO) -> None:
    """Print the road map parsed from INPUT_FILE in normalized form."""
    repository = _container(ctx, input_file).resolve(RoadMapRepositoryPort)
    try:
        road_map = repository.load_road_map()
    except RoadTripError as e:
        _fail(ctx, e)

    buffer = io.StringIO()
    write_road_map(road_map, buffer)
    click.echo(buffer.getvalue(), nl=False)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
