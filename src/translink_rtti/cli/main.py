"""CLI main entry point for the TransLink RTTI client."""

import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import __version__
from ..core import (
    ApiError,
    ClientConfig,
    NetworkError,
    TranslinkClient,
    ValidationError,
)
from ..core.config import API_KEY_ENV, DEFAULT_BUS_COUNT, DEFAULT_TIMEFRAME
from .formatters import format_estimates_table, format_json, format_table

console = Console()
error_console = Console(stderr=True)

PACKAGE_LOGGER = "translink_rtti"


def _run(
    ctx: click.Context,
    title: str,
    call: Callable[[TranslinkClient], Any],
    render: Callable[[Any], None] | None = None,
) -> None:
    """Create a client, run ``call`` and print the result in the chosen format."""
    options = ctx.obj
    try:
        config = ClientConfig.from_env()
        if options["timeout"] is not None:
            config = ClientConfig.model_validate(
                {**config.model_dump(), "connect_timeout": options["timeout"]}
            )
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        error_console.print(f"[red]Error:[/red] Invalid configuration: {escape(details)}")
        sys.exit(1)

    try:
        with TranslinkClient(options["api_key"] or "", config=config) as client:
            with console.status(f"[bold green]Fetching {title.lower()}..."):
                data = call(client)
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except ApiError as e:
        error_console.print(f"[yellow]API error:[/yellow] {e}")
        sys.exit(1)
    except NetworkError as e:
        error_console.print(f"[red]Network error:[/red] {e}")
        sys.exit(1)

    if options["output_format"] == "json":
        click.echo(format_json(data))
    elif render is not None:
        render(data)
    else:
        format_table(data, title=title)


def _enable_debug_logging() -> None:
    """Send this package's debug logs to stderr.

    Only the package logger is lowered to DEBUG. Third-party loggers such as
    urllib3 log full request URLs, including the apikey parameter.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=error_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

@click.group()
@click.version_option(version=__version__)
@click.option(
    "--api-key",
    envvar=API_KEY_ENV,
    help=f"RTTI API key (defaults to ${API_KEY_ENV})",
)
@click.option(
    "--timeout",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    help="Connect timeout in seconds (default 10)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    timeout: float | None,
    output_format: str,
    verbose: bool,
) -> None:
    """TransLink RTTI - Real-time stops, estimates, buses and routes for Metro Vancouver."""
    if verbose:
        _enable_debug_logging()

    ctx.obj = {
        "api_key": api_key,
        "timeout": timeout,
        "output_format": output_format,
    }


@cli.command()
@click.argument("stop_no", type=int, default=0)
@click.option("--lat", type=float, help="Latitude (-90 to 90)")
@click.option("--long", "long_", type=float, help="Longitude (-180 to 180)")
@click.option("--radius", "-r", type=int, help="Search radius in metres (1-2000)")
@click.option("--route", "route_no", help="Only stops served by this route")
@click.pass_context
def stops(
    ctx: click.Context,
    stop_no: int,
    lat: float | None,
    long_: float | None,
    radius: int | None,
    route_no: str | None,
) -> None:
    """Look up a stop, or search stops near a location.

    Examples:
        translink-rtti stops 60980
        translink-rtti stops --lat 49.28 --long -123.12 --radius 500
    """
    filters = {"lat": lat, "long": long_, "radius": radius, "routeNo": route_no}
    _run(ctx, "Stops", lambda client: client.get_stops(stop_no, filters))


@cli.command()
@click.argument("stop_no", type=int)
@click.option(
    "--count",
    "-c",
    type=int,
    help=f"Number of buses (1-10, API default {DEFAULT_BUS_COUNT})",
)
@click.option(
    "--timeframe",
    "time_frame_min",
    type=int,
    help=f"Time frame in minutes (1-120, API default {DEFAULT_TIMEFRAME})",
)
@click.option("--route", "route_no", help="Only estimates for this route")
@click.pass_context
def estimates(
    ctx: click.Context,
    stop_no: int,
    count: int | None,
    time_frame_min: int | None,
    route_no: str | None,
) -> None:
    """Show next bus estimates for a stop.

    Examples:
        translink-rtti estimates 60980
        translink-rtti estimates 60980 --count 3 --route 099
    """
    filters = {"count": count, "time_frame_min": time_frame_min, "routeNo": route_no}
    _run(
        ctx,
        "Estimates",
        lambda client: client.get_stop_estimates(stop_no, filters),
        render=lambda data: format_estimates_table(data, stop_no),
    )


@cli.command()
@click.argument("bus_no", type=int, default=0)
@click.option("--stop", "stop_no", type=int, help="Only buses serving this stop")
@click.option("--route", "route_no", help="Only buses on this route")
@click.pass_context
def buses(
    ctx: click.Context, bus_no: int, stop_no: int | None, route_no: str | None
) -> None:
    """Show real-time bus locations."""
    filters = {"stopNo": stop_no, "routeNo": route_no}
    _run(ctx, "Buses", lambda client: client.get_buses(bus_no, filters))


@cli.command()
@click.argument("route_no", default="")
@click.option("--stop", "stop_no", type=int, help="Only routes serving this stop")
@click.pass_context
def routes(ctx: click.Context, route_no: str, stop_no: int | None) -> None:
    """Show route information."""
    _run(
        ctx,
        "Routes",
        lambda client: client.get_routes(route_no, {"stopNo": stop_no}),
    )


@cli.command()
@click.argument(
    "service",
    type=click.Choice(["location", "schedule", "all"], case_sensitive=False),
)
@click.pass_context
def status(ctx: click.Context, service: str) -> None:
    """Show the status of the location, schedule or all services."""
    _run(ctx, "Status", lambda client: client.get_status(service))


if __name__ == "__main__":
    cli()
