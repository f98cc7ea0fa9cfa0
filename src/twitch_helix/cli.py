"""CLI interface for the Twitch Helix client."""

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from twitch_helix import __version__
from twitch_helix.config import get_config
from twitch_helix.exceptions import RequestFailedError, TwitchError
from twitch_helix.output.console import Console as OutputConsole
from twitch_helix.output.json_writer import build_report, write_json_report
from twitch_helix.sdk import Twitch

T = TypeVar("T")

app = typer.Typer(
    name="twitch-helix",
    help="Query the Twitch Helix API",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"twitch-helix version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Twitch Helix - Query the Twitch Helix API."""
    pass


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def fetch_with_retries(fetch: Callable[[], T], retries: int) -> T:
    """Call ``fetch``, retrying transport failures up to ``retries`` times.

    Only RequestFailedError is retried; status and decoding errors are raised
    on the first attempt.
    """
    retrying = Retrying(
        retry=retry_if_exception_type(RequestFailedError),
        stop=stop_after_attempt(retries + 1),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    return retrying(fetch)


def _collect(
    kind: str,
    count: Optional[int],
    output: Optional[Path],
    retries: int,
    verbose: bool,
    debug: bool,
    quiet: bool,
):
    """Fetch streams or games, print them and optionally save them as JSON."""
    setup_logging(verbose=verbose, debug=debug)
    output_console = OutputConsole(quiet=quiet)
    config = get_config()

    if count is None:
        count = config.default_count

    try:
        with Twitch.from_config(config) as twitch:
            if kind == "streams":
                items = fetch_with_retries(lambda: twitch.get_streams(count), retries)
            else:
                items = fetch_with_retries(lambda: twitch.get_top_games(count), retries)
    except TwitchError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)

    if kind == "streams":
        output_console.print_streams(items)
    else:
        output_console.print_games(items)

    if output is not None:
        output_file = write_json_report(build_report(kind, items), output, kind)
        output_console.print_output_path(str(output_file))


@app.command()
def streams(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of streams to fetch (default: 20)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path",
    ),
    retries: int = typer.Option(
        0,
        "--retries",
        min=0,
        help="Retry attempts on network errors",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output"),
):
    """List the top live streams.

    Examples:
        twitch-helix streams
        twitch-helix streams --count 250 --output streams.json
    """
    _collect("streams", count, output, retries, verbose, debug, quiet)


@app.command()
def games(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of games to fetch (default: 20)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path",
    ),
    retries: int = typer.Option(
        0,
        "--retries",
        min=0,
        help="Retry attempts on network errors",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output"),
):
    """List the most watched games and categories."""
    _collect("games", count, output, retries, verbose, debug, quiet)


@app.command()
def check_config():
    """Check Twitch client id configuration."""
    config = get_config()

    console.print(f"API URL: {config.api_url}")
    if config.has_client_id:
        console.print("[green]Twitch client id is configured[/green]")
    else:
        console.print("[yellow]No Twitch client id configured[/yellow]")
        console.print()
        console.print("To configure a client id:")
        console.print("  export TWITCH_CLIENT_ID=your_client_id_here")
        console.print()
        console.print("Register an application at: https://dev.twitch.tv/console/apps")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
