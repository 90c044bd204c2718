"""CLI interface for GitHub Wrapped."""

import asyncio
import json
import logging
import time
from datetime import date
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from github_wrapped import __version__
from github_wrapped.analysis.remarks import build_remarks
from github_wrapped.config import get_config
from github_wrapped.exceptions import (
    GitHubRateLimitError,
    GitHubWrappedError,
    RateLimitExceededError,
    UserNotFoundError,
)
from github_wrapped.models.statistics import Statistics
from github_wrapped.output.console import Console as OutputConsole
from github_wrapped.output.json_writer import build_report, write_json_report
from github_wrapped.sdk import GitHubWrapped
from github_wrapped.services.github_rest_client import GitHubRestClient
from github_wrapped.utils.rate_limiter import (
    LOW_REMAINING_THRESHOLD,
    format_reset_time,
    format_time_remaining,
)

app = typer.Typer(
    name="github-wrapped",
    help="Your year on GitHub, wrapped",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-wrapped version {__version__}")
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
    """GitHub Wrapped - your year in code, summarized."""
    pass


@app.command()
def wrap(
    username: str = typer.Argument(..., help="GitHub username to wrap"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write statistics JSON to this path",
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Write statistics JSON under output/ with the default name",
    ),
    json_only: bool = typer.Option(
        False,
        "--json-only",
        help="Print the statistics JSON instead of the summary",
    ),
    until: Optional[str] = typer.Option(
        None,
        "--until",
        help="Last day of the 365-day window (YYYY-MM-DD)",
    ),
    rest: bool = typer.Option(
        False,
        "--rest",
        help="Use the REST API even when a token is configured",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Build a year-in-review for a GitHub user.

    Examples:
        github-wrapped wrap octocat
        github-wrapped wrap octocat --until 2025-12-31 --save
        github-wrapped wrap octocat --json-only > octocat.json
    """
    configure_logging(verbose)

    today = None
    if until:
        try:
            today = date.fromisoformat(until)
        except ValueError:
            console.print(f"[red]Invalid date format: {until}. Use YYYY-MM-DD[/red]")
            raise typer.Exit(1)

    output_console = OutputConsole(verbose=verbose, quiet=quiet or json_only)

    try:
        stats = asyncio.run(
            _run_wrap(username, today, prefer_graphql=not rest, output_console=output_console)
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Wrap cancelled[/yellow]")
        raise typer.Exit(1)
    except UserNotFoundError:
        output_console.print_error(f"User not found: {username}")
        raise typer.Exit(1)
    except (GitHubRateLimitError, RateLimitExceededError):
        output_console.print_error("Rate limit exceeded. Please try again later.")
        raise typer.Exit(1)
    except GitHubWrappedError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        output_console.print_error(f"Could not reach GitHub: {e}")
        raise typer.Exit(1)

    if json_only:
        typer.echo(json.dumps(build_report(stats), indent=2, ensure_ascii=False))
    else:
        output_console.print_wrap(stats, build_remarks(stats))

    if output is not None or save:
        path = write_json_report(stats, output, today=today)
        output_console.print_output_path(str(path))


async def _run_wrap(
    username: str,
    today: Optional[date],
    prefer_graphql: bool,
    output_console: OutputConsole,
) -> Statistics:
    """Fetch and aggregate asynchronously."""
    config = get_config()

    if not config.is_authenticated:
        output_console.print_warning(
            "No GitHub token found. Using unauthenticated access (60 requests/hour).\n"
            "Set GITHUB_TOKEN for higher rate limits and the full contribution calendar."
        )

    async with GitHubWrapped(config=config) as client:
        with output_console.create_progress() as progress:
            progress.add_task(f"Wrapping {username}...", total=None)
            return await client.wrap(username, today=today, prefer_graphql=prefer_graphql)


@app.command()
def check_token():
    """Check GitHub token configuration and rate limits."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print("GraphQL API: Available (full contribution calendar)")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print("GraphQL API: Not available (REST commit scan only)")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print("No special scopes needed for public data access.")

    try:
        resources = asyncio.run(_fetch_rate_limit())
    except (GitHubWrappedError, httpx.HTTPError) as e:
        console.print(f"[dim]Could not check rate limit: {e}[/dim]")
        return

    core = resources.get("core", {})
    remaining = core.get("remaining", 0)
    limit = core.get("limit", config.effective_rate_limit)
    reset = core.get("reset")

    console.print(f"Rate limit: {remaining}/{limit} requests remaining")
    if reset is not None and remaining < LOW_REMAINING_THRESHOLD:
        console.print(
            f"[yellow]  Resets in: {format_time_remaining(reset - time.time())} "
            f"(at {format_reset_time(reset)})[/yellow]"
        )


async def _fetch_rate_limit() -> dict:
    async with GitHubRestClient(config=get_config()) as client:
        return await client.get_rate_limit()


if __name__ == "__main__":
    app()
