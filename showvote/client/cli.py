"""CLI for the Show Vote API.

Commands:
    slate       Show the voting status and today's slate
    vote        Vote for a show in today's slate
    results     Show today's ranking (after the reveal hour)
    watch       Refresh the board every minute
    add-show    Add a show to the catalog (admin)

State (identity cookie and local vote memory) lives in SHOWVOTE_HOME,
~/.showvote by default.

The client assumes the server's default hours (6am-6pm voting, results
from 7pm). When the server overrides them, set SHOWVOTE_OPEN_HOUR,
SHOWVOTE_CLOSE_HOUR and SHOWVOTE_REVEAL_HOUR to match.
"""

import asyncio
import os
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from showvote import __version__
from showvote.client.api_client import ShowVoteClient, ShowVoteClientError
from showvote.client.board import BoardStatus, board_status, schedule_from_environment
from showvote.client.vote_memory import RememberedVote, VoteMemory
from showvote.domain.models.voting_window import VotingSchedule, format_hour

HOME_ENV_VAR = "SHOWVOTE_HOME"
API_URL_ENV_VAR = "SHOWVOTE_API_URL"
DEFAULT_HOME = Path.home() / ".showvote"
BAR_WIDTH = 20

app = typer.Typer(
    name="showvote",
    help="Vote for today's TV show from the terminal.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"showvote version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Show Vote client.

    One vote per day between 6am and 6pm; results from 7pm.
    """
    pass


# =============================================================================
# Helpers
# =============================================================================


def _home() -> Path:
    configured = os.getenv(HOME_ENV_VAR)
    return Path(configured).expanduser() if configured else DEFAULT_HOME


def _now() -> datetime:
    return datetime.now().astimezone()


def _client(api_url: Optional[str]) -> ShowVoteClient:
    return ShowVoteClient(base_url=api_url, cookie_path=_home() / "cookies.json")


def _memory() -> VoteMemory:
    return VoteMemory(_home() / "votes.json")


def _schedule() -> VotingSchedule:
    try:
        return schedule_from_environment()
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid voting hours: {e}", style="bold")
        raise typer.Exit(code=1)


@contextmanager
def _exit_on_api_error() -> Iterator[None]:
    """Print API failures in red and exit with code 1."""
    try:
        yield
    except ShowVoteClientError as e:
        _print_api_error(e)
        raise typer.Exit(code=1)
    except httpx.HTTPError as e:
        console.print(f"[red]Error:[/red] Could not reach the server: {e}", style="bold")
        raise typer.Exit(code=1)


def _print_api_error(error: ShowVoteClientError) -> None:
    console.print(f"[red]Error:[/red] {error.message}", style="bold")
    available_at = error.detail.get("availableAt")
    if available_at:
        console.print(f"Available at: {available_at}", style="dim")


async def _fetch_slate(api_url: Optional[str]) -> list[dict]:
    async with _client(api_url) as client:
        return await client.get_daily_shows()


async def _fetch_results(api_url: Optional[str]) -> list[dict]:
    async with _client(api_url) as client:
        return await client.get_results()


async def _cast_vote(api_url: Optional[str], show_id: str) -> list[dict]:
    """Fetch the slate then vote with the same identity cookie."""
    async with _client(api_url) as client:
        shows = await client.get_daily_shows()
        await client.vote(show_id)
        return shows


async def _add_show(
    api_url: Optional[str],
    title: str,
    description: str,
    image_url: Optional[str],
    genre: Optional[str],
) -> dict:
    async with _client(api_url) as client:
        return await client.add_show(title, description, image_url=image_url, genre=genre)


# =============================================================================
# Rendering
# =============================================================================


def _render_status(status: BoardStatus) -> None:
    if status.voting_open:
        line = "[green]Voting is OPEN[/green]"
    else:
        line = "[red]Voting is CLOSED[/red]"
    if status.countdown:
        line += f"  |  Results in: {status.countdown}"
    else:
        line += "  |  Results are available"
    console.print(line)


def _render_thanks(vote: RememberedVote, schedule: VotingSchedule) -> None:
    console.print(
        Panel(
            f"You voted for: [bold]{vote.title}[/bold]\n"
            f"Results will be available at {format_hour(schedule.reveal_hour)}.",
            title="Thank you for voting!",
            border_style="green",
        )
    )


def _render_slate(
    shows: list[dict],
    status: BoardStatus,
    vote: Optional[RememberedVote],
    schedule: VotingSchedule,
) -> None:
    if vote is not None:
        _render_thanks(vote, schedule)
        return

    if not shows:
        console.print("No shows were selected today.", style="dim")
        return

    table = Table(title="Today's shows")
    table.add_column("#", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Genre")
    table.add_column("Description")
    table.add_column("Id", style="dim")
    for index, show in enumerate(shows, start=1):
        table.add_row(
            str(index),
            show["title"],
            show.get("genre") or "",
            show["description"],
            show["id"],
        )
    console.print(table)

    if status.voting_open:
        console.print("Vote with: showvote vote SHOW_ID", style="dim")


def _render_results(results: list[dict]) -> None:
    if not results:
        console.print("No votes have been recorded today.")
        return

    total = sum(result["votes"] for result in results)
    console.print(f"Total votes: [bold]{total}[/bold]")

    table = Table(title="Today's results")
    table.add_column("Rank", justify="right")
    table.add_column("Show", style="bold")
    table.add_column("Votes", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("")
    for rank, result in enumerate(results, start=1):
        votes = result["votes"]
        share = votes / total * 100 if total else 0.0
        table.add_row(
            str(rank),
            result["show"]["title"],
            f"{votes} vote" if votes == 1 else f"{votes} votes",
            f"{round(share)}%",
            "█" * round(share / 100 * BAR_WIDTH),
        )
    console.print(table)


def _render_board(api_url: Optional[str]) -> None:
    """Status bar plus results or slate, whichever the hour calls for."""
    now = _now()
    schedule = _schedule()
    status = board_status(now, schedule)
    _render_status(status)
    if status.results_visible:
        _render_results(asyncio.run(_fetch_results(api_url)))
    else:
        shows = asyncio.run(_fetch_slate(api_url))
        _render_slate(shows, status, _memory().recall(now.date()), schedule)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def slate(
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        "-u",
        envvar=API_URL_ENV_VAR,
        help="API base URL (default: http://localhost:8000)",
    ),
) -> None:
    """Show the voting status and today's slate.

    Example:
        showvote slate
    """
    now = _now()
    schedule = _schedule()
    status = board_status(now, schedule)
    with _exit_on_api_error():
        shows = asyncio.run(_fetch_slate(api_url))
    _render_status(status)
    _render_slate(shows, status, _memory().recall(now.date()), schedule)


@app.command()
def vote(
    show_id: str = typer.Argument(..., help="Id of the show to vote for"),
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        "-u",
        envvar=API_URL_ENV_VAR,
        help="API base URL (default: http://localhost:8000)",
    ),
) -> None:
    """Vote for a show in today's slate.

    Example:
        showvote vote 3f6c1a52-7d7e-4c59-9a0e-3d2b8f1f6a10
    """
    now = _now()
    schedule = _schedule()
    status = board_status(now, schedule)
    if not status.voting_open:
        console.print(
            f"[red]Voting is closed.[/red] Voting is open from "
            f"{format_hour(schedule.open_hour)} to "
            f"{format_hour(schedule.close_hour)}.",
            style="bold",
        )
        raise typer.Exit(code=1)

    memory = _memory()
    remembered = memory.recall(now.date())
    if remembered is not None:
        console.print("[yellow]You have already voted today.[/yellow]", style="bold")
        _render_thanks(remembered, schedule)
        raise typer.Exit(code=1)

    with _exit_on_api_error():
        shows = asyncio.run(_cast_vote(api_url, show_id))

    title = next((show["title"] for show in shows if show["id"] == show_id), show_id)
    memory.remember(now.date(), show_id, title)
    _render_thanks(RememberedVote(show_id=show_id, title=title), schedule)


@app.command()
def results(
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        "-u",
        envvar=API_URL_ENV_VAR,
        help="API base URL (default: http://localhost:8000)",
    ),
) -> None:
    """Show today's ranking, fetched fresh from the server.

    Example:
        showvote results
    """
    with _exit_on_api_error():
        ranking = asyncio.run(_fetch_results(api_url))
    _render_results(ranking)


@app.command()
def watch(
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        "-u",
        envvar=API_URL_ENV_VAR,
        help="API base URL (default: http://localhost:8000)",
    ),
    interval: float = typer.Option(
        60.0,
        "--interval",
        "-i",
        min=1.0,
        help="Seconds between refreshes",
    ),
    iterations: int = typer.Option(
        0,
        "--iterations",
        "-n",
        min=0,
        help="Stop after this many refreshes (0: until interrupted)",
    ),
) -> None:
    """Keep the board on screen, refreshing every minute.

    Example:
        showvote watch
    """
    refreshes = 0
    try:
        while True:
            console.clear()
            try:
                _render_board(api_url)
            except ShowVoteClientError as e:
                _print_api_error(e)
            except httpx.HTTPError as e:
                console.print(f"[red]Error:[/red] Could not reach the server: {e}")

            refreshes += 1
            if iterations and refreshes >= iterations:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        console.print("Stopped.", style="dim")


@app.command("add-show")
def add_show(
    title: str = typer.Option(..., "--title", "-t", help="Show title"),
    description: str = typer.Option(..., "--description", "-d", help="Show synopsis"),
    image_url: Optional[str] = typer.Option(None, "--image-url", help="Poster URL"),
    genre: Optional[str] = typer.Option(None, "--genre", "-g", help="Genre label"),
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        "-u",
        envvar=API_URL_ENV_VAR,
        help="API base URL (default: http://localhost:8000)",
    ),
) -> None:
    """Add a show to the catalog.

    Example:
        showvote add-show --title "Night Shift" --description "Hospital drama" --genre Drama
    """
    with _exit_on_api_error():
        show = asyncio.run(_add_show(api_url, title, description, image_url, genre))
    console.print(f"[green]Added[/green] {show['title']} ({show['id']})")


if __name__ == "__main__":
    app()
