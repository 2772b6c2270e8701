import asyncio
from collections.abc import Sequence

import typer

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.types import TimeRange
from spotiwire.infrastructure.entrypoints.cli.dependencies import get_spotify_api
from spotiwire.infrastructure.entrypoints.cli.formatters import format_entity
from spotiwire.infrastructure.entrypoints.cli.parsers import resolve_token

app = typer.Typer()


async def top_tracks_logic(access_token: str, time_range: TimeRange, limit: int) -> Sequence[BaseEntity]:
    async with get_spotify_api(access_token) as spotify:
        return await spotify.user.get_top_tracks(time_range=time_range, limit=limit)


async def top_artists_logic(access_token: str, time_range: TimeRange, limit: int) -> Sequence[BaseEntity]:
    async with get_spotify_api(access_token) as spotify:
        return await spotify.user.get_top_artists(time_range=time_range, limit=limit)


def _display(items: Sequence[BaseEntity]) -> None:
    if not items:
        typer.secho("No items found.", fg=typer.colors.YELLOW)
        return

    for i, item in enumerate(items, start=1):
        typer.echo(f"{i}. {format_entity(item)}")


@app.command("tracks", help="List the top tracks of the current user.")
def tracks(
    token: str = typer.Option(None, "--token", help="A user authorized access token.", callback=resolve_token),
    time_range: TimeRange = typer.Option("medium_term", "--time-range", help="The time frame of the affinity"),
    limit: int = typer.Option(20, "--limit", help="How many tracks to fetch", min=1, max=50),
):
    try:
        items = asyncio.run(top_tracks_logic(token, time_range=time_range, limit=limit))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    _display(items)


@app.command("artists", help="List the top artists of the current user.")
def artists(
    token: str = typer.Option(None, "--token", help="A user authorized access token.", callback=resolve_token),
    time_range: TimeRange = typer.Option("medium_term", "--time-range", help="The time frame of the affinity"),
    limit: int = typer.Option(20, "--limit", help="How many artists to fetch", min=1, max=50),
):
    try:
        items = asyncio.run(top_artists_logic(token, time_range=time_range, limit=limit))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    _display(items)
