import asyncio
from collections.abc import Sequence
from enum import StrEnum

import typer

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.infrastructure.entrypoints.cli.dependencies import get_spotify_api
from spotiwire.infrastructure.entrypoints.cli.formatters import format_entity
from spotiwire.infrastructure.entrypoints.cli.parsers import resolve_token


class SearchKind(StrEnum):
    TRACKS = "tracks"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"
    SHOWS = "shows"
    EPISODES = "episodes"


async def search_logic(access_token: str, kind: SearchKind, query: str, limit: int) -> Sequence[BaseEntity]:
    async with get_spotify_api(access_token) as spotify:
        manager = getattr(spotify, kind.value)
        return await manager.search(query, limit=limit)


def search(
    kind: SearchKind = typer.Argument(..., help="The kind of items to search"),
    query: str = typer.Argument(..., help="The search query"),
    token: str = typer.Option(None, "--token", help="A user authorized access token.", callback=resolve_token),
    limit: int = typer.Option(10, "--limit", help="How many items to fetch", min=1, max=50),
):
    try:
        items = asyncio.run(search_logic(token, kind=kind, query=query, limit=limit))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    if not items:
        typer.secho(f"No {kind.value} found for: {query}", fg=typer.colors.YELLOW)
        return

    for i, item in enumerate(items, start=1):
        typer.echo(f"{i}. {format_entity(item)}")
