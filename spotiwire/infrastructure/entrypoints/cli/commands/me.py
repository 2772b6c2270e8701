import asyncio

import typer

from spotiwire.domain.entities.playlists import Playlist
from spotiwire.infrastructure.adapters.providers.spotify.managers.user import UserClient
from spotiwire.infrastructure.entrypoints.cli.dependencies import get_spotify_api
from spotiwire.infrastructure.entrypoints.cli.parsers import resolve_token


async def me_logic(access_token: str) -> UserClient:
    async with get_spotify_api(access_token) as spotify:
        return await spotify.user.patch_info()


async def playlists_logic(access_token: str, limit: int | None = None, offset: int | None = None) -> list[Playlist]:
    async with get_spotify_api(access_token) as spotify:
        return await spotify.user.get_playlists(limit=limit, offset=offset)


def me(
    token: str = typer.Option(None, "--token", help="A user authorized access token.", callback=resolve_token),
):
    try:
        user = asyncio.run(me_logic(token))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"{user.display_name or user.id} ({user.id})", fg=typer.colors.GREEN)
    for label, value in [
        ("Email", user.email),
        ("Country", user.country),
        ("Product", user.product),
        ("Followers", user.total_followers),
    ]:
        if value is not None:
            typer.echo(f"- {label}: {value}")


def playlists(
    token: str = typer.Option(None, "--token", help="A user authorized access token.", callback=resolve_token),
    limit: int = typer.Option(20, "--limit", help="How many playlists to fetch", min=1, max=50),
    offset: int = typer.Option(0, "--offset", help="The index of the first playlist", min=0),
):
    try:
        items = asyncio.run(playlists_logic(token, limit=limit, offset=offset))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    if not items:
        typer.secho("No playlists found.", fg=typer.colors.YELLOW)
        return

    for i, playlist in enumerate(items, start=offset + 1):
        typer.echo(f"{i}. {playlist.name} ({playlist.total_tracks or 0} tracks) [{playlist.id}]")
