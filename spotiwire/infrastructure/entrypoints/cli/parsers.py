import typer

from spotiwire.infrastructure.config.settings.spotify import spotify_settings


def resolve_token(value: str | None) -> str:
    token = value or spotify_settings.ACCESS_TOKEN
    if not token:
        raise typer.BadParameter("An access token is required, use --token or SPOTIFY_ACCESS_TOKEN.")
    return token
