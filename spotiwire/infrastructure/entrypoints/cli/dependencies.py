from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from spotiwire.domain.cache import EntityCache
from spotiwire.infrastructure.adapters.providers.spotify.api import SpotifyWebAPI
from spotiwire.infrastructure.adapters.providers.spotify.client import SpotifyClientAdapter
from spotiwire.infrastructure.config.settings.spotify import spotify_settings


def get_entity_cache() -> EntityCache:
    return EntityCache() if spotify_settings.CACHE_ENABLED else EntityCache.disabled()


@asynccontextmanager
async def get_spotify_client(access_token: str) -> AsyncGenerator[SpotifyClientAdapter]:
    async with SpotifyClientAdapter(
        access_token=access_token,
        token_type=spotify_settings.TOKEN_TYPE,
        base_url=spotify_settings.BASE_URL,
        timeout=spotify_settings.HTTP_TIMEOUT,
        cache=get_entity_cache(),
    ) as client:
        yield client


@asynccontextmanager
async def get_spotify_api(access_token: str) -> AsyncGenerator[SpotifyWebAPI]:
    async with get_spotify_client(access_token) as client:
        yield SpotifyWebAPI(client)
