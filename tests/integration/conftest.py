from collections.abc import AsyncGenerator

from pydantic import HttpUrl

import pytest

from spotiwire.domain.cache import EntityCache
from spotiwire.infrastructure.adapters.providers.spotify.api import SpotifyWebAPI
from spotiwire.infrastructure.adapters.providers.spotify.client import SpotifyClientAdapter


@pytest.fixture
def entity_cache() -> EntityCache:
    return EntityCache()


@pytest.fixture
async def spotify_api(entity_cache: EntityCache) -> AsyncGenerator[SpotifyWebAPI]:
    client = SpotifyClientAdapter(
        access_token="dummy-access-token",
        base_url=HttpUrl("https://api.spotify.com/v1"),
        cache=entity_cache,
    )
    async with SpotifyWebAPI(client) as spotify:
        yield spotify
