from collections.abc import AsyncGenerator
from unittest import mock

from pydantic import HttpUrl

import pytest

from spotiwire.domain.cache import EntityCache
from spotiwire.domain.ports.client import ClientPort
from spotiwire.infrastructure.adapters.providers.spotify.api import SpotifyWebAPI
from spotiwire.infrastructure.adapters.providers.spotify.client import SpotifyClientAdapter

# --- Cache ---


@pytest.fixture
def entity_cache() -> EntityCache:
    return EntityCache()


# --- Client Mocks ---


@pytest.fixture
def mock_client(entity_cache: EntityCache) -> mock.AsyncMock:
    return mock.AsyncMock(spec=ClientPort, cache=entity_cache)


# --- Adapters ---


@pytest.fixture
async def spotify_client(entity_cache: EntityCache) -> AsyncGenerator[SpotifyClientAdapter]:
    async with SpotifyClientAdapter(
        access_token="dummy-access-token",
        base_url=HttpUrl("https://api.spotify.com/v1"),
        cache=entity_cache,
    ) as client:
        yield client


@pytest.fixture
def spotify_api(mock_client: mock.AsyncMock) -> SpotifyWebAPI:
    return SpotifyWebAPI(mock_client)
