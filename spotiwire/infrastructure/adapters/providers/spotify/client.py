import logging
from collections.abc import Mapping
from typing import Any

import httpx
from httpx import codes

from pydantic import HttpUrl

from tenacity import retry
from tenacity import retry_if_exception
from tenacity import stop_after_attempt
from tenacity import wait_exponential

from spotiwire.domain.cache import EntityCache
from spotiwire.domain.ports.client import ClientPort
from spotiwire.infrastructure.config.settings.spotify import spotify_settings

logger = logging.getLogger(__name__)


def _is_retryable_error(exception: BaseException) -> bool:
    if isinstance(exception, httpx.HTTPStatusError):  # Retry 429 and 5xx only
        return exception.response.status_code == codes.TOO_MANY_REQUESTS or exception.response.status_code >= 500

    return isinstance(exception, httpx.RequestError)


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Drops `None` values and joins sequences with commas, as the Spotify API expects."""
    if params is None:
        return None

    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            value = ",".join(str(v) for v in value)
        cleaned[key] = value

    return cleaned


class SpotifyClientAdapter(ClientPort):
    """An asynchronous Spotify Web API client authenticated with a bearer token.

    The token is obtained outside of this library. Error statuses and network
    failures are raised to the caller, optionally after a few retries for 429,
    5xx and network errors.
    """

    def __init__(
        self,
        access_token: str,
        token_type: str = spotify_settings.TOKEN_TYPE,
        base_url: HttpUrl = spotify_settings.BASE_URL,
        timeout: float = spotify_settings.HTTP_TIMEOUT,
        cache: EntityCache | None = None,
    ) -> None:
        self.access_token = access_token
        self.token_type = token_type
        self._base_url = base_url
        self._cache = cache if cache is not None else EntityCache()

        self._client: httpx.AsyncClient = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return str(self._base_url).rstrip("/")

    @property
    def cache(self) -> EntityCache:
        return self._cache

    async def fetch(
        self,
        path: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        return await self.make_api_call(
            method=method,
            endpoint=path,
            params=clean_params(params),
            json_data=body,
        )

    @retry(
        retry=retry_if_exception(_is_retryable_error),
        wait=wait_exponential(multiplier=1, min=2, max=60),
        stop=stop_after_attempt(spotify_settings.RETRY_MAX_ATTEMPTS),
        reraise=True,
    )
    async def make_api_call(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> Any:
        """Makes an authenticated API call to the Spotify API.

        Retries are disabled unless `SPOTIFY_RETRY_MAX_ATTEMPTS` is greater than 1,
        in which case the last error is re-raised once attempts are exhausted.
        Successful responses without content are returned as an empty dict.
        """
        logger.debug(f"{method.upper()} {endpoint} params={params}")
        try:
            response = await self._client.request(
                method=method.upper(),
                url=f"{self.base_url}{endpoint}",
                headers={
                    "Authorization": f"{self.token_type} {self.access_token}",
                    "Content-Type": "application/json",
                },
                params=params,
                json=json_data,
            )
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.debug(f"{method.upper()} {endpoint} failed with status {e.response.status_code}")
            raise

        if response.status_code == codes.NO_CONTENT or not response.content:
            return {}

        return response.json()

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SpotifyClientAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
