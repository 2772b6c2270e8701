from abc import ABC
from abc import abstractmethod
from typing import Any

from spotiwire.domain.cache import EntityCache


class ClientPort(ABC):
    """A port defining the contract of the authenticated Spotify Web API client.

    Managers only talk to the API through `fetch`, so any transport honouring
    this contract can be plugged in.
    """

    @property
    @abstractmethod
    def cache(self) -> EntityCache:
        """The cache shared by every manager working with this client."""
        ...

    @abstractmethod
    async def fetch(
        self,
        path: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Makes an authenticated call to the Spotify Web API.

        Args:
            path: The API endpoint to call (relative to the base URL), e.g. `/me`.
            method: The HTTP method (e.g., "GET", "PUT").
            params: Optional URL query parameters. `None` values are dropped.
            body: Optional JSON body for the request.

        Returns:
            The decoded JSON response, or a falsy value when the call succeeded
            without returning any content.

        Raises:
            httpx.HTTPStatusError: On non-2xx responses.
            httpx.RequestError: On network failures.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Closes the client and cleans up any underlying resources, like HTTP sessions."""
        ...
