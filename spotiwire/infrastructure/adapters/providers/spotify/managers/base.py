import logging
from collections.abc import Iterable
from collections.abc import Sequence
from typing import Any
from typing import ClassVar

from spotiwire.domain.cache import create_cache_struct
from spotiwire.domain.cache import create_cache_struct_array
from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.ports.client import ClientPort
from spotiwire.domain.types import SearchType

logger = logging.getLogger(__name__)


def membership_flags(ids: Sequence[str], data: Any) -> list[bool]:
    """Maps a `contains` response to one flag per requested id, all `False` without data."""
    flags = list(data) if data else []
    return [bool(flags[i]) if i < len(flags) else False for i in range(len(ids))]


def join_ids(ids: Iterable[str]) -> str:
    return ",".join(ids)


class BaseManager:
    """Groups the endpoints of one resource family around an explicit client."""

    def __init__(self, client: ClientPort) -> None:
        self.client = client


class CatalogManager[T: BaseEntity, S: BaseEntity](BaseManager):
    """Manager of a catalog resource which can be searched and fetched by id.

    Search results are built as `search_model`. For the kinds the search
    endpoint does not return in full, it is the simplified structure, never cached.
    """

    model: ClassVar[type[BaseEntity]]
    search_model: ClassVar[type[BaseEntity]]
    path: ClassVar[str]
    search_type: ClassVar[SearchType]

    async def search(
        self,
        query: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
        include_external: str | None = None,
    ) -> list[S]:
        """Searches the catalog for items matching a query.

        Args:
            query: The search query, field filters like `artist:` included.
            limit: The maximum number of items to return.
            offset: The index of the first item to return.
            market: An ISO 3166-1 alpha-2 country code.
            include_external: Set to `audio` to include externally hosted audio content.

        Returns:
            A list of matching structures, empty when nothing was found.
        """
        logger.debug(f"Search {self.search_type} with query: {query}")
        data = await self.client.fetch(
            "/search",
            params={
                "q": query,
                "type": self.search_type.value,
                "limit": limit,
                "offset": offset,
                "market": market,
                "include_external": include_external,
            },
        )
        if not data or not data.get(self.search_type.result_key):
            return []

        items = data[self.search_type.result_key].get("items") or []
        return create_cache_struct_array(self.search_model, self.client.cache, items)  # type: ignore[return-value]

    async def get(self, id: str, market: str | None = None) -> T | None:
        """Fetches a single item by id and refreshes its cache entry."""
        data = await self.client.fetch(f"{self.path}/{id}", params={"market": market})
        if not data:
            return None

        return create_cache_struct(self.model, self.client.cache, data, refresh=True)  # type: ignore[return-value]

    def _create_many(self, items: Iterable[dict[str, Any] | None]) -> list[T]:
        return create_cache_struct_array(self.model, self.client.cache, items)  # type: ignore[return-value]


class BatchCatalogManager[T: BaseEntity, S: BaseEntity](CatalogManager[T, S]):
    """Catalog manager which can also fetch several items at once."""

    async def get_several(self, *ids: str, market: str | None = None) -> list[T]:
        if not ids:
            return []

        data = await self.client.fetch(self.path, params={"ids": join_ids(ids), "market": market})
        if not data:
            return []

        # The collection key matches the path, e.g. `{"tracks": [...]}` for `/tracks`.
        return self._create_many(data.get(self.path.lstrip("/")) or [])
