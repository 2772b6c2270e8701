from spotiwire.domain.cache import build_struct_array
from spotiwire.domain.entities.podcasts import Show
from spotiwire.domain.entities.podcasts import SimplifiedEpisode
from spotiwire.domain.entities.podcasts import SimplifiedShow
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BatchCatalogManager


class ShowManager(BatchCatalogManager[Show, SimplifiedShow]):
    """Endpoints of the `/shows` catalog."""

    model = Show
    search_model = SimplifiedShow
    path = "/shows"
    search_type = SearchType.SHOW

    async def get_episodes(
        self,
        id: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[SimplifiedEpisode]:
        data = await self.client.fetch(
            f"/shows/{id}/episodes",
            params={"limit": limit, "offset": offset, "market": market},
        )
        if not data:
            return []

        return build_struct_array(SimplifiedEpisode, data.get("items") or [])
