from collections.abc import Sequence

from spotiwire.domain.cache import build_struct_array
from spotiwire.domain.cache import create_cache_struct_array
from spotiwire.domain.entities.music import Artist
from spotiwire.domain.entities.music import SimplifiedAlbum
from spotiwire.domain.entities.music import Track
from spotiwire.domain.types import AlbumGroup
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BatchCatalogManager


class ArtistManager(BatchCatalogManager[Artist, Artist]):
    """Endpoints of the `/artists` catalog."""

    model = Artist
    search_model = Artist
    path = "/artists"
    search_type = SearchType.ARTIST

    async def get_albums(
        self,
        id: str,
        include_groups: Sequence[AlbumGroup] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[SimplifiedAlbum]:
        data = await self.client.fetch(
            f"/artists/{id}/albums",
            params={
                "include_groups": include_groups,
                "limit": limit,
                "offset": offset,
                "market": market,
            },
        )
        if not data:
            return []

        return build_struct_array(SimplifiedAlbum, data.get("items") or [])

    async def get_top_tracks(self, id: str, market: str | None = None) -> list[Track]:
        data = await self.client.fetch(f"/artists/{id}/top-tracks", params={"market": market})
        if not data:
            return []

        return create_cache_struct_array(Track, self.client.cache, data.get("tracks") or [])

    async def get_related_artists(self, id: str) -> list[Artist]:
        data = await self.client.fetch(f"/artists/{id}/related-artists")
        if not data:
            return []

        return self._create_many(data.get("artists") or [])
