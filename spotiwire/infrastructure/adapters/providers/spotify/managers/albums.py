from spotiwire.domain.cache import build_struct_array
from spotiwire.domain.entities.music import Album
from spotiwire.domain.entities.music import SimplifiedAlbum
from spotiwire.domain.entities.music import SimplifiedTrack
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BatchCatalogManager


class AlbumManager(BatchCatalogManager[Album, SimplifiedAlbum]):
    """Endpoints of the `/albums` catalog."""

    model = Album
    search_model = SimplifiedAlbum
    path = "/albums"
    search_type = SearchType.ALBUM

    async def get_tracks(
        self,
        id: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[SimplifiedTrack]:
        """Fetches the tracks of an album.

        Album tracks are simplified, so they carry no `album` and are not cached.
        """
        data = await self.client.fetch(
            f"/albums/{id}/tracks",
            params={"limit": limit, "offset": offset, "market": market},
        )
        if not data:
            return []

        return build_struct_array(SimplifiedTrack, data.get("items") or [])

    async def get_new_releases(
        self,
        limit: int | None = None,
        offset: int | None = None,
        country: str | None = None,
    ) -> list[SimplifiedAlbum]:
        data = await self.client.fetch(
            "/browse/new-releases",
            params={"limit": limit, "offset": offset, "country": country},
        )
        if not data or not data.get("albums"):
            return []

        return build_struct_array(SimplifiedAlbum, data["albums"].get("items") or [])
