import logging
from typing import Any

from spotiwire.domain.cache import build_struct
from spotiwire.domain.cache import create_cache_struct
from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.playlists import Playlist
from spotiwire.domain.entities.playlists import PlaylistTrack
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import CatalogManager

logger = logging.getLogger(__name__)


def _drop_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


class PlaylistManager(CatalogManager[Playlist, Playlist]):
    """Endpoints of the `/playlists` catalog, including the ones altering a playlist."""

    model = Playlist
    search_model = Playlist
    path = "/playlists"
    search_type = SearchType.PLAYLIST

    async def get_tracks(
        self,
        id: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[PlaylistTrack]:
        data = await self.client.fetch(
            f"/playlists/{id}/tracks",
            params={"limit": limit, "offset": offset, "market": market},
        )
        if not data:
            return []

        return [build_struct(PlaylistTrack, item) for item in data.get("items") or [] if item]

    async def get_images(self, id: str) -> list[Image]:
        data = await self.client.fetch(f"/playlists/{id}/images")
        if not data:
            return []

        return [build_struct(Image, item) for item in data]

    async def create(
        self,
        user_id: str,
        name: str,
        public: bool | None = None,
        collaborative: bool | None = None,
        description: str | None = None,
    ) -> Playlist | None:
        """Creates a playlist for a user.

        Args:
            user_id: The Spotify id of the user owning the playlist.
            name: The name of the playlist.
            public: Whether the playlist is displayed on the user's profile.
            collaborative: Whether other users can modify the playlist.
            description: The description of the playlist.

        Returns:
            The playlist created, or `None` if the API returned nothing.
        """
        logger.debug(f"Create playlist {name!r} for user {user_id}")
        data = await self.client.fetch(
            f"/users/{user_id}/playlists",
            method="POST",
            body=_drop_none(
                {
                    "name": name,
                    "public": public,
                    "collaborative": collaborative,
                    "description": description,
                }
            ),
        )
        if not data:
            return None

        return create_cache_struct(Playlist, self.client.cache, data, refresh=True)

    async def edit(
        self,
        id: str,
        name: str | None = None,
        public: bool | None = None,
        collaborative: bool | None = None,
        description: str | None = None,
    ) -> bool:
        data = await self.client.fetch(
            f"/playlists/{id}",
            method="PUT",
            body=_drop_none(
                {
                    "name": name,
                    "public": public,
                    "collaborative": collaborative,
                    "description": description,
                }
            ),
        )
        return data is not None

    async def add_items(self, id: str, *uris: str, position: int | None = None) -> str | None:
        """Adds tracks or episodes to a playlist by URI.

        Returns:
            The new snapshot id of the playlist, or `None` if the API returned nothing.
        """
        data = await self.client.fetch(
            f"/playlists/{id}/tracks",
            method="POST",
            body=_drop_none({"uris": list(uris), "position": position}),
        )
        return data.get("snapshot_id") if data else None

    async def remove_items(self, id: str, *uris: str, snapshot_id: str | None = None) -> str | None:
        data = await self.client.fetch(
            f"/playlists/{id}/tracks",
            method="DELETE",
            body=_drop_none(
                {
                    "tracks": [{"uri": uri} for uri in uris],
                    "snapshot_id": snapshot_id,
                }
            ),
        )
        return data.get("snapshot_id") if data else None
