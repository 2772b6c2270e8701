import logging
from collections.abc import Sequence
from typing import Any
from typing import Literal
from typing import Self

from spotiwire.domain.cache import build_struct
from spotiwire.domain.cache import create_cache_saved_struct_array
from spotiwire.domain.cache import create_cache_struct_array
from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.common import ExplicitContentSettings
from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.common import Saved
from spotiwire.domain.entities.music import Album
from spotiwire.domain.entities.music import Artist
from spotiwire.domain.entities.music import Track
from spotiwire.domain.entities.playlists import Playlist
from spotiwire.domain.entities.podcasts import Episode
from spotiwire.domain.entities.podcasts import Show
from spotiwire.domain.entities.users import PrivateUser
from spotiwire.domain.exceptions import SpotifyAPIError
from spotiwire.domain.ports.client import ClientPort
from spotiwire.domain.types import TimeRange
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import join_ids
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import membership_flags
from spotiwire.infrastructure.adapters.providers.spotify.managers.playlists import PlaylistManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.users import UserManager

logger = logging.getLogger(__name__)

FollowType = Literal["artist", "user"]


class UserClient:
    """The current user, i.e. the one who authorized the access token.

    It holds the user's profile, populated by `patch_info`, and every `/me`
    endpoint. All the methods require a user authorized token.
    """

    def __init__(self, client: ClientPort) -> None:
        self.client = client

        self.id: str | None = None
        self.display_name: str | None = None
        self.uri: str | None = None
        self.type: str | None = None
        self.images: list[Image] | None = None
        self.total_followers: int | None = None
        self.external_urls: dict[str, str] | None = None
        self.product: str | None = None
        self.country: str | None = None
        self.email: str | None = None
        self.explicit_content: ExplicitContentSettings | None = None

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    async def patch_info(self) -> Self:
        """Loads the current user's profile into this client.

        Raises:
            SpotifyAPIError: If the API returned no profile for the token.
        """
        data = await self.client.fetch("/me")
        if not data:
            raise SpotifyAPIError("Could not load private user data from the user authorized token.")

        profile = build_struct(PrivateUser, data)

        self.id = profile.id
        self.display_name = profile.display_name
        self.uri = profile.uri
        self.type = profile.type
        self.images = profile.images
        self.total_followers = profile.total_followers
        self.external_urls = profile.external_urls
        self.product = profile.product
        self.country = profile.country
        self.email = profile.email
        self.explicit_content = profile.explicit_content

        logger.debug(f"Profile loaded for user {self.id}")
        return self

    def _require_id(self) -> str:
        if self.id is None:
            raise SpotifyAPIError("The current user profile is not loaded, call `patch_info()` first.")
        return self.id

    # -------------------------------------------------------------------------
    # Playlists
    # -------------------------------------------------------------------------

    async def get_playlists(self, limit: int | None = None, offset: int | None = None) -> list[Playlist]:
        data = await self.client.fetch("/me/playlists", params={"limit": limit, "offset": offset})
        if not data:
            return []

        return create_cache_struct_array(Playlist, self.client.cache, data.get("items") or [])

    async def create_playlist(
        self,
        name: str,
        public: bool | None = None,
        collaborative: bool | None = None,
        description: str | None = None,
    ) -> Playlist | None:
        return await PlaylistManager(self.client).create(
            self._require_id(),
            name=name,
            public=public,
            collaborative=collaborative,
            description=description,
        )

    async def follows_playlist(self, playlist_id: str) -> bool:
        flags = await UserManager(self.client).follows_playlist(playlist_id, self._require_id())
        return flags[0] if flags else False

    async def follow_playlist(self, playlist_id: str, public: bool = True) -> bool:
        data = await self.client.fetch(
            f"/playlists/{playlist_id}/followers",
            method="PUT",
            body={"public": public},
        )
        return data is not None

    async def unfollow_playlist(self, playlist_id: str) -> bool:
        data = await self.client.fetch(f"/playlists/{playlist_id}/followers", method="DELETE")
        return data is not None

    # -------------------------------------------------------------------------
    # Following
    # -------------------------------------------------------------------------

    async def follows_artists(self, *ids: str) -> list[bool]:
        return await self._follows("artist", ids)

    async def follows_users(self, *ids: str) -> list[bool]:
        return await self._follows("user", ids)

    async def follow_artists(self, *ids: str) -> bool:
        return await self._follow("PUT", "artist", ids)

    async def unfollow_artists(self, *ids: str) -> bool:
        return await self._follow("DELETE", "artist", ids)

    async def follow_users(self, *ids: str) -> bool:
        return await self._follow("PUT", "user", ids)

    async def unfollow_users(self, *ids: str) -> bool:
        return await self._follow("DELETE", "user", ids)

    async def get_following_artists(self, limit: int | None = None, after: str | None = None) -> list[Artist]:
        """Fetches the artists followed by the current user.

        Args:
            limit: The maximum number of artists to return.
            after: The last artist id retrieved from the previous request.
        """
        data = await self.client.fetch("/me/following", params={"type": "artist", "limit": limit, "after": after})
        if not data or not data.get("artists"):
            return []

        return create_cache_struct_array(Artist, self.client.cache, data["artists"].get("items") or [])

    async def _follows(self, follow_type: FollowType, ids: Sequence[str]) -> list[bool]:
        if not ids:
            return []

        data = await self.client.fetch("/me/following/contains", params={"type": follow_type, "ids": join_ids(ids)})
        return membership_flags(ids, data)

    async def _follow(self, method: str, follow_type: FollowType, ids: Sequence[str]) -> bool:
        if not ids:
            return False

        data = await self.client.fetch(
            "/me/following",
            method=method,
            params={"type": follow_type, "ids": join_ids(ids)},
        )
        return data is not None

    # -------------------------------------------------------------------------
    # Top items
    # -------------------------------------------------------------------------

    async def get_top_tracks(
        self,
        time_range: TimeRange | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Track]:
        """Fetches the current user's top tracks based on their affinity."""
        data = await self._get_top_items("tracks", time_range, limit, offset)
        return create_cache_struct_array(Track, self.client.cache, data)

    async def get_top_artists(
        self,
        time_range: TimeRange | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Artist]:
        """Fetches the current user's top artists based on their affinity."""
        data = await self._get_top_items("artists", time_range, limit, offset)
        return create_cache_struct_array(Artist, self.client.cache, data)

    async def _get_top_items(
        self,
        item_type: Literal["tracks", "artists"],
        time_range: TimeRange | None,
        limit: int | None,
        offset: int | None,
    ) -> list[dict[str, Any]]:
        data = await self.client.fetch(
            f"/me/top/{item_type}",
            params={"time_range": time_range, "limit": limit, "offset": offset},
        )
        if not data:
            return []

        return data.get("items") or []

    # -------------------------------------------------------------------------
    # Library
    # -------------------------------------------------------------------------

    async def get_saved_albums(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[Saved[Album]]:
        return await self._get_saved(Album, "/me/albums", limit, offset, market)

    async def save_albums(self, *ids: str) -> bool:
        return await self._save("/me/albums", ids)

    async def remove_albums(self, *ids: str) -> bool:
        return await self._remove("/me/albums", ids)

    async def has_albums(self, *ids: str) -> list[bool]:
        return await self._contains("/me/albums/contains", ids)

    async def get_saved_tracks(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[Saved[Track]]:
        return await self._get_saved(Track, "/me/tracks", limit, offset, market)

    async def save_tracks(self, *ids: str) -> bool:
        return await self._save("/me/tracks", ids)

    async def remove_tracks(self, *ids: str) -> bool:
        return await self._remove("/me/tracks", ids)

    async def has_tracks(self, *ids: str) -> list[bool]:
        return await self._contains("/me/tracks/contains", ids)

    async def get_saved_shows(self, limit: int | None = None, offset: int | None = None) -> list[Saved[Show]]:
        return await self._get_saved(Show, "/me/shows", limit, offset)

    async def save_shows(self, *ids: str) -> bool:
        return await self._save("/me/shows", ids)

    async def remove_shows(self, *ids: str) -> bool:
        return await self._remove("/me/shows", ids)

    async def has_shows(self, *ids: str) -> list[bool]:
        return await self._contains("/me/shows/contains", ids)

    async def get_saved_episodes(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[Saved[Episode]]:
        return await self._get_saved(Episode, "/me/episodes", limit, offset, market)

    async def save_episodes(self, *ids: str) -> bool:
        return await self._save("/me/episodes", ids)

    async def remove_episodes(self, *ids: str) -> bool:
        return await self._remove("/me/episodes", ids)

    async def has_episodes(self, *ids: str) -> list[bool]:
        return await self._contains("/me/episodes/contains", ids)

    async def _get_saved[T: BaseEntity](
        self,
        model: type[T],
        endpoint: str,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> list[Saved[T]]:
        data = await self.client.fetch(endpoint, params={"limit": limit, "offset": offset, "market": market})
        if not data:
            return []

        return create_cache_saved_struct_array(model, self.client.cache, data.get("items") or [])

    async def _save(self, endpoint: str, ids: Sequence[str]) -> bool:
        if not ids:
            return False

        data = await self.client.fetch(endpoint, method="PUT", params={"ids": join_ids(ids)})
        return data is not None

    async def _remove(self, endpoint: str, ids: Sequence[str]) -> bool:
        if not ids:
            return False

        data = await self.client.fetch(endpoint, method="DELETE", params={"ids": join_ids(ids)})
        return data is not None

    async def _contains(self, endpoint: str, ids: Sequence[str]) -> list[bool]:
        if not ids:
            return []

        data = await self.client.fetch(endpoint, params={"ids": join_ids(ids)})
        return membership_flags(ids, data)
