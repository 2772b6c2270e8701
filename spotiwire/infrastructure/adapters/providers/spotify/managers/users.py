from spotiwire.domain.cache import create_cache_struct
from spotiwire.domain.cache import create_cache_struct_array
from spotiwire.domain.entities.playlists import Playlist
from spotiwire.domain.entities.users import User
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BaseManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import join_ids
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import membership_flags


class UserManager(BaseManager):
    """Endpoints about any Spotify user, see `UserClient` for the current user."""

    async def get(self, id: str) -> User | None:
        data = await self.client.fetch(f"/users/{id}")
        if not data:
            return None

        return create_cache_struct(User, self.client.cache, data, refresh=True)

    async def get_playlists(
        self,
        user_id: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Playlist]:
        data = await self.client.fetch(
            f"/users/{user_id}/playlists",
            params={"limit": limit, "offset": offset},
        )
        if not data:
            return []

        return create_cache_struct_array(Playlist, self.client.cache, data.get("items") or [])

    async def follows_playlist(self, playlist_id: str, *user_ids: str) -> list[bool]:
        """Checks whether each of the users follows a playlist.

        Returns:
            One flag per user id, in the same order.
        """
        if not user_ids:
            return []

        data = await self.client.fetch(
            f"/playlists/{playlist_id}/followers/contains",
            params={"ids": join_ids(user_ids)},
        )
        return membership_flags(user_ids, data)
