from spotiwire.domain.ports.client import ClientPort
from spotiwire.infrastructure.adapters.providers.spotify.managers.albums import AlbumManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.artists import ArtistManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.episodes import EpisodeManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.playlists import PlaylistManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.shows import ShowManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.tracks import TrackManager
from spotiwire.infrastructure.adapters.providers.spotify.managers.user import UserClient
from spotiwire.infrastructure.adapters.providers.spotify.managers.users import UserManager


class SpotifyWebAPI:
    """Entry point gathering every manager around a single client.

    Example:
        async with SpotifyWebAPI(SpotifyClientAdapter(access_token=token)) as spotify:
            await spotify.user.patch_info()
            playlists = await spotify.user.get_playlists(limit=10)
    """

    def __init__(self, client: ClientPort) -> None:
        self.client = client

        self.user = UserClient(client)
        self.users = UserManager(client)
        self.tracks = TrackManager(client)
        self.albums = AlbumManager(client)
        self.artists = ArtistManager(client)
        self.playlists = PlaylistManager(client)
        self.shows = ShowManager(client)
        self.episodes = EpisodeManager(client)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "SpotifyWebAPI":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
