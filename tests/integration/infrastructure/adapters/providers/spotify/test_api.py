import httpx
from httpx import codes

import pytest
from pytest_httpx import HTTPXMock

from spotiwire.domain.entities.music import Track
from spotiwire.domain.entities.podcasts import Episode
from spotiwire.domain.exceptions import SpotifyAPIError
from spotiwire.infrastructure.adapters.providers.spotify.api import SpotifyWebAPI

from tests import load_spotify_response

BASE_URL = "https://api.spotify.com/v1"


class TestSpotifyWebAPI:
    """
    These integration tests go through the real HTTP client, only the Spotify
    servers are mocked.
    """

    @pytest.fixture
    def mock_me(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/me",
            method="GET",
            match_headers={"Authorization": "Bearer dummy-access-token"},
            json=load_spotify_response("me"),
        )

    @pytest.mark.usefixtures("mock_me")
    async def test__user__patch_info(self, spotify_api: SpotifyWebAPI) -> None:
        user = await spotify_api.user.patch_info()

        assert user is spotify_api.user
        assert user.id == "janedoe"
        assert user.total_followers == 42

    async def test__user__patch_info__unauthorized(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/me",
            status_code=codes.UNAUTHORIZED,
            json={"error": {"status": 401, "message": "The access token expired"}},
        )

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await spotify_api.user.patch_info()

        assert exc_info.value.response.status_code == codes.UNAUTHORIZED
        assert spotify_api.user.id is None

    async def test__user__patch_info__no_content(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{BASE_URL}/me", status_code=codes.NO_CONTENT)

        with pytest.raises(SpotifyAPIError):
            await spotify_api.user.patch_info()

    async def test__user__get_playlists(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/me/playlists", params={"limit": "2"}),
            method="GET",
            json=load_spotify_response("my_playlists"),
        )

        playlists = await spotify_api.user.get_playlists(limit=2)

        assert [playlist.name for playlist in playlists] == ["Coding Mode", "Road trip"]
        assert [playlist.total_tracks for playlist in playlists] == [150, 12]

    async def test__playlist__get__replaces_simplified(
        self,
        spotify_api: SpotifyWebAPI,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=f"{BASE_URL}/me/playlists", json=load_spotify_response("my_playlists"))
        httpx_mock.add_response(
            url=f"{BASE_URL}/playlists/37i9dQZF1DX5trt9i14X7j",
            json=load_spotify_response("playlist"),
        )

        [simplified, _] = await spotify_api.user.get_playlists()
        assert simplified.tracks is None

        playlist = await spotify_api.playlists.get("37i9dQZF1DX5trt9i14X7j")

        assert playlist is not None
        assert playlist is not simplified
        assert playlist.tracks is not None
        assert isinstance(playlist.tracks[0].track, Track)
        assert isinstance(playlist.tracks[1].track, Episode)

    @pytest.mark.usefixtures("mock_me")
    async def test__user__create_playlist(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/users/janedoe/playlists",
            method="POST",
            match_json={"name": "Coding Mode", "public": False},
            status_code=codes.CREATED,
            json=load_spotify_response("playlist"),
        )

        await spotify_api.user.patch_info()
        playlist = await spotify_api.user.create_playlist("Coding Mode", public=False)

        assert playlist is not None
        assert playlist.id == "37i9dQZF1DX5trt9i14X7j"

    async def test__tracks__search(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/search", params={"q": "daft punk", "type": "track", "limit": "3"}),
            method="GET",
            json=load_spotify_response("search_tracks"),
        )

        tracks = await spotify_api.tracks.search("daft punk", limit=3)

        assert [track.name for track in tracks] == ["One More Time", "Get Lucky"]

    async def test__tracks__get_several(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/tracks", params={"ids": "0DiWol3AO6WpXZgp0goxAV,unknown"}),
            method="GET",
            json={"tracks": [load_spotify_response("track"), None]},
        )

        [track] = await spotify_api.tracks.get_several("0DiWol3AO6WpXZgp0goxAV", "unknown")

        assert track.album is not None
        assert track.album.release_year == 2001

    async def test__albums__get__not_found(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{BASE_URL}/albums/unknown",
            status_code=codes.NOT_FOUND,
            json={"error": {"status": 404, "message": "Non existing id"}},
        )

        with pytest.raises(httpx.HTTPStatusError):
            await spotify_api.albums.get("unknown")

    async def test__user__library(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        ids = "2noRn2Aes5aoNVsU6iWThc,4m2880jivSbbyEGAKfITCa"
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/me/albums", params={"ids": ids}),
            method="PUT",
            status_code=codes.OK,
        )
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/me/albums/contains", params={"ids": ids}),
            method="GET",
            json=[True, True],
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/me/albums",
            method="GET",
            json=load_spotify_response("saved_albums"),
        )
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/me/albums", params={"ids": ids}),
            method="DELETE",
            status_code=codes.OK,
        )

        assert await spotify_api.user.save_albums("2noRn2Aes5aoNVsU6iWThc", "4m2880jivSbbyEGAKfITCa") is True
        assert await spotify_api.user.has_albums("2noRn2Aes5aoNVsU6iWThc", "4m2880jivSbbyEGAKfITCa") == [True, True]

        saved = await spotify_api.user.get_saved_albums()
        assert [s.item.name for s in saved] == ["Discovery", "Random Access Memories"]

        assert await spotify_api.user.remove_albums("2noRn2Aes5aoNVsU6iWThc", "4m2880jivSbbyEGAKfITCa") is True

    async def test__user__follow_artists(self, spotify_api: SpotifyWebAPI, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=httpx.URL(f"{BASE_URL}/me/following", params={"type": "artist", "ids": "4tZwfgrHOc3mvqYlEYSvVi"}),
            method="PUT",
            status_code=codes.NO_CONTENT,
        )

        assert await spotify_api.user.follow_artists("4tZwfgrHOc3mvqYlEYSvVi") is True
