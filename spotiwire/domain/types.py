from enum import StrEnum
from typing import Literal

TimeRange = Literal["short_term", "medium_term", "long_term"]

AlbumGroup = Literal["album", "single", "appears_on", "compilation"]

UserProductType = Literal["premium", "free", "open"]


class EntityKind(StrEnum):
    """Kinds of Spotify objects which can be cached by id."""

    USERS = "users"
    ARTISTS = "artists"
    ALBUMS = "albums"
    TRACKS = "tracks"
    PLAYLISTS = "playlists"
    SHOWS = "shows"
    EPISODES = "episodes"

    @property
    def singular(self) -> str:
        """The object type tag used by Spotify, e.g. `track` for `tracks`."""
        return self.value[:-1]


class SearchType(StrEnum):
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"

    @property
    def result_key(self) -> str:
        return f"{self.value}s"
