from datetime import datetime
from typing import Annotated
from typing import Any
from typing import ClassVar

from pydantic import AliasPath
from pydantic import Discriminator
from pydantic import Field
from pydantic import Tag
from pydantic import field_validator

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.base import BaseStruct
from spotiwire.domain.entities.base import unwrap_page
from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.common import largest_image
from spotiwire.domain.entities.music import Track
from spotiwire.domain.entities.podcasts import Episode
from spotiwire.domain.types import EntityKind


def _playable_item_type(value: Any) -> str:
    item_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return "episode" if item_type == "episode" else "track"


PlayableItem = Annotated[
    Annotated[Track, Tag("track")] | Annotated[Episode, Tag("episode")],
    Discriminator(_playable_item_type),
]


class PlaylistOwner(BaseEntity):
    display_name: str | None = None


class PlaylistTrack(BaseStruct):
    """An entry of a playlist: a track or an episode, and who added it and when."""

    added_at: datetime | None = None
    added_by: PlaylistOwner | None = None
    local: bool = Field(default=False, alias="is_local")
    track: PlayableItem | None = None

    @field_validator("local", mode="before")
    @classmethod
    def _coerce_local(cls, value: Any) -> bool:
        return bool(value)


class SimplifiedPlaylist(BaseEntity):
    name: str | None = None
    collaborative: bool | None = None
    description: str | None = None
    images: list[Image] | None = None
    owner: PlaylistOwner | None = None
    primary_color: str | None = None
    public: bool | None = None
    snapshot_id: str | None = None
    total_tracks: int | None = Field(default=None, validation_alias=AliasPath("tracks", "total"))

    @property
    def largest_image(self) -> Image | None:
        return largest_image(self.images)


class Playlist(SimplifiedPlaylist):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.PLAYLISTS

    total_followers: int | None = Field(default=None, validation_alias=AliasPath("followers", "total"))
    tracks: list[PlaylistTrack] | None = None

    @field_validator("tracks", mode="before")
    @classmethod
    def _unwrap_tracks_page(cls, value: Any) -> Any:
        return unwrap_page(value)
