from typing import Any
from typing import ClassVar

from pydantic import AliasPath
from pydantic import Field
from pydantic import field_validator

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.base import unwrap_page
from spotiwire.domain.entities.common import Copyright
from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.common import Restriction
from spotiwire.domain.entities.common import largest_image
from spotiwire.domain.types import EntityKind

# -------------------------------------------------------------------------
# Artists
# -------------------------------------------------------------------------


class SimplifiedArtist(BaseEntity):
    name: str | None = None


class Artist(SimplifiedArtist):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.ARTISTS

    genres: list[str] | None = None
    images: list[Image] | None = None
    popularity: int | None = None
    total_followers: int | None = Field(default=None, validation_alias=AliasPath("followers", "total"))

    @property
    def largest_image(self) -> Image | None:
        return largest_image(self.images)


# -------------------------------------------------------------------------
# Albums
# -------------------------------------------------------------------------


class SimplifiedAlbum(BaseEntity):
    name: str | None = None
    album_type: str | None = None
    album_group: str | None = None
    total_tracks: int | None = None
    available_markets: list[str] | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    images: list[Image] | None = None
    artists: list[SimplifiedArtist] | None = None
    restrictions: Restriction | None = None

    @property
    def release_year(self) -> int | None:
        if not self.release_date:
            return None
        return int(self.release_date[:4])

    @property
    def largest_image(self) -> Image | None:
        return largest_image(self.images)


# -------------------------------------------------------------------------
# Tracks
# -------------------------------------------------------------------------


class LinkedTrack(BaseEntity):
    """The originally requested track when track relinking applied."""


class SimplifiedTrack(BaseEntity):
    name: str | None = None
    artists: list[SimplifiedArtist] | None = None
    available_markets: list[str] | None = None
    disc_number: int | None = None
    duration: int | None = Field(default=None, alias="duration_ms")
    explicit: bool | None = None
    preview_url: str | None = None
    track_number: int | None = None
    playable: bool | None = Field(default=None, alias="is_playable")
    local: bool = Field(default=False, alias="is_local")
    linked_from: LinkedTrack | None = None
    restrictions: Restriction | None = None

    @field_validator("local", mode="before")
    @classmethod
    def _coerce_local(cls, value: Any) -> bool:
        return bool(value)

    @property
    def duration_seconds(self) -> float | None:
        if self.duration is None:
            return None
        return self.duration / 1000

    @property
    def artist_names(self) -> list[str]:
        return [artist.name for artist in self.artists or [] if artist.name]


class Track(SimplifiedTrack):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.TRACKS

    album: SimplifiedAlbum | None = None
    external_ids: dict[str, str] | None = None
    popularity: int | None = None


class Album(SimplifiedAlbum):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.ALBUMS

    copyrights: list[Copyright] | None = None
    external_ids: dict[str, str] | None = None
    genres: list[str] | None = None
    label: str | None = None
    popularity: int | None = None
    tracks: list[SimplifiedTrack] | None = None

    @field_validator("tracks", mode="before")
    @classmethod
    def _unwrap_tracks_page(cls, value: Any) -> Any:
        return unwrap_page(value)
