from typing import Any
from typing import ClassVar

from pydantic import Field
from pydantic import field_validator

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.base import unwrap_page
from spotiwire.domain.entities.common import Copyright
from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.common import Restriction
from spotiwire.domain.entities.common import ResumePoint
from spotiwire.domain.entities.common import largest_image
from spotiwire.domain.types import EntityKind


class SimplifiedShow(BaseEntity):
    name: str | None = None
    available_markets: list[str] | None = None
    copyrights: list[Copyright] | None = None
    description: str | None = None
    html_description: str | None = None
    explicit: bool | None = None
    externally_hosted: bool | None = Field(default=None, alias="is_externally_hosted")
    images: list[Image] | None = None
    languages: list[str] | None = None
    media_type: str | None = None
    publisher: str | None = None
    total_episodes: int | None = None

    @property
    def largest_image(self) -> Image | None:
        return largest_image(self.images)


class SimplifiedEpisode(BaseEntity):
    name: str | None = None
    audio_preview_url: str | None = None
    description: str | None = None
    html_description: str | None = None
    duration: int | None = Field(default=None, alias="duration_ms")
    explicit: bool | None = None
    externally_hosted: bool | None = Field(default=None, alias="is_externally_hosted")
    playable: bool | None = Field(default=None, alias="is_playable")
    images: list[Image] | None = None
    languages: list[str] | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    resume_point: ResumePoint | None = None
    restrictions: Restriction | None = None

    @property
    def duration_seconds(self) -> float | None:
        if self.duration is None:
            return None
        return self.duration / 1000

    @property
    def largest_image(self) -> Image | None:
        return largest_image(self.images)


class Episode(SimplifiedEpisode):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.EPISODES

    show: SimplifiedShow | None = None


class Show(SimplifiedShow):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.SHOWS

    episodes: list[SimplifiedEpisode] | None = None

    @field_validator("episodes", mode="before")
    @classmethod
    def _unwrap_episodes_page(cls, value: Any) -> Any:
        return unwrap_page(value)
