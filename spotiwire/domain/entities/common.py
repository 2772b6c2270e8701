from datetime import datetime

from pydantic import Field

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.base import BaseStruct


class Image(BaseStruct):
    url: str | None = None
    height: int | None = None
    width: int | None = None


class Followers(BaseStruct):
    href: str | None = None
    total: int | None = None


class Restriction(BaseStruct):
    reason: str | None = None


class Copyright(BaseStruct):
    text: str | None = None
    type: str | None = None


class ExplicitContentSettings(BaseStruct):
    filter_enabled: bool | None = None
    filter_locked: bool | None = None


class ResumePoint(BaseStruct):
    fully_played: bool | None = None
    resume_position: int | None = Field(default=None, alias="resume_position_ms")


class Saved[T: BaseEntity](BaseStruct):
    """An item of the current user's library along with the date it was saved."""

    added_at: datetime | None = None
    item: T


def largest_image(images: list[Image] | None) -> Image | None:
    if not images:
        return None
    return max(images, key=lambda image: (image.width or 0) * (image.height or 0))
