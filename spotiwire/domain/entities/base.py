from typing import Any
from typing import ClassVar

from pydantic import BaseModel
from pydantic import ConfigDict

from spotiwire.domain.types import EntityKind


class BaseStruct(BaseModel):
    """Base of every object deserialized from a Spotify API response.

    Fields missing from the payload default to `None` and unknown keys are
    ignored. Structures are immutable once built.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class BaseEntity(BaseStruct):
    """A Spotify object addressable by its id."""

    cache_kind: ClassVar[EntityKind | None] = None

    id: str | None = None
    type: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] | None = None

    @property
    def spotify_url(self) -> str | None:
        if not self.external_urls:
            return None
        return self.external_urls.get("spotify")


def unwrap_page(value: Any) -> Any:
    """Returns the items of a paging object, leaving any other value untouched."""
    if isinstance(value, dict):
        return value.get("items")
    return value
