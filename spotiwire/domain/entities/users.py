from typing import ClassVar

from pydantic import AliasPath
from pydantic import Field

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.common import ExplicitContentSettings
from spotiwire.domain.entities.common import Image
from spotiwire.domain.types import EntityKind
from spotiwire.domain.types import UserProductType


class User(BaseEntity):
    cache_kind: ClassVar[EntityKind | None] = EntityKind.USERS

    display_name: str | None = None
    images: list[Image] | None = None
    total_followers: int | None = Field(default=None, validation_alias=AliasPath("followers", "total"))


class PrivateUser(User):
    """The profile of the user owning the access token."""

    country: str | None = None
    email: str | None = None
    product: UserProductType | str | None = None
    explicit_content: ExplicitContentSettings | None = None
