import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from pydantic import ValidationError

from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.base import BaseStruct
from spotiwire.domain.entities.common import Saved
from spotiwire.domain.exceptions import SpotifyPayloadValidationError
from spotiwire.domain.types import EntityKind

logger = logging.getLogger(__name__)


@dataclass
class EntityCache:
    """In-memory lookup table of structures by kind and id.

    Entries live as long as the cache object itself: there is no eviction.
    Only the kinds listed in `enabled_kinds` are stored.
    """

    enabled_kinds: frozenset[EntityKind] = frozenset(EntityKind)

    _stores: defaultdict[EntityKind, dict[str, BaseEntity]] = field(
        default_factory=lambda: defaultdict(dict),
        init=False,
        repr=False,
    )

    @classmethod
    def disabled(cls) -> "EntityCache":
        return cls(enabled_kinds=frozenset())

    def is_enabled(self, kind: EntityKind | None) -> bool:
        return kind is not None and kind in self.enabled_kinds

    def get(self, kind: EntityKind, entity_id: str) -> BaseEntity | None:
        return self._stores[kind].get(entity_id)

    def set(self, kind: EntityKind, entity: BaseEntity) -> None:
        if entity.id is None:
            return
        self._stores[kind][entity.id] = entity

    def clear(self, kind: EntityKind | None = None) -> None:
        if kind is None:
            self._stores.clear()
        else:
            self._stores.pop(kind, None)

    def __len__(self) -> int:
        return sum(len(store) for store in self._stores.values())


def build_struct[T: BaseStruct](model: type[T], data: dict[str, Any]) -> T:
    """Validates a raw payload into the given structure."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SpotifyPayloadValidationError(f"Invalid {model.__name__} payload: {e}") from e


def build_struct_array[T: BaseStruct](model: type[T], items: Iterable[dict[str, Any] | None]) -> list[T]:
    """Validates a list of raw payloads without caching, skipping `null` entries."""
    return [build_struct(model, item) for item in items if item]


def create_cache_struct[T: BaseEntity](
    model: type[T],
    cache: EntityCache,
    data: dict[str, Any],
    refresh: bool = False,
) -> T:
    """Returns the cached structure with the same id as `data`, or builds and caches a new one.

    Args:
        model: The structure to build. Its `cache_kind` tells where to look it up.
        cache: The cache of the client the structure belongs to.
        data: The raw item returned by the API.
        refresh: Build a new structure and replace the cached one, if any.

    Returns:
        The structure for this id.
    """
    kind = model.cache_kind
    entity_id = data.get("id")

    if kind is None or entity_id is None or not cache.is_enabled(kind):
        return build_struct(model, data)

    if not refresh:
        cached = cache.get(kind, entity_id)
        if isinstance(cached, model):
            return cached

    entity = build_struct(model, data)
    cache.set(kind, entity)
    return entity


def create_cache_struct_array[T: BaseEntity](
    model: type[T],
    cache: EntityCache,
    items: Iterable[dict[str, Any] | None],
) -> list[T]:
    # The API may return `null` entries, e.g. for unknown ids.
    return [create_cache_struct(model, cache, item) for item in items if item]


def create_cache_saved_struct_array[T: BaseEntity](
    model: type[T],
    cache: EntityCache,
    items: Iterable[dict[str, Any] | None],
) -> list[Saved[T]]:
    """Maps saved items, e.g. `{"added_at": ..., "album": {...}}`, to `Saved` structures."""
    if model.cache_kind is None:
        raise ValueError(f"{model.__name__} cannot be saved in a user library.")
    key = model.cache_kind.singular

    saved: list[Saved[T]] = []
    for item in items:
        if not item or not item.get(key):
            continue

        saved.append(
            Saved[model](  # type: ignore[valid-type]
                added_at=item.get("added_at"),
                item=create_cache_struct(model, cache, item[key]),
            )
        )

    return saved
