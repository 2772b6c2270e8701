from spotiwire.domain.entities.music import Track
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BatchCatalogManager


class TrackManager(BatchCatalogManager[Track, Track]):
    """Endpoints of the `/tracks` catalog."""

    model = Track
    search_model = Track
    path = "/tracks"
    search_type = SearchType.TRACK
