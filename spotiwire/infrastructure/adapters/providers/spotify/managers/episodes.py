from spotiwire.domain.entities.podcasts import Episode
from spotiwire.domain.entities.podcasts import SimplifiedEpisode
from spotiwire.domain.types import SearchType
from spotiwire.infrastructure.adapters.providers.spotify.managers.base import BatchCatalogManager


class EpisodeManager(BatchCatalogManager[Episode, SimplifiedEpisode]):
    model = Episode
    search_model = SimplifiedEpisode
    path = "/episodes"
    search_type = SearchType.EPISODE
