from spotiwire.domain.entities.base import BaseEntity
from spotiwire.domain.entities.music import SimplifiedAlbum
from spotiwire.domain.entities.music import SimplifiedTrack
from spotiwire.domain.entities.playlists import SimplifiedPlaylist
from spotiwire.domain.entities.podcasts import SimplifiedEpisode
from spotiwire.domain.entities.podcasts import SimplifiedShow


def format_entity(entity: BaseEntity) -> str:
    """One line summary of a structure, as displayed by the CLI."""
    name = getattr(entity, "name", None) or entity.id or "?"

    match entity:
        case SimplifiedTrack():
            details = ", ".join(entity.artist_names)
        case SimplifiedAlbum():
            details = ", ".join(artist.name for artist in entity.artists or [] if artist.name)
        case SimplifiedPlaylist():
            details = entity.owner.display_name if entity.owner else None
        case SimplifiedShow():
            details = entity.publisher
        case SimplifiedEpisode():
            details = entity.release_date
        case _:
            details = None

    return f"{name} - {details} [{entity.id}]" if details else f"{name} [{entity.id}]"
