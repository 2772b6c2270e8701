class SpotifyAPIError(Exception):
    """Raised when an operation logically requires data the Spotify API did not return."""

    pass


class SpotifyPayloadValidationError(SpotifyAPIError):
    pass
