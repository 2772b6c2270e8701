from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from spotiwire import BASE_DIR


class SpotifySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPOTIFY_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Obtained through any OAuth flow, outside of this library.
    ACCESS_TOKEN: str | None = None
    TOKEN_TYPE: str = "Bearer"

    BASE_URL: HttpUrl = Field(default=HttpUrl("https://api.spotify.com/v1"))

    HTTP_TIMEOUT: float = 30.0

    # 1 means no retry at all.
    RETRY_MAX_ATTEMPTS: int = Field(default=1, ge=1)

    CACHE_ENABLED: bool = True


spotify_settings = SpotifySettings()
