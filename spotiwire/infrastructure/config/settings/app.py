from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from spotiwire import BASE_DIR
from spotiwire.infrastructure.types import LogHandler
from spotiwire.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPOTIWIRE_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    LOG_LEVEL: LogLevel = "INFO"
    LOG_HANDLERS: list[LogHandler] = ["cli"]


app_settings = AppSettings()
