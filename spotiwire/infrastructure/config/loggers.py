import logging.config
from copy import deepcopy
from typing import Any
from typing import Final

from spotiwire.infrastructure.types import LogHandler
from spotiwire.infrastructure.types import LogLevel

LOGGER_SPOTIWIRE: Final[str] = "spotiwire"

# Loggers of the HTTP transport, quiet unless asked otherwise.
HTTP_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")

FORMATTERS: Final[dict[str, dict[str, str]]] = {
    "default": {
        "format": "[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "message": {
        "format": "%(message)s",
    },
    "rich": {
        # RichHandler renders the level and time itself.
        "format": "%(message)s",
        "datefmt": "[%X]",
    },
}

HANDLERS: Final[dict[LogHandler, dict[str, Any]]] = {
    "console": {
        "class": "logging.StreamHandler",
        "level": "DEBUG",
        "formatter": "default",
        "stream": "ext://sys.stderr",
    },
    "cli": {
        "class": "logging.StreamHandler",
        "level": "DEBUG",
        "formatter": "message",
        "stream": "ext://sys.stderr",
    },
    "cli_alert": {
        "class": "logging.StreamHandler",
        "level": "WARNING",
        "formatter": "default",
        "stream": "ext://sys.stderr",
    },
    "rich": {
        "class": "rich.logging.RichHandler",
        "formatter": "rich",
        "level": "NOTSET",
        "markup": False,
        "rich_tracebacks": True,
        "show_path": True,
    },
    "null": {
        "class": "logging.NullHandler",
    },
}


def build_logging_conf(
    level: LogLevel,
    handlers: list[LogHandler],
    propagate: bool = False,
    http_level: LogLevel = "WARNING",
) -> dict[str, Any]:
    """Builds a `dictConfig` schema for the library and its HTTP transport.

    Only the handlers in use are declared, so that an optional one (e.g.
    `rich`) is never instantiated for nothing.
    """
    names = list(dict.fromkeys(handlers))

    loggers: dict[str, dict[str, Any]] = {
        LOGGER_SPOTIWIRE: {"level": level, "handlers": names, "propagate": propagate},
    }
    for name in HTTP_LOGGERS:
        loggers[name] = {"level": http_level, "handlers": names, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": deepcopy(FORMATTERS),
        "handlers": {name: deepcopy(HANDLERS[name]) for name in names},
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": names},
    }


def configure_loggers(
    level: LogLevel,
    handlers: list[LogHandler],
    propagate: bool = False,
    http_level: LogLevel = "WARNING",
) -> None:
    """Configures the library's loggers based on the provided level and handlers.

    Args:
        level: The minimum level of the `spotiwire` logger (e.g., "INFO", "DEBUG").
        handlers: A list of handler names (e.g., ["cli"], ["rich"]) shared by every logger.
        propagate: Whether `spotiwire` messages should be propagated to the root logger.
        http_level: The minimum level of the `httpx` and `httpcore` loggers.
    """
    logging.config.dictConfig(build_logging_conf(level, handlers, propagate=propagate, http_level=http_level))
