import logging
from collections.abc import Iterable

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--spotify-access-token",
        action="store",
        default=None,
        help="A valid Spotify access token to run live API tests.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "spotify_live: mark test as requiring live Spotify API access")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    skip_spotify = pytest.mark.skip(reason="need --spotify-access-token option to run")

    for item in items:
        if item.get_closest_marker("spotify_live") and not config.getoption("--spotify-access-token"):
            item.add_marker(skip_spotify)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Iterable[None]:
    """Configure logging for ALL tests before anything else"""
    from spotiwire.infrastructure.config.loggers import configure_loggers

    configure_loggers(level="DEBUG", handlers=["null"], propagate=True)

    yield

    logging.shutdown()
