import re
from collections.abc import AsyncGenerator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import AbstractContextManager
from contextlib import asynccontextmanager
from contextlib import contextmanager
from typing import Any
from unittest import mock

import pytest
from typer.testing import CliRunner

from spotiwire.infrastructure.adapters.providers.spotify.api import SpotifyWebAPI
from spotiwire.infrastructure.config.settings.spotify import spotify_settings

type AsyncDependencyPatcherFactory = Callable[[str, Any], AbstractContextManager[Any]]

type TextCleaner = Callable[[str], str]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Force Rich/Typer to use a standard terminal width and no colors
    ONLY for CLI unit tests to ensure consistent output assertions.
    """
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture(autouse=True)
def no_default_access_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(spotify_settings, "ACCESS_TOKEN", None)


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("spotiwire.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def target_path(request: pytest.FixtureRequest) -> str:
    if request.cls and hasattr(request.cls, "TARGET_PATH"):
        return request.cls.TARGET_PATH

    if hasattr(request.module, "TARGET_PATH"):
        return request.module.TARGET_PATH

    raise ValueError("Test class or module must define 'TARGET_PATH' to use auto-patching fixtures.")


# --- Patcher Factories ---


@pytest.fixture
def mock_async_context_dependency_factory() -> AsyncDependencyPatcherFactory:
    """Factory to patch async context manager CLI dependencies (SpotifyWebAPI)."""

    @contextmanager
    def _patcher(target_path: str, dependency_instance: Any) -> Iterator[mock.Mock]:
        @asynccontextmanager
        async def _mock_dependency(*args: Any, **kwargs: Any) -> AsyncGenerator[Any]:
            yield dependency_instance

        with mock.patch(target_path, side_effect=_mock_dependency) as patched:
            yield patched

    return _patcher


# --- Client Mocks ---


@pytest.fixture
def mock_get_spotify_api(
    target_path: str,
    spotify_api: SpotifyWebAPI,
    mock_async_context_dependency_factory: AsyncDependencyPatcherFactory,
) -> Iterable[mock.Mock]:
    with mock_async_context_dependency_factory(f"{target_path}.get_spotify_api", spotify_api) as patched:
        yield patched


# --- Helpers ---


@pytest.fixture
def clean_typer_text() -> TextCleaner:
    """
    There is no easy way to disable all the rich text generated by Rich/Typer,
    which still draws a box around errors. Then, clean up the output without
    coupling our tests to specific terminal emulation settings.
    """

    def _cleaner(text: str) -> str:
        clean_text = re.sub(r"[│╭╰─╮╯]", "", text)
        return " ".join(clean_text.split())

    return _cleaner
