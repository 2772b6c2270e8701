import typer

from spotiwire import __version__
from spotiwire.infrastructure.config.loggers import configure_loggers
from spotiwire.infrastructure.config.settings.app import app_settings
from spotiwire.infrastructure.entrypoints.cli.commands import me
from spotiwire.infrastructure.entrypoints.cli.commands import search
from spotiwire.infrastructure.entrypoints.cli.commands import top
from spotiwire.infrastructure.types import LogHandler
from spotiwire.infrastructure.types import LogLevel

app = typer.Typer(
    name="spotiwire",
    help="Browse the Spotify Web API from the command line.",
    no_args_is_help=True,
)

app.command("me", help="Display the profile of the current user.")(me.me)
app.command("playlists", help="List the playlists of the current user.")(me.playlists)
app.command("search", help="Search the Spotify catalog.")(search.search)
app.add_typer(top.app, name="top", help="Top items of the current user.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Spotiwire Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: LogLevel = typer.Option(app_settings.LOG_LEVEL, "--log-level", help="The log level"),
    log_handlers: list[LogHandler] = typer.Option(app_settings.LOG_HANDLERS, "--log-handler", help="The log handlers"),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers)


if __name__ == "__main__":  # pragma: no cover
    app()
