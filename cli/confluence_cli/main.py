from __future__ import annotations

import typer

from .commands import call_cmd, content_cmd, search_cmd, settings_cmd, space_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="confluence",
        help="Confluence REST API command line client.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(content_cmd.app, name="content")
    app.add_typer(space_cmd.app, name="space")
    app.add_typer(search_cmd.app, name="search")
    app.command("call")(call_cmd.call)
    app.command("routes")(call_cmd.routes)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
