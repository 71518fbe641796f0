from __future__ import annotations

import typer

from changefeed.cli.commands.generate_cmd import generate


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)

app.command()(generate)


def main() -> None:
    app()
