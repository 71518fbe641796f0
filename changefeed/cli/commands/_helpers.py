"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from changefeed.core.result import Err, Result
from changefeed.output.errors import generate_error_exit_code, print_generate_error
from changefeed.services.errors import GenerateError

if TYPE_CHECKING:
    from changefeed.cli.context import CLIContext


def exit_on_error[T](result: Result[T, GenerateError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit with its code.

    Replaces the common pattern:
        match result:
            case Err(e):
                print_generate_error(e, ctx.console)
                raise typer.Exit(code=generate_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_generate_error(result.error, ctx.console)
        raise typer.Exit(code=generate_error_exit_code(result.error))
    return result.value
