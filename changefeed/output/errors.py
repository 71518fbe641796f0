"""Error presentation utilities.

Error formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from changefeed.core.config import ConfigError
from changefeed.core.errors import ErrorCode
from changefeed.output.console import Style
from changefeed.services.errors import (
    GenerateError,
    InputNotFound,
    InputUnreadable,
    OutputWriteFailed,
    UsageError,
)

if TYPE_CHECKING:
    from changefeed.output.console import ConsoleProtocol

__all__ = [
    "generate_error_exit_code",
    "print_config_error",
    "print_generate_error",
]


def print_generate_error(error: GenerateError, console: ConsoleProtocol) -> None:
    """Print a pipeline error with its hint, if any."""
    match error:
        case UsageError(message=message, hint=hint):
            console.error(message)
            console.print(hint, Style.DIM)
        case InputNotFound(path=path):
            console.error(f"CHANGELOG file not found: {path}")
        case InputUnreadable(path=path, reason=reason):
            console.error(f"cannot read CHANGELOG file: {path} ({reason})")
        case OutputWriteFailed(path=path, reason=reason):
            console.error(f"cannot write feed: {path} ({reason})")


def generate_error_exit_code(error: GenerateError) -> int:
    match error:
        case UsageError() | InputNotFound():
            return int(ErrorCode.USER_ERROR)
        case InputUnreadable() | OutputWriteFailed():
            return int(ErrorCode.IO_ERROR)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"hint: check {error.path}", Style.DIM)
