from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from changefeed.core.config import Config, load_config_or_default
from changefeed.core.errors import ErrorCode
from changefeed.core.result import Err
from changefeed.output.console import ConsoleProtocol, RichConsole
from changefeed.output.errors import print_config_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    verbose: bool = False


def build_context(*, config_path: Path | None = None, verbose: bool = False) -> CLIContext:
    console = RichConsole()

    config_result = load_config_or_default(config_path)
    if isinstance(config_result, Err):
        print_config_error(config_result.error, console)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(config=config_result.value, console=console, verbose=verbose)
