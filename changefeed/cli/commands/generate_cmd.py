"""Generate command - render the latest changelog release as an Atom feed."""

from __future__ import annotations

from pathlib import Path

import typer

from changefeed import __version__
from changefeed.changelog.model import ReleaseRecord
from changefeed.cli.commands._helpers import exit_on_error
from changefeed.cli.context import CLIContext, build_context
from changefeed.services.generate import (
    FeedGenerated,
    NoModules,
    generate_feed,
    parse_invocation,
    parse_timestamp,
    utc_now,
    write_feed,
)


def _describe(release: ReleaseRecord) -> str:
    version = release.version or "?"
    date = release.date or "?"
    return f"release {version} ({date}): {len(release.modules)} module(s)"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def run_generate(
    ctx: CLIContext,
    *,
    arguments: list[str] | None,
    output: Path | None,
    now_text: str | None,
) -> None:
    invocation = exit_on_error(parse_invocation(arguments), ctx)
    now = exit_on_error(parse_timestamp(now_text), ctx) if now_text else utc_now()

    outcome = exit_on_error(generate_feed(invocation, now=now, config=ctx.config), ctx)

    if ctx.verbose:
        ctx.console.info(_describe(outcome.release))

    match outcome:
        case NoModules():
            ctx.console.warning("No modules found in the latest release")
        case FeedGenerated(xml=xml):
            if output is None:
                typer.echo(xml)
            else:
                exit_on_error(write_feed(output, xml), ctx)
                if ctx.verbose:
                    ctx.console.info(f"wrote {output}")


def generate(
    arguments: list[str] | None = typer.Argument(
        None,
        metavar="CHANGELOG FEED_URL LINK_URL",
        help="Changelog path, feed self URL and feed alternate (site) URL.",
        show_default=False,
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="TOML file overriding feed title/author and heading markers"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to a file instead of stdout"
    ),
    now: str | None = typer.Option(
        None, "--now", help="Generation timestamp (ISO-8601, default: current UTC time)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Describe the parsed release"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        is_eager=True,
        callback=_version_callback,
    ),
) -> None:
    """Print an Atom feed for the latest release in CHANGELOG."""
    ctx = build_context(config_path=config_path, verbose=verbose)
    run_generate(ctx, arguments=arguments, output=output, now_text=now)
