"""Changelog to feed orchestration.

Validates the invocation, loads the changelog, parses the latest release
and, when it has modules, serializes the feed. A release without modules
is reported as :class:`NoModules`, a successful outcome with no feed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from changefeed.changelog.model import ReleaseRecord
from changefeed.changelog.parser import parse_latest_release
from changefeed.core.config import Config
from changefeed.core.result import Err, Ok, Result
from changefeed.feed.atom import generate
from changefeed.services.errors import (
    GenerateError,
    InputNotFound,
    InputUnreadable,
    OutputWriteFailed,
    UsageError,
)

__all__ = [
    "FeedGenerated",
    "FeedOutcome",
    "Invocation",
    "NoModules",
    "build_feed_outcome",
    "generate_feed",
    "parse_invocation",
    "parse_timestamp",
    "read_changelog",
    "utc_now",
    "write_feed",
]

_EXPECTED_ARGUMENTS = 3


@dataclass(frozen=True, slots=True)
class Invocation:
    changelog_path: Path
    feed_url: str
    link_url: str


@dataclass(frozen=True, slots=True)
class FeedGenerated:
    release: ReleaseRecord
    xml: str


@dataclass(frozen=True, slots=True)
class NoModules:
    release: ReleaseRecord


type FeedOutcome = FeedGenerated | NoModules


def utc_now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


def parse_invocation(arguments: Sequence[str] | None) -> Result[Invocation, UsageError]:
    """Validate the positional arguments: changelog path, feed URL, link URL."""
    args = list(arguments or ())
    if len(args) != _EXPECTED_ARGUMENTS:
        return Err(
            UsageError(f"expected {_EXPECTED_ARGUMENTS} arguments, got {len(args)}")
        )

    changelog_path, feed_url, link_url = args
    return Ok(Invocation(changelog_path=Path(changelog_path), feed_url=feed_url, link_url=link_url))


def parse_timestamp(text: str) -> Result[datetime, UsageError]:
    """Parse an ISO-8601 timestamp (e.g. ``2025-09-25T10:00:00Z``)."""
    try:
        value = datetime.fromisoformat(text.strip())
    except ValueError:
        return Err(
            UsageError(
                f"invalid --now timestamp: {text!r}",
                hint="Use ISO-8601, e.g. 2025-09-25T10:00:00Z",
            )
        )
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return Ok(value.astimezone(UTC))


def read_changelog(path: Path) -> Result[str, InputNotFound | InputUnreadable]:
    if not path.is_file():
        return Err(InputNotFound(path=path))
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(InputUnreadable(path=path, reason=str(e)))


def build_feed_outcome(
    *,
    document_text: str,
    feed_url: str,
    link_url: str,
    now: datetime,
    config: Config,
) -> FeedOutcome:
    release = parse_latest_release(document_text, config.markers)
    if release.is_empty:
        return NoModules(release=release)

    xml = generate(release, feed_url, link_url, now, settings=config.feed)
    return FeedGenerated(release=release, xml=xml)


def generate_feed(
    invocation: Invocation,
    *,
    now: datetime | None = None,
    config: Config | None = None,
) -> Result[FeedOutcome, GenerateError]:
    """Run the whole pipeline for one changelog.

    Args:
        invocation: Validated arguments.
        now: Generation timestamp; defaults to the current UTC time.
        config: Feed literals and heading grammar; defaults to Config().

    Returns:
        Ok(FeedGenerated | NoModules), or Err when the changelog is
        missing or unreadable.
    """
    text = read_changelog(invocation.changelog_path)
    if isinstance(text, Err):
        return text

    outcome = build_feed_outcome(
        document_text=text.value,
        feed_url=invocation.feed_url,
        link_url=invocation.link_url,
        now=now or utc_now(),
        config=config or Config(),
    )
    return Ok(outcome)


def write_feed(path: Path, xml: str) -> Result[None, OutputWriteFailed]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(xml + "\n", encoding="utf-8")
    except OSError as e:
        return Err(OutputWriteFailed(path=path, reason=str(e)))
    return Ok(None)
