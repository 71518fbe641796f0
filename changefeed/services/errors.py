from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

USAGE = "changefeed <changelog_path> <feed_url> <link_url>"


@dataclass(frozen=True, slots=True)
class UsageError:
    message: str
    hint: str = f"Usage: {USAGE}"


@dataclass(frozen=True, slots=True)
class InputNotFound:
    path: Path


@dataclass(frozen=True, slots=True)
class InputUnreadable:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class OutputWriteFailed:
    path: Path
    reason: str


GenerateError = UsageError | InputNotFound | InputUnreadable | OutputWriteFailed
