"""Typed configuration loading and access.

Dataclasses for the optional changefeed.toml file. Every value has a
default, so a missing file or a missing key falls back to the built-in
feed metadata and changelog heading grammar.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_raw_str, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "FeedSettings",
    "HeadingMarkers",
    "DEFAULT_FEED_TITLE",
    "DEFAULT_FEED_AUTHOR",
    "load_config",
    "load_config_or_default",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_FEED_TITLE = "iOS SDK Release Notes"
DEFAULT_FEED_AUTHOR = "KARTE"

DEFAULT_RELEASE_MARKER = "# Releases"
DEFAULT_RELEASE_SEPARATOR = " - "
DEFAULT_VERSION_MARKER = "## Version "
DEFAULT_MODULE_MARKER = "### "


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class FeedSettings:
    """Fixed feed-level literals."""

    title: str = DEFAULT_FEED_TITLE
    author: str = DEFAULT_FEED_AUTHOR


@dataclass(frozen=True, slots=True)
class HeadingMarkers:
    """Literal line prefixes of the changelog heading grammar.

    Prefixes are matched case-sensitively at column 0. A release line
    starts with ``release + separator``; its date follows the separator.
    """

    release: str = DEFAULT_RELEASE_MARKER
    separator: str = DEFAULT_RELEASE_SEPARATOR
    version: str = DEFAULT_VERSION_MARKER
    module: str = DEFAULT_MODULE_MARKER

    @property
    def release_line(self) -> str:
        return self.release + self.separator


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    feed: FeedSettings = field(default_factory=FeedSettings)
    markers: HeadingMarkers = field(default_factory=HeadingMarkers)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        feed: StrDict = get_table(data, "feed") or {}
        markers: StrDict = get_table(data, "markers") or {}

        return cls(
            feed=FeedSettings(
                title=get_str(feed, "title") or DEFAULT_FEED_TITLE,
                author=get_str(feed, "author") or DEFAULT_FEED_AUTHOR,
            ),
            # Trailing spaces are part of the markers, so no stripping here.
            markers=HeadingMarkers(
                release=get_raw_str(markers, "release") or DEFAULT_RELEASE_MARKER,
                separator=get_raw_str(markers, "separator") or DEFAULT_RELEASE_SEPARATOR,
                version=get_raw_str(markers, "version") or DEFAULT_VERSION_MARKER,
                module=get_raw_str(markers, "module") or DEFAULT_MODULE_MARKER,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to changefeed.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None) -> Result[Config, ConfigError]:
    """Load config from ``path``, or the default config when no path is given.

    An explicitly given path that cannot be loaded is still an error.
    """
    if path is None:
        return Ok(Config())
    return load_config(path)
