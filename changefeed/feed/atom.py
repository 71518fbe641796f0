"""Atom feed for the latest release.

One ``entry`` per module, all sharing the feed's ``updated`` timestamp.
"""

from __future__ import annotations

from datetime import UTC, datetime

from changefeed.changelog.model import ModuleEntry, ReleaseRecord
from changefeed.core.config import FeedSettings
from changefeed.feed.escape import escape_html
from changefeed.feed.render import render_document
from changefeed.feed.tree import Element, element

__all__ = [
    "ATOM_NAMESPACE",
    "build_feed",
    "entry_content",
    "entry_id",
    "entry_summary",
    "format_timestamp",
    "generate",
]

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(now: datetime) -> str:
    """Format ``now`` as UTC with second precision (naive values are taken as UTC)."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(UTC).strftime(_TIMESTAMP_FORMAT)


def entry_id(release: ReleaseRecord, module: ModuleEntry) -> str:
    return f"urn:release:{release.version}:{module.name}:{module.version}"


def entry_content(module: ModuleEntry) -> str:
    """HTML body of an entry: escaped heading, then the escaped change lines."""
    heading = f"<h3>{escape_html(module.title)}</h3>\n"
    return heading + escape_html("\n".join(module.content))


def entry_summary(release: ReleaseRecord, module: ModuleEntry) -> str:
    return f"{module.title} - Released on {release.date}"


def _entry(
    release: ReleaseRecord,
    module: ModuleEntry,
    *,
    link_url: str,
    updated: str,
    settings: FeedSettings,
) -> Element:
    return element(
        "entry",
        element("title", module.title),
        element("link", attrs={"href": link_url}),
        element("id", entry_id(release, module)),
        element("updated", updated),
        element("author", element("name", settings.author)),
        element("content", entry_content(module), attrs={"type": "html"}),
        element("summary", entry_summary(release, module)),
    )


def build_feed(
    release: ReleaseRecord,
    feed_self_url: str,
    feed_alternate_url: str,
    now: datetime,
    *,
    settings: FeedSettings | None = None,
) -> Element:
    """Build the feed document tree for ``release``.

    URLs are used verbatim.
    """
    settings = settings or FeedSettings()
    updated = format_timestamp(now)

    entries = [
        _entry(release, module, link_url=feed_alternate_url, updated=updated, settings=settings)
        for module in release.modules
    ]

    return element(
        "feed",
        element("title", settings.title),
        element("link", attrs={"href": feed_alternate_url, "rel": "alternate"}),
        element("link", attrs={"href": feed_self_url, "rel": "self"}),
        element("id", feed_self_url),
        element("updated", updated),
        *entries,
        attrs={"xmlns": ATOM_NAMESPACE},
    )


def generate(
    release: ReleaseRecord,
    feed_self_url: str,
    feed_alternate_url: str,
    now: datetime,
    *,
    settings: FeedSettings | None = None,
) -> str:
    """Render the Atom feed for ``release`` as an XML document string."""
    root = build_feed(release, feed_self_url, feed_alternate_url, now, settings=settings)
    return render_document(root, indent=2)
