"""Tests for changefeed.changelog.parser module."""

from __future__ import annotations

from changefeed.changelog.model import EMPTY_RELEASE, ModuleEntry, ReleaseRecord
from changefeed.changelog.parser import parse_latest_release, split_module_heading
from changefeed.core.config import HeadingMarkers

CHANGELOG = """\
# Changelog

All notable changes are documented here.

# Releases - 2025.09.25

## Version 3.0

Highlights of this release.

### Core 1.2.0
- Fixed a crash on launch
  - only on iOS 15

### Variables 1.0.1
- Added getAllKeys
#### Internal
- Refactored storage

# Releases - 2025.08.01

## Version 2.9

### Core 1.1.0
- Old change
"""


class TestParseLatestRelease:
    def test_release_metadata(self) -> None:
        release = parse_latest_release(CHANGELOG)
        assert release.date == "2025.09.25"
        assert release.version == "3.0"

    def test_only_first_release_is_read(self) -> None:
        release = parse_latest_release(CHANGELOG)
        assert [m.name for m in release.modules] == ["Core", "Variables"]
        assert all(m.version != "1.1.0" for m in release.modules)
        assert all("- Old change" not in m.content for m in release.modules)

    def test_module_content(self) -> None:
        release = parse_latest_release(CHANGELOG)
        core, variables = release.modules
        assert core == ModuleEntry(
            name="Core",
            version="1.2.0",
            content=("- Fixed a crash on launch", "  - only on iOS 15"),
        )
        # Deeper headings are skipped, their lines still belong to the module.
        assert variables.content == ("- Added getAllKeys", "- Refactored storage")

    def test_text_before_first_module_is_dropped(self) -> None:
        release = parse_latest_release(CHANGELOG)
        assert all("Highlights of this release." not in m.content for m in release.modules)

    def test_single_module(self) -> None:
        text = "# Releases - 2025.09.25\n## Version 3.0\n### Core 1.2.0\n- Fix\n"
        assert parse_latest_release(text) == ReleaseRecord(
            date="2025.09.25",
            version="3.0",
            modules=(ModuleEntry(name="Core", version="1.2.0", content=("- Fix",)),),
        )

    def test_module_order_follows_headings(self) -> None:
        text = "# Releases - d\n### Zeta 2\n### Alpha 1\n### Mid 9\n"
        release = parse_latest_release(text)
        assert [m.name for m in release.modules] == ["Zeta", "Alpha", "Mid"]

    def test_last_module_flushed_once(self) -> None:
        text = "# Releases - d\n### A 1\n- a\n# Releases - e\n### B 1\n"
        release = parse_latest_release(text)
        assert release.modules == (ModuleEntry(name="A", version="1", content=("- a",)),)


class TestEmptyResults:
    def test_no_release_marker(self) -> None:
        text = "# Changelog\n## Version 3.0\n### Core 1.2.0\n- Fix\n"
        assert parse_latest_release(text) == EMPTY_RELEASE

    def test_empty_document(self) -> None:
        release = parse_latest_release("")
        assert release == ReleaseRecord(date="", version="", modules=())
        assert release.is_empty

    def test_release_without_modules(self) -> None:
        text = "# Releases - 2025.09.25\n## Version 3.0\n- loose line\n"
        release = parse_latest_release(text)
        assert release.date == "2025.09.25"
        assert release.version == "3.0"
        assert release.modules == ()
        assert release.is_empty

    def test_empty_date(self) -> None:
        release = parse_latest_release("# Releases - \n### Core 1\n")
        assert release.date == ""
        assert len(release.modules) == 1


class TestLineRules:
    def test_date_is_everything_after_separator(self) -> None:
        release = parse_latest_release("# Releases -   2025.09.25 - hotfix  \n")
        assert release.date == "2025.09.25 - hotfix"

    def test_version_last_wins(self) -> None:
        text = "# Releases - d\n## Version 1.0\n## Version 2.0 \n### Core 1\n"
        assert parse_latest_release(text).version == "2.0"

    def test_empty_lines_skipped(self) -> None:
        text = "# Releases - d\n### Core 1\n\n- a\n\n\n- b\n"
        assert parse_latest_release(text).modules[0].content == ("- a", "- b")

    def test_whitespace_only_lines_kept_verbatim(self) -> None:
        text = "# Releases - d\n### Core 1\n- a\n   \n\t\n- b\n"
        assert parse_latest_release(text).modules[0].content == ("- a", "   ", "\t", "- b")

    def test_content_is_not_trimmed(self) -> None:
        text = "# Releases - d\n### Core 1\n    indented   \n"
        assert parse_latest_release(text).modules[0].content == ("    indented   ",)

    def test_module_without_version(self) -> None:
        module = parse_latest_release("# Releases - d\n### Core\n").modules[0]
        assert module.name == "Core"
        assert module.version == ""
        assert module.title == "Core "

    def test_module_without_name(self) -> None:
        module = parse_latest_release("# Releases - d\n### \n- a\n").modules[0]
        assert module.name == ""
        assert module.version == ""
        assert module.content == ("- a",)

    def test_markers_are_case_sensitive(self) -> None:
        text = "# releases - d\n### Core 1\n"
        assert parse_latest_release(text) == EMPTY_RELEASE

    def test_markers_need_column_zero(self) -> None:
        text = "  # Releases - d\n### Core 1\n"
        assert parse_latest_release(text) == EMPTY_RELEASE

    def test_other_headings_ignored(self) -> None:
        text = "# Releases - d\n### Core 1\n## Notes\n# Other\n- a\n"
        release = parse_latest_release(text)
        assert release.version == ""
        assert release.modules[0].content == ("- a",)

    def test_custom_markers(self) -> None:
        markers = HeadingMarkers(release="# Release", separator=": ", version="Version: ", module="## ")
        text = "# Release: 2025-01-01\nVersion: 5\n## App 1.0\n- x\n# Release: 2024-12-01\n## Old 0.9\n"
        release = parse_latest_release(text, markers)
        assert release == ReleaseRecord(
            date="2025-01-01",
            version="5",
            modules=(ModuleEntry(name="App", version="1.0", content=("- x",)),),
        )


class TestSplitModuleHeading:
    def test_name_and_version(self) -> None:
        assert split_module_heading("Core 1.2.0") == ("Core", "1.2.0")

    def test_first_whitespace_run(self) -> None:
        assert split_module_heading("  Core   1.2.0  beta ") == ("Core", "1.2.0  beta")

    def test_name_only(self) -> None:
        assert split_module_heading("Core") == ("Core", "")

    def test_empty(self) -> None:
        assert split_module_heading("   ") == ("", "")
