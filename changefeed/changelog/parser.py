"""Extract the latest release from a changelog document.

The document is scanned once, top to bottom. Only the first release
section is read: the scan stops at the next release heading.

    # Releases - 2025.09.25
    ## Version 3.0
    ### Core 1.2.0
    - Fixed a crash on launch
    ### Variables 1.0.1
    - Added getAllKeys

    # Releases - 2025.08.01      <- scan stops here
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto

from changefeed.changelog.model import EMPTY_RELEASE, ModuleEntry, ReleaseRecord
from changefeed.core.config import HeadingMarkers

__all__ = [
    "DEFAULT_MARKERS",
    "ScanState",
    "parse_latest_release",
    "split_module_heading",
]

DEFAULT_MARKERS = HeadingMarkers()

_HEADING_CHAR = "#"


class ScanState(Enum):
    BEFORE_RELEASE = auto()
    IN_RELEASE = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class _OpenModule:
    name: str
    version: str
    content: tuple[str, ...] = ()

    def freeze(self) -> ModuleEntry:
        return ModuleEntry(name=self.name, version=self.version, content=self.content)


@dataclass(frozen=True, slots=True)
class _Scan:
    state: ScanState = ScanState.BEFORE_RELEASE
    date: str = ""
    version: str = ""
    modules: tuple[ModuleEntry, ...] = ()
    current: _OpenModule | None = None

    def flushed(self) -> _Scan:
        if self.current is None:
            return self
        return replace(self, modules=(*self.modules, self.current.freeze()), current=None)


def split_module_heading(text: str) -> tuple[str, str]:
    """Split a module heading remainder into (name, version).

    The split happens on the first whitespace run; a missing version is "".
    """
    parts = text.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _release_date(line: str, markers: HeadingMarkers) -> str:
    return line[len(markers.release_line) :].strip()


def _is_blank(line: str) -> bool:
    # Only empty lines; whitespace-only lines are content.
    return line == ""


def _step(scan: _Scan, line: str, markers: HeadingMarkers) -> _Scan:
    if line.startswith(markers.release_line):
        if scan.state is ScanState.BEFORE_RELEASE:
            return replace(scan, state=ScanState.IN_RELEASE, date=_release_date(line, markers))
        return replace(scan.flushed(), state=ScanState.DONE)

    if scan.state is not ScanState.IN_RELEASE:
        return scan

    if line.startswith(markers.version):
        # Last one wins.
        return replace(scan, version=line[len(markers.version) :].strip())

    if line.startswith(markers.module):
        name, version = split_module_heading(line[len(markers.module) :])
        return replace(scan.flushed(), current=_OpenModule(name=name, version=version))

    if scan.current is None or _is_blank(line) or line.startswith(_HEADING_CHAR):
        return scan

    current = replace(scan.current, content=(*scan.current.content, line))
    return replace(scan, current=current)


def parse_latest_release(
    document_text: str,
    markers: HeadingMarkers = DEFAULT_MARKERS,
) -> ReleaseRecord:
    """Parse the first release section of ``document_text``.

    Never raises: a document without a release heading yields an empty
    record (empty date, version and modules).

    Args:
        document_text: Full changelog text.
        markers: Heading prefixes of the changelog grammar.

    Returns:
        The release record, modules in heading order.
    """
    scan = _Scan()

    for line in document_text.split("\n"):
        scan = _step(scan, line, markers)
        if scan.state is ScanState.DONE:
            break

    if scan.state is ScanState.BEFORE_RELEASE:
        return EMPTY_RELEASE

    scan = scan.flushed()
    return ReleaseRecord(date=scan.date, version=scan.version, modules=scan.modules)
