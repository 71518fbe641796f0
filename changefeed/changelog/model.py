from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModuleEntry:
    """One module subsection of a release: heading name/version plus change lines."""

    name: str
    version: str = ""
    content: tuple[str, ...] = ()

    @property
    def title(self) -> str:
        # Single space join; an empty version leaves a trailing space.
        return f"{self.name} {self.version}"


@dataclass(frozen=True, slots=True)
class ReleaseRecord:
    """The latest release section of a changelog."""

    date: str = ""
    version: str = ""
    modules: tuple[ModuleEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.modules


EMPTY_RELEASE = ReleaseRecord()
