"""Changelog parsing."""

from .model import EMPTY_RELEASE, ModuleEntry, ReleaseRecord
from .parser import DEFAULT_MARKERS, parse_latest_release, split_module_heading

__all__ = [
    "DEFAULT_MARKERS",
    "EMPTY_RELEASE",
    "ModuleEntry",
    "ReleaseRecord",
    "parse_latest_release",
    "split_module_heading",
]
