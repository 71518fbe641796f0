"""Atom feed building and rendering."""

from .atom import ATOM_NAMESPACE, build_feed, format_timestamp, generate
from .escape import escape_html, escape_xml
from .render import render_document
from .tree import Element, Text, element

__all__ = [
    "ATOM_NAMESPACE",
    "Element",
    "Text",
    "build_feed",
    "element",
    "escape_html",
    "escape_xml",
    "format_timestamp",
    "generate",
    "render_document",
]
