"""Markup escaping.

``&`` is always replaced first so the entities introduced by later
substitutions are not escaped again. An ``&`` that already starts one of
the five predefined XML entities, or a numeric reference to a character
XML allows, is kept as is, so text that went through :func:`escape_html`
passes through :func:`escape_xml` unchanged. Any other ``&`` is escaped,
including ``&nbsp;``/``&copy;`` (undeclared in XML) and ``&#0;``.
"""

from __future__ import annotations

import re

__all__ = ["escape_html", "escape_xml"]

_AMPERSAND = re.compile(
    r"&(?:(?P<name>amp|lt|gt|quot|apos)|#(?P<dec>[0-9]+)|#x(?P<hex>[0-9a-fA-F]+));|&"
)

_SUBSTITUTIONS = (
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def _is_xml_char(code: int) -> bool:
    return (
        code in (0x9, 0xA, 0xD)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def _escape_ampersand(match: re.Match[str]) -> str:
    if match.group("name"):
        return match.group(0)
    digits = match.group("dec") or match.group("hex")
    if digits and _is_xml_char(int(digits, 10 if match.group("dec") else 16)):
        return match.group(0)
    return "&amp;" + match.group(0)[1:]


def _escape(text: str) -> str:
    out = _AMPERSAND.sub(_escape_ampersand, text)
    for raw, entity in _SUBSTITUTIONS:
        out = out.replace(raw, entity)
    return out


def escape_html(text: str) -> str:
    """Escape text for embedding in HTML.

    >>> escape_html("&<>\\"'")
    '&amp;&lt;&gt;&quot;&apos;'
    """
    return _escape(text)


def escape_xml(text: str) -> str:
    """Escape a text node or attribute value for XML output."""
    return _escape(text)
