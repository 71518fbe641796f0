"""Pretty printer for :mod:`changefeed.feed.tree` documents."""

from __future__ import annotations

from changefeed.feed.escape import escape_xml
from changefeed.feed.tree import Element, Node, Text

__all__ = ["XML_DECLARATION", "render_document", "render_element"]

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _open_tag(el: Element, *, self_closing: bool = False) -> str:
    attrs = "".join(f' {key}="{escape_xml(value)}"' for key, value in el.attributes)
    end = "/>" if self_closing else ">"
    return f"<{el.name}{attrs}{end}"


def _render(node: Node, level: int, indent: int, out: list[str]) -> None:
    pad = " " * (level * indent)

    if isinstance(node, Text):
        out.append(pad + escape_xml(node.value))
        return

    if node.is_empty:
        out.append(pad + _open_tag(node, self_closing=True))
        return

    if node.has_only_text:
        # Inline, text kept exactly (newlines and trailing spaces included).
        out.append(f"{pad}{_open_tag(node)}{escape_xml(node.text)}</{node.name}>")
        return

    out.append(pad + _open_tag(node))
    for child in node.children:
        _render(child, level + 1, indent, out)
    out.append(f"{pad}</{node.name}>")


def render_element(root: Element, *, indent: int = 2) -> str:
    """Render ``root`` and its subtree, one element per line."""
    out: list[str] = []
    _render(root, 0, indent, out)
    return "\n".join(out)


def render_document(root: Element, *, indent: int = 2) -> str:
    """Render a full XML document: UTF-8 declaration followed by ``root``.

    No trailing newline is added.
    """
    return XML_DECLARATION + "\n" + render_element(root, indent=indent)
