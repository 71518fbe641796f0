"""In-memory document tree.

Plain value nodes describing what a document contains; rendering to text
lives in :mod:`changefeed.feed.render`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["Element", "Node", "Text", "element"]


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Element:
    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.children

    @property
    def has_only_text(self) -> bool:
        return bool(self.children) and all(isinstance(c, Text) for c in self.children)

    # Read-only queries over a built tree, used to inspect feeds in tests.

    def find_all(self, name: str) -> list[Element]:
        """Direct child elements called ``name``, in order."""
        return [c for c in self.children if isinstance(c, Element) and c.name == name]

    def find(self, name: str) -> Element | None:
        """First direct child element called ``name``, or None."""
        found = self.find_all(name)
        return found[0] if found else None

    def attribute(self, key: str) -> str | None:
        """Value of attribute ``key``, or None when absent."""
        for k, v in self.attributes:
            if k == key:
                return v
        return None

    @property
    def text(self) -> str:
        """Concatenated direct text children."""
        return "".join(c.value for c in self.children if isinstance(c, Text))


type Node = Element | Text


def element(
    name: str,
    *children: Node | str,
    attrs: Mapping[str, str] | None = None,
) -> Element:
    """Build an Element; ``str`` children become Text nodes.

    Attribute order follows the mapping's iteration order.
    """
    nodes = tuple(Text(c) if isinstance(c, str) else c for c in children)
    attributes = tuple((attrs or {}).items())
    return Element(name=name, attributes=attributes, children=nodes)
