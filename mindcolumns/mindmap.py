"""Mind map node adapter for FreeMind documents.

FreeMind stores every topic as a ``<node TEXT="...">`` element. Other child
elements of a node (``attribute``, ``icon``, ``edge``, ``richcontent``...)
are decoration and never shown as topics.
"""

from typing import Optional, List, Union
from xml.etree.ElementTree import Element, ElementTree

NODE_TAG = "node"
MAP_TAG = "map"
TEXT_ATTRIBUTE = "TEXT"


class MindmapNode:
    """A mind map topic wrapping an already parsed XML element."""

    def __init__(self, element: Element, parent: Optional["MindmapNode"] = None):
        self.element = element
        self.parent = parent

    def __repr__(self) -> str:
        return f"MindmapNode(tag={self.element.tag!r}, title={self.get_title()!r})"

    @classmethod
    def root_of(cls, document: Union[Element, ElementTree]) -> Optional["MindmapNode"]:
        """Return the root topic of a parsed document.

        Accepts either the ``<map>`` element (or its tree), or a ``<node>``
        element which is then taken as the root itself.
        """
        element = document.getroot() if isinstance(document, ElementTree) else document
        if element is None:
            return None
        if element.tag == NODE_TAG:
            return cls(element)
        if element.tag == MAP_TAG:
            first = element.find(NODE_TAG)
            if first is not None:
                return cls(first)
        return None

    def is_displayable_node(self) -> bool:
        return self.element.tag == NODE_TAG

    def get_title(self) -> str:
        return self.element.get(TEXT_ATTRIBUTE, "")

    def children(self) -> List["MindmapNode"]:
        """Topics directly below this one, in document order."""
        return [MindmapNode(child, self) for child in self.element if child.tag == NODE_TAG]

    def has_children(self) -> bool:
        return self.element.find(NODE_TAG) is not None
