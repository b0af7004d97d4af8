"""
Markup tree models consumed by the structural differ.

A node is either a TextNode (no tag name) or an ElementNode carrying a tag
name, an ordered list of attributes and an ordered list of child nodes.
Attribute order is significant: two elements whose attributes only differ
in order are not equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union
from xml.dom import Node as DomNode
from xml.dom import minidom
from xml.sax.saxutils import escape, quoteattr


@dataclass
class TextNode:
    """Text-bearing node."""

    text_content: str

    @property
    def tag_name(self) -> None:
        return None

    @property
    def outer_markup(self) -> str:
        return escape(self.text_content)


@dataclass
class ElementNode:
    """Element node with ordered attributes and children.

    Attributes:
        tag_name: Element name as written in the document.
        attributes: Ordered (name, value) pairs.
        child_nodes: Ordered element and text children.
    """

    tag_name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    child_nodes: list[TreeNode] = field(default_factory=list)

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendants."""
        return "".join(child.text_content for child in self.child_nodes)

    @property
    def inner_markup(self) -> str:
        """Serialized children."""
        return "".join(child.outer_markup for child in self.child_nodes)

    @property
    def outer_markup(self) -> str:
        """Serialized element including its own tag."""
        attrs = "".join(f" {name}={quoteattr(value)}" for name, value in self.attributes)
        if not self.child_nodes:
            return f"<{self.tag_name}{attrs}/>"
        return f"<{self.tag_name}{attrs}>{self.inner_markup}</{self.tag_name}>"

    def get_attribute(self, name: str) -> str | None:
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None


TreeNode = Union[TextNode, ElementNode]


def from_dom(node: DomNode) -> TreeNode | None:
    """Convert a DOM node into a tree node.

    Comments and processing instructions have no counterpart and convert
    to None; callers drop them.
    """
    if node.nodeType == DomNode.ELEMENT_NODE:
        attributes = [
            (node.attributes.item(i).name, node.attributes.item(i).value)
            for i in range(node.attributes.length)
        ]
        children = [from_dom(child) for child in node.childNodes]
        return ElementNode(
            tag_name=node.tagName,
            attributes=attributes,
            child_nodes=[child for child in children if child is not None],
        )
    if node.nodeType in (DomNode.TEXT_NODE, DomNode.CDATA_SECTION_NODE):
        return TextNode(node.data)
    return None


def parse_markup(text: str) -> ElementNode:
    """Parse an XML document into an ElementNode tree.

    Args:
        text: XML source.

    Returns:
        The document element.

    Raises:
        xml.parsers.expat.ExpatError: If the markup is not well-formed.
    """
    document = minidom.parseString(text)
    try:
        return from_dom(document.documentElement)
    finally:
        document.unlink()
