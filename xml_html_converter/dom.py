"""
XML tree provider.

The extractors only rely on a minimal node contract (tag name, text content,
attributes, element children, parent), so any parser that can be wrapped in
an `XmlNode` can be swapped in through a `TreeProvider`.
"""

from abc import ABC, abstractmethod
from typing import Optional
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError

from .errors import XmlParseError


class XmlNode(ABC):
    """Element node contract used by the extractors."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        ...

    @property
    @abstractmethod
    def text_content(self) -> str:
        ...

    @property
    @abstractmethod
    def attributes(self) -> list[tuple[str, str]]:
        ...

    @property
    @abstractmethod
    def children(self) -> list["XmlNode"]:
        ...

    @property
    @abstractmethod
    def parent(self) -> Optional["XmlNode"]:
        ...

    def get(self, name: str) -> Optional[str]:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def iter(self, tag: str):
        """Yield every descendant-or-self element named `tag`, in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.tag_name == tag:
                yield node
            stack.extend(reversed(node.children))

    def find(self, tag: str) -> Optional["XmlNode"]:
        """First direct child element named `tag`."""
        for child in self.children:
            if child.tag_name == tag:
                return child
        return None

    def findall(self, tag: str) -> list["XmlNode"]:
        return [child for child in self.children if child.tag_name == tag]


class MinidomNode(XmlNode):
    """`XmlNode` backed by an `xml.dom.minidom` element."""

    def __init__(self, element: minidom.Element):
        self._element = element

    def __eq__(self, other):
        return isinstance(other, MinidomNode) and other._element is self._element

    def __hash__(self):
        return id(self._element)

    def __repr__(self):
        return f"MinidomNode({self.tag_name!r})"

    @property
    def tag_name(self) -> str:
        return self._element.tagName

    @property
    def text_content(self) -> str:
        return _collect_text(self._element)

    @property
    def attributes(self) -> list[tuple[str, str]]:
        return list(self._element.attributes.items())

    @property
    def children(self) -> list[XmlNode]:
        return [MinidomNode(n) for n in self._element.childNodes
                if n.nodeType == Node.ELEMENT_NODE]

    @property
    def parent(self) -> Optional[XmlNode]:
        parent = self._element.parentNode
        if parent is None or parent.nodeType != Node.ELEMENT_NODE:
            return None
        return MinidomNode(parent)


def _collect_text(node) -> str:
    parts = []
    stack = list(reversed(node.childNodes))
    while stack:
        child = stack.pop()
        if child.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE):
            parts.append(child.data)
        elif child.nodeType == Node.ELEMENT_NODE:
            stack.extend(reversed(child.childNodes))
    return "".join(parts)


class TreeProvider(ABC):
    """Parses XML text into the root `XmlNode` of a document."""

    @abstractmethod
    def parse(self, xml_string: str) -> XmlNode:
        ...


class MinidomTreeProvider(TreeProvider):
    """Default provider using the standard library DOM parser."""

    def parse(self, xml_string: str) -> XmlNode:
        try:
            document = minidom.parseString(xml_string)
        except ExpatError as e:
            raise XmlParseError(f"XML parsing error: {e}") from e
        return MinidomNode(document.documentElement)
