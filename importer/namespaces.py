"""Provides dataclasses for xml element tags."""

from dataclasses import dataclass
from typing import Optional
from typing import Union

from lxml import etree


@dataclass
class Tag:
    """
    A dataclass for xml element tags.

    :py:attr:`name` is the local name of the element.

    :py:attr:`namespace` optionally pins the element to a namespace URI. Manifests
    are commonly written against a vendor schema namespace, so tags without a
    namespace match elements by local name alone.
    """

    name: str
    namespace: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        """Returns a fully qualified element tag."""
        if self.namespace is None:
            return self.name

        return f"{{{self.namespace}}}{self.name}"

    def matches(self, element: Union[etree._Element, str]) -> bool:
        """Returns true if the element (or tag string) has this tag."""
        qname = etree.QName(element)
        if qname.localname != self.name:
            return False

        return self.namespace is None or qname.namespace == self.namespace

    def __eq__(self, tag: Union[str, "Tag"]) -> bool:
        """Returns true if the qualified names of the two tags are equal."""
        if isinstance(tag, Tag):
            return self.qualified_name == tag.qualified_name

        return self.qualified_name == tag

    def __str__(self):
        """Returns a string representation of the tag."""
        return self.qualified_name
