from __future__ import annotations

import logging
from typing import Any
from typing import Dict
from typing import Optional

from lxml import etree

from importer.namespaces import Tag

logger = logging.getLogger(__name__)


class ParserError(Exception):
    pass


class InvalidDataError(Exception):
    pass


def element_text(element: etree._Element, strip: bool = True) -> str:
    """Return the text content of an element and all of its descendants."""
    text = "".join(element.itertext())
    return text.strip() if strip else text


def owning_item(element: etree._Element) -> Optional[etree._Element]:
    """Walk up from ``element`` to the nearest ancestor carrying an
    ``identifier`` attribute."""
    node = element.getparent()
    while node is not None:
        if node.get("identifier") is not None:
            return node
        node = node.getparent()
    return None


def describe_owning_item(element: etree._Element) -> str:
    item = owning_item(element)
    if item is None:
        return "unidentified item"
    identifier = item.get("identifier")
    return f"{etree.QName(item).localname} '{identifier}'"


class ElementParser:
    """
    Base class for element specific parsers.

    ElementParser classes use introspection to build a lookup table of child
    element parsers to their output field name.

    .. code:: python

        class ChildElement(ElementParser):
            tag = Tag("child")
            field = TextElement(Tag("field"))

        class ParentElement(ElementParser):
            tag = Tag("parent")
            child = ChildElement()

    When handling XML such as:

    .. code:: xml

        <parent>
            <child id="2">
                <field>Text</field>
            </child>
        </parent>

    This class will build an object in `self.data` with the following
    structure:

    .. code:: python

        {"child": {"id": "2", "field": "Text"}}
    """

    tag: Optional[Tag] = None
    data_class: type = dict
    strip_text: bool = True

    def __init__(self, tag: Tag = None, many: bool = False):
        self.child: Optional[ElementParser] = None
        self.parent: Optional[ElementParser] = None
        self.data = self.data_class()
        self.many = many
        self.text: Optional[str] = None
        self.started = False

        if tag:
            self.tag = tag

    @property
    def _field_lookup(self) -> Dict[ElementParser, str]:
        field_lookup = {}
        for klass in reversed(type(self).__mro__):
            field_lookup.update(
                {
                    parser: field
                    for field, parser in vars(klass).items()
                    if isinstance(parser, ElementParser)
                },
            )

        field_lookup.update(getattr(self, "_additional_components", {}))
        return field_lookup

    def is_parser_for_element(
        self,
        parser: ElementParser,
        element: etree._Element,
    ) -> bool:
        """Check if the parser matches the element."""
        return parser.tag is not None and parser.tag.matches(element)

    def get_parser(self, element: etree._Element) -> Optional[ElementParser]:
        for parser in self._field_lookup.keys():
            if self.is_parser_for_element(parser, element):
                return parser
        return None

    def start(self, element: etree._Element, parent: ElementParser = None):
        """
        Handle the start of an XML tag. The tag may not yet have all of its
        children.

        Some elements nest a child with the same name as themselves:

        .. code:: xml

            <content language="en">
                <title>Welcome</title>
                <content>Hello world</content>
            </content>

        Matching on tags is not enough in that case, so we also track whether
        this parser is already parsing an element. If it is, the element must
        belong to one of its children.
        """

        self.parent = parent
        if not self.started:
            self.data = self.data_class()
            self.text = None
            self.started = True
        else:
            # if the tag matches one of the child elements of this element, get the
            # parser for that element
            if not self.child:
                self.child = self.get_parser(element)

        # if currently in a child element, delegate to the child parser
        if self.child:
            self.child.start(element, self)

    def end(self, element: etree._Element):
        # if currently in a child element, delegate to the child parser
        if self.child:
            self.child.end(element)

            # leaving the child element, so stop delegating
            if not self.child.started and self.is_parser_for_element(
                self.child,
                element,
            ):
                field_name = self._field_lookup[self.child]
                self.store_child_data(field_name, self.child)
                self.child = None

        # leaving this element, so marshal the data
        elif self.started and self.is_parser_for_element(self, element):
            self.text = element_text(element, strip=self.strip_text)
            self.data.update(element.attrib.items())
            self.started = False
            self.clean()
            self.validate(element)

    def reset(self):
        """Discard any partially parsed element, here and in every child
        parser."""
        self.child = None
        self.started = False
        self.text = None
        self.data = self.data_class()
        for parser in self._field_lookup:
            parser.reset()

    def store_child_data(self, field_name: str, child: ElementParser):
        if child.many:
            self.data.setdefault(field_name, []).append(child.data)
        else:
            self.data[field_name] = child.data

    def clean(self):
        """Clean up data."""

    def validate(self, element: etree._Element):
        """Validate data."""


class ValueElementMixin:
    """Provides a convenient way to define a parser for elements that contain
    only a text value and have no attributes or children."""

    native_type: type
    """The Python type that most closely matches the type of the XML element."""

    def clean(self):
        super().clean()
        self.data = self.native_type(self.text or "")


class TextElement(ValueElementMixin, ElementParser):
    """
    Represents an element which contains a text value.

    .. code-block:: XML

        <position>sidebarRight</position>
    """

    native_type = str


class RawTextElement(TextElement):
    """A text element whose surrounding whitespace is significant, such as
    markup."""

    strip_text = False


class LocalizedTextElement(ElementParser):
    """
    Represents a text element that may occur once per language.

    Every occurrence must name its language, and the parent collects the
    occurrences into a mapping of language code to text.

    .. code-block:: XML

        <name language="en">Recent activity</name>
        <name language="de">Letzte Aktivitäten</name>
    """

    def __init__(self, tag: Tag = None):
        super().__init__(tag, many=True)

    def clean(self):
        self.data = {
            "language": self.data.get("language", ""),
            "value": self.text or "",
        }

    def validate(self, element: etree._Element):
        if not self.data["language"]:
            raise ParserError(
                f"Missing required attribute 'language' for '{self.tag.name}' "
                f"element ({describe_owning_item(element)})",
            )

    def store_into(self, target: Dict[str, Any], field_name: str):
        target.setdefault(field_name, {})[self.data["language"]] = self.data["value"]


class LocalizedContentElement(ElementParser):
    """
    Represents a composite element that may occur once per language.

    The ``language`` attribute is optional here; an empty language code means
    the content is not tied to a specific locale.

    .. code-block:: XML

        <content language="en">
            <title>Welcome</title>
            <content><![CDATA[<p>Hello world</p>]]></content>
        </content>
    """

    required_children = ("title", "content")

    title = TextElement(Tag("title"))
    content = RawTextElement(Tag("content"))

    def __init__(self, tag: Tag = None):
        super().__init__(tag, many=True)

    def clean(self):
        self.data = {
            "language": self.data.get("language", ""),
            "title": self.data.get("title", ""),
            "content": self.data.get("content", ""),
        }

    def validate(self, element: etree._Element):
        for child in self.required_children:
            if not self.data[child]:
                raise ParserError(
                    f"Expected non-empty child element '{child}' for "
                    f"'{self.tag.name}' element ({describe_owning_item(element)})",
                )

    def store_into(self, target: Dict[str, Any], field_name: str):
        language = self.data["language"]
        target.setdefault(field_name, {})[language] = {
            "title": self.data["title"],
            "content": self.data["content"],
        }


class TextListElement(ElementParser):
    """
    Represents an element whose children each hold one text value, whatever
    their tag name.

    .. code-block:: XML

        <visibilityExceptions>
            <page>com.example.Dashboard</page>
            <page>com.example.Members</page>
        </visibilityExceptions>
    """

    data_class = list

    def start(self, element: etree._Element, parent: ElementParser = None):
        if not self.started:
            self.parent = parent
            self.data = self.data_class()
            self.text = None
            self.started = True

    def end(self, element: etree._Element):
        if not self.started:
            return

        parent = element.getparent()
        if parent is not None and self.is_parser_for_element(self, parent):
            # one entry per direct child, grandchildren only add to its text
            self.data.append(element_text(element))
        elif self.is_parser_for_element(self, element):
            self.started = False
            self.clean()
            self.validate(element)


class ItemElement(ElementParser):
    """
    Base class for the parser of one installable item, e.g. a ``box``.

    Children declared as class attributes make up a fixed table of field name
    to element kind. Locale-variant children fold into per-language mappings;
    children with no declared parser are read as plain text, with the last
    occurrence winning.
    """

    def __init__(self, tag: Tag = None, many: bool = True):
        super().__init__(tag, many=many)
        self._scalar_fields: Dict[ElementParser, str] = {}

    @property
    def _field_lookup(self) -> Dict[ElementParser, str]:
        field_lookup = super()._field_lookup
        field_lookup.update(self._scalar_fields)
        return field_lookup

    def get_parser(self, element: etree._Element) -> Optional[ElementParser]:
        parser = super().get_parser(element)
        if parser is None:
            name = etree.QName(element).localname
            logger.debug("Reading undeclared element '%s' as text", name)
            parser = TextElement(Tag(name))
            self._scalar_fields[parser] = name
        return parser

    def start(self, element: etree._Element, parent: ElementParser = None):
        if not self.started:
            # child parsers are shared between instances, so drop anything an
            # aborted parse left behind
            self.reset()
            self._scalar_fields = {}
        super().start(element, parent)

    def store_child_data(self, field_name: str, child: ElementParser):
        if hasattr(child, "store_into"):
            child.store_into(self.data, field_name)
        else:
            super().store_child_data(field_name, child)
