from io import BytesIO
from typing import Dict
from typing import Iterable
from typing import Optional
from typing import Tuple
from xml.sax.saxutils import escape

from lxml import etree

from importer.parsers import ElementParser

DEFAULT_CONTENT = {"": ("Welcome", "<p>Hello world</p>")}


def parse_with(parser: ElementParser, xml: str):
    """Feed the start and end events of an XML snippet through a parser and
    return the parsed data."""
    for event, element in etree.iterparse(
        BytesIO(xml.encode()),
        events=("start", "end"),
    ):
        if event == "start":
            parser.start(element)
        else:
            parser.end(element)
    return parser.data


def box_xml(
    identifier: str,
    box_type: str = "html",
    position: str = "sidebarRight",
    names: Optional[Dict[str, str]] = None,
    controller: Optional[str] = None,
    content: Optional[Dict[str, Tuple[str, str]]] = None,
    visible_everywhere: Optional[str] = None,
    show_header: Optional[str] = None,
    css_class_name: Optional[str] = None,
    visibility_exceptions: Iterable[str] = (),
) -> str:
    """Render one ``box`` element of a manifest."""
    if names is None:
        names = {"en": identifier}
    if content is None and box_type != "system":
        content = DEFAULT_CONTENT

    parts = [f'<box identifier="{identifier}">']
    parts += [
        f'<name language="{language}">{escape(name)}</name>'
        for language, name in names.items()
    ]
    parts.append(f"<boxType>{box_type}</boxType>")
    parts.append(f"<position>{position}</position>")
    if controller is not None:
        parts.append(f"<controller>{escape(controller)}</controller>")
    for language, (title, body) in (content or {}).items():
        language_attribute = f' language="{language}"' if language else ""
        parts.append(
            f"<content{language_attribute}>"
            f"<title>{escape(title)}</title>"
            f"<content><![CDATA[{body}]]></content>"
            f"</content>",
        )
    if visible_everywhere is not None:
        parts.append(f"<visibleEverywhere>{visible_everywhere}</visibleEverywhere>")
    if show_header is not None:
        parts.append(f"<showHeader>{show_header}</showHeader>")
    if css_class_name is not None:
        parts.append(f"<cssClassName>{css_class_name}</cssClassName>")
    if visibility_exceptions:
        parts.append("<visibilityExceptions>")
        parts += [f"<page>{page}</page>" for page in visibility_exceptions]
        parts.append("</visibilityExceptions>")
    parts.append("</box>")
    return "".join(parts)


def manifest_xml(imports: Iterable[str] = (), deletes: Iterable[str] = ()) -> BytesIO:
    """Wrap rendered items into a manifest document."""
    deletes = "".join(f'<box identifier="{identifier}" />' for identifier in deletes)
    xml = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<data xmlns="http://www.example.com/schema">'
        f"<import>{''.join(imports)}</import>"
        f"<delete>{deletes}</delete>"
        "</data>"
    )
    return BytesIO(xml.encode())
