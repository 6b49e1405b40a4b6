import logging

from importer.namespaces import Tag
from importer.parsers import ItemElement
from importer.parsers import LocalizedContentElement
from importer.parsers import LocalizedTextElement
from importer.parsers import TextElement
from importer.parsers import TextListElement

logger = logging.getLogger(__name__)


class BoxParser(ItemElement):
    """
    Example XML:

    .. code-block:: XML

        <box identifier="com.example.RecentActivity">
            <name language="en">Recent activity</name>
            <name language="de">Letzte Aktivitäten</name>
            <boxType>system</boxType>
            <controller>example\\RecentActivityBoxController</controller>
            <position>sidebarRight</position>
            <showHeader>1</showHeader>
            <visibleEverywhere>0</visibleEverywhere>
            <visibilityExceptions>
                <page>com.example.Dashboard</page>
            </visibilityExceptions>
        </box>

    Parsed into:

    .. code-block:: python

        {
            "identifier": "com.example.RecentActivity",
            "name": {"en": "Recent activity", "de": "Letzte Aktivitäten"},
            "boxType": "system",
            "controller": "example\\RecentActivityBoxController",
            "position": "sidebarRight",
            "showHeader": "1",
            "visibleEverywhere": "0",
            "visibilityExceptions": ["com.example.Dashboard"],
        }
    """

    tag = Tag("box")

    name = LocalizedTextElement(Tag("name"))
    title = LocalizedTextElement(Tag("title"))
    content = LocalizedContentElement(Tag("content"))
    visibilityExceptions = TextListElement(Tag("visibilityExceptions"))

    boxType = TextElement(Tag("boxType"))
    position = TextElement(Tag("position"))
    controller = TextElement(Tag("controller"))
    cssClassName = TextElement(Tag("cssClassName"))
    showHeader = TextElement(Tag("showHeader"))
    visibleEverywhere = TextElement(Tag("visibleEverywhere"))
