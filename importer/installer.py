"""
Drives the installation of XML manifests.

A manifest lists the items a package installs, and optionally the items it
removes:

.. code:: xml

    <data>
        <import>
            <box identifier="com.example.box">...</box>
        </import>
        <delete>
            <box identifier="com.example.oldBox" />
        </delete>
    </data>

Each kind of item is installed by an :class:`InstallationPlugin`. The
:func:`process_manifest_stream` driver calls the plugin in a fixed order:

1. :meth:`~InstallationPlugin.handle_delete` once, with every item from the
   ``delete`` section (skipped if there are none).
2. For each item from the ``import`` section, in document order:
   :meth:`~InstallationPlugin.prepare_import`, then
   :meth:`~InstallationPlugin.find_existing_item`, then
   :meth:`~InstallationPlugin.import_item`.
3. :meth:`~InstallationPlugin.post_import` once, after all items.

State gathered while importing that is only consumed at the end of the run
lives on the :class:`ImportBatch` passed to every call, never on the plugin.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import IO
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Protocol
from typing import Sequence
from typing import Type

from django.db.models import Model
from lxml import etree

from importer.namespaces import Tag
from importer.parsers import ElementParser
from importer.parsers import ItemElement
from importer.parsers import ParserError
from packages.installation import PackageInstallation

logger = logging.getLogger(__name__)


class PluginDoesNotExistError(KeyError):
    pass


@dataclass
class ImportBatch:
    """Everything one run of a plugin over a manifest accumulates."""

    installation: PackageInstallation
    visibility_exceptions: Dict[str, List[str]] = field(default_factory=dict)
    imported: List[Model] = field(default_factory=list)
    deleted: int = 0

    @property
    def package_id(self) -> int:
        return self.installation.package_id


class InstallationPlugin(Protocol):
    """The contract between the manifest driver and the code that installs
    one kind of item."""

    tag: str
    item_parser_class: Type[ItemElement]

    def handle_delete(self, items: Sequence[Mapping[str, Any]], batch: ImportBatch):
        """Remove the given items, all or nothing."""

    def prepare_import(
        self,
        item: Mapping[str, Any],
        batch: ImportBatch,
    ) -> Dict[str, Any]:
        """Validate a parsed item and return the normalized record."""

    def find_existing_item(
        self,
        data: Mapping[str, Any],
        batch: ImportBatch,
    ) -> Optional[Model]:
        """Return the installed row matching the record, if any."""

    def import_item(
        self,
        existing: Optional[Model],
        data: Mapping[str, Any],
        batch: ImportBatch,
    ) -> Model:
        """Insert or update the record and return the resulting row."""

    def post_import(self, batch: ImportBatch):
        """Finish the run once every item has been imported."""


plugins: Dict[str, Type[InstallationPlugin]] = {}


def register_plugin(plugin_class: Type[InstallationPlugin]):
    """
    Registers a plugin class against the tag of the items it installs.

    Used as a class decorator in each app's ``import_handlers`` module, which
    :class:`~common.app_config.CommonConfig` loads when the app is ready.
    """
    plugins[plugin_class.tag] = plugin_class
    return plugin_class


def get_plugin(tag: str) -> InstallationPlugin:
    """
    Instantiate the plugin registered for items with the given tag.

    If one is not found throw an error.
    """
    try:
        return plugins[tag]()
    except KeyError as e:
        raise PluginDoesNotExistError(
            f'Installation plugin for tag "{tag}" was expected but not found.',
        ) from e


class SectionParser(ElementParser):
    """Parser for the ``import`` and ``delete`` sections of a manifest."""

    def __init__(self, tag: Tag, item_parser: ItemElement):
        super().__init__(tag)
        self._additional_components = {item_parser: "items"}


class ManifestParser(ElementParser):
    """
    Parser for a whole manifest document.

    The root element may have any name. Items may be grouped into ``import``
    and ``delete`` sections, or sit directly below the root, in which case
    they are imported.
    """

    def __init__(self, item_parser_class: Type[ItemElement]):
        super().__init__()
        self._additional_components = {
            SectionParser(Tag("import"), item_parser_class()): "import",
            SectionParser(Tag("delete"), item_parser_class()): "delete",
            item_parser_class(): "items",
        }

    def start(self, element: etree._Element, parent: ElementParser = None):
        if not self.started:
            self.tag = Tag(etree.QName(element).localname)
        super().start(element, parent)

    @property
    def import_items(self) -> List[Dict[str, Any]]:
        return [
            *self.data.get("import", {}).get("items", []),
            *self.data.get("items", []),
        ]

    @property
    def delete_items(self) -> List[Dict[str, Any]]:
        return self.data.get("delete", {}).get("items", [])


def parse_manifest_stream(
    stream: IO[bytes],
    item_parser_class: Type[ItemElement],
) -> ManifestParser:
    """Parse a manifest into its import and delete items."""
    handler = ManifestParser(item_parser_class)
    try:
        for event, elem in etree.iterparse(stream, events=("start", "end")):
            if event == "start":
                handler.start(elem)

            if event == "end":
                handler.end(elem)
    except etree.XMLSyntaxError as e:
        raise ParserError(f"Manifest is not well-formed XML: {e}") from e

    return handler


def process_manifest_stream(
    stream: IO[bytes],
    plugin: InstallationPlugin,
    installation: PackageInstallation,
) -> ImportBatch:
    """
    Parse a manifest and run the plugin over its items.

    This will load the items from the stream into the database. Any error
    aborts the run and propagates to the caller.
    """
    manifest = parse_manifest_stream(stream, plugin.item_parser_class)
    batch = ImportBatch(installation=installation)

    delete_items = manifest.delete_items
    if delete_items:
        logger.info(
            "Deleting %d %s item(s) for package %s",
            len(delete_items),
            plugin.tag,
            installation.package,
        )
        plugin.handle_delete(delete_items, batch)

    import_items = manifest.import_items
    logger.info(
        "Importing %d %s item(s) for package %s",
        len(import_items),
        plugin.tag,
        installation.package,
    )
    for item in import_items:
        data = plugin.prepare_import(item, batch)
        existing = plugin.find_existing_item(data, batch)
        batch.imported.append(plugin.import_item(existing, data, batch))

    plugin.post_import(batch)
    return batch
