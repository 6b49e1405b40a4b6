"""Installs, updates and deletes the boxes shipped by a package."""
from __future__ import annotations

import logging
from typing import Any
from typing import Dict
from typing import Mapping
from typing import Optional
from typing import Sequence

from django.db.transaction import atomic

from boxes import models
from boxes import serializers
from boxes.import_parsers import BoxParser
from boxes.validators import CONTENT_BOX_TYPES
from boxes.validators import BoxPosition
from boxes.validators import BoxType
from common.i18n import get_i18n_values
from common.util import is_truthy
from importer.installer import ImportBatch
from importer.installer import register_plugin
from importer.parsers import InvalidDataError
from pages.models import Page

logger = logging.getLogger(__name__)


@register_plugin
class BoxInstaller:
    """
    Reconciles the ``box`` items of a manifest with the installed boxes.

    Boxes are matched on their identifier within the installing package. New
    boxes are appended to the end of their position. Existing boxes are only
    rewritten when they are system boxes: every other type carries content an
    end user may have edited since installation, so those rows are left alone.

    Visibility exceptions name pages by their textual identifier. They are
    staged on the batch while importing and written in one pass afterwards,
    once every box of the manifest has a row to point at.
    """

    tag = "box"
    item_parser_class = BoxParser

    def handle_delete(self, items: Sequence[Mapping[str, Any]], batch: ImportBatch):
        with atomic():
            for item in items:
                deleted, _ = models.Box.objects.filter(
                    identifier=item["identifier"],
                    package_id=batch.package_id,
                ).delete()
                logger.debug("Deleted box '%s' (%d rows)", item["identifier"], deleted)
                batch.deleted += deleted

    def prepare_import(
        self,
        item: Mapping[str, Any],
        batch: ImportBatch,
    ) -> Dict[str, Any]:
        box_type = item.get("boxType", "")
        identifier = item.get("identifier", "")
        position = item.get("position", "")
        controller = ""
        is_multilingual = False
        content = item.get("content", {})

        if position not in BoxPosition.values:
            raise InvalidDataError(
                f"Unknown box position '{position}' for box '{identifier}'",
            )

        if box_type == BoxType.SYSTEM:
            if not item.get("controller"):
                raise InvalidDataError(
                    f"Missing required element 'controller' for 'system'-type box '{identifier}'",
                )

            controller = item["controller"]
            # content only belongs to the content-bearing types
            content = {}

        elif box_type in CONTENT_BOX_TYPES:
            if not content:
                raise InvalidDataError(
                    f"Missing required 'content' element(s) for box '{identifier}'",
                )

            if len(content) == 1:
                if "" not in content:
                    raise InvalidDataError(
                        f"Expected one 'content' element without a 'language' attribute for box '{identifier}'",
                    )
            else:
                is_multilingual = True

                if "" in content:
                    raise InvalidDataError(
                        f"Cannot mix 'content' elements with and without 'language' attribute for box '{identifier}'",
                    )

        else:
            raise InvalidDataError(f"Unknown type '{box_type}' for box '{identifier}'")

        if item.get("visibilityExceptions"):
            batch.visibility_exceptions[identifier] = list(
                item["visibilityExceptions"],
            )

        return {
            "identifier": identifier,
            "name": get_i18n_values(item.get("name", {}), skip_default=True),
            "title": get_i18n_values(item.get("title", {}), skip_default=True),
            "box_type": box_type,
            "position": position,
            "show_order": self.get_item_order(position),
            "visible_everywhere": is_truthy(item.get("visibleEverywhere")),
            "is_multilingual": is_multilingual,
            "css_class_name": item.get("cssClassName") or "",
            "show_header": is_truthy(item.get("showHeader")),
            "origin_is_system": True,
            "controller": controller,
            "content": [
                {"language_code": language, **values}
                for language, values in content.items()
            ],
        }

    def get_item_order(self, position: str) -> int:
        """Returns the show order that appends a new box to the given
        position."""
        show_order = models.Box.objects.next_show_order(position)
        logger.debug("Next show order for position '%s' is %d", position, show_order)
        return show_order

    def find_existing_item(
        self,
        data: Mapping[str, Any],
        batch: ImportBatch,
    ) -> Optional[models.Box]:
        return (
            models.Box.objects.for_package(batch.package_id)
            .filter(identifier=data["identifier"])
            .first()
        )

    def import_item(
        self,
        existing: Optional[models.Box],
        data: Mapping[str, Any],
        batch: ImportBatch,
    ) -> models.Box:
        # updating boxes is only supported for 'system' type boxes, all other
        # types would potentially overwrite changes made by the user if updated
        if existing is not None and not existing.is_system:
            logger.info("Keeping existing %s box '%s'", existing.box_type, existing)
            return existing

        record = dict(data)
        content = record.pop("content")

        serializer = serializers.BoxSerializer(instance=existing, data=record)
        serializer.is_valid(raise_exception=True)
        content_serializer = serializers.BoxContentSerializer(data=content, many=True)
        content_serializer.is_valid(raise_exception=True)

        with atomic():
            box = serializer.save(package_id=batch.package_id)
            if existing is not None:
                box.contents.all().delete()
            content_serializer.save(box=box)

        logger.info(
            "%s box '%s' at %s",
            "Updated" if existing is not None else "Created",
            box,
            box.position,
        )
        return box

    def post_import(self, batch: ImportBatch):
        if not batch.visibility_exceptions:
            return

        # get all boxes belonging to the identifiers
        boxes = {
            box.identifier: box
            for box in models.Box.objects.for_package(batch.package_id).filter(
                identifier__in=list(batch.visibility_exceptions),
            )
        }

        with atomic():
            for identifier, page_identifiers in batch.visibility_exceptions.items():
                box = boxes.get(identifier)
                if box is None:
                    logger.warning(
                        "No box '%s' in package %s for visibility exceptions",
                        identifier,
                        batch.installation.package,
                    )
                    continue

                # visibility exceptions are replaced wholesale
                models.BoxToPage.objects.filter(box=box).delete()

                page_ids = list(
                    Page.objects.filter(identifier__in=page_identifiers).values_list(
                        "pk",
                        flat=True,
                    ),
                )
                if len(page_ids) < len(set(page_identifiers)):
                    logger.debug(
                        "Ignoring unknown page identifiers for box '%s'",
                        identifier,
                    )

                models.BoxToPage.objects.bulk_create(
                    [
                        models.BoxToPage(
                            box=box,
                            page_id=page_id,
                            visible=not box.visible_everywhere,
                        )
                        for page_id in page_ids
                    ],
                    ignore_conflicts=True,
                )
