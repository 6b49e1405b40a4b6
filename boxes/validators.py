"""Validators for boxes."""
from django.core.validators import RegexValidator
from django.db import models


class BoxType(models.TextChoices):
    SYSTEM = "system", "System"
    """Content is generated by a named controller."""
    HTML = "html", "HTML"
    TEXT = "text", "Text"
    TEMPLATE = "tpl", "Template"


# Box types whose content is shipped in the manifest
CONTENT_BOX_TYPES = (BoxType.HTML, BoxType.TEXT, BoxType.TEMPLATE)


class BoxPosition(models.TextChoices):
    BOTTOM = "bottom", "Bottom"
    CONTENT_BOTTOM = "contentBottom", "Below content"
    CONTENT_TOP = "contentTop", "Above content"
    FOOTER = "footer", "Footer"
    FOOTER_BOXES = "footerBoxes", "Footer boxes"
    HEADER_BOXES = "headerBoxes", "Header boxes"
    HERO = "hero", "Hero"
    SIDEBAR_LEFT = "sidebarLeft", "Left sidebar"
    SIDEBAR_RIGHT = "sidebarRight", "Right sidebar"
    TOP = "top", "Top"


BOX_IDENTIFIER_PATTERN = r"[^\s]+"
box_identifier_validator = RegexValidator(r"^" + BOX_IDENTIFIER_PATTERN + "$")
