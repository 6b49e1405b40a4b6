from django.db import models
from django.db.models import Max
from django.db.models import QuerySet

from boxes import validators
from common.models import TimestampedMixin
from packages.models import Package
from pages.models import Page


class BoxQuerySet(QuerySet):
    def for_package(self, package_id: int) -> QuerySet:
        return self.filter(package_id=package_id)

    def next_show_order(self, position: str) -> int:
        """Return the show order that appends a new box to ``position``."""
        highest = self.filter(position=position).aggregate(
            highest=Max("show_order"),
        )["highest"]
        return (highest or 0) + 1


class Box(TimestampedMixin):
    """
    A box is a block of content that is shown in one of the fixed positions of
    a page.

    System boxes render the output of a controller and are owned entirely by
    the package that installed them. The other box types carry their content
    with them, which end users are free to edit after installation.
    """

    identifier = models.CharField(
        max_length=191,
        validators=[validators.box_identifier_validator],
        db_index=True,
    )
    box_type = models.CharField(max_length=6, choices=validators.BoxType.choices)
    position = models.CharField(
        max_length=20,
        choices=validators.BoxPosition.choices,
    )
    show_order = models.PositiveIntegerField(default=0)
    visible_everywhere = models.BooleanField(default=True)
    is_multilingual = models.BooleanField(default=False)
    css_class_name = models.CharField(max_length=255, blank=True, default="")
    show_header = models.BooleanField(default=True)
    controller = models.CharField(max_length=255, blank=True, default="")
    name = models.JSONField(default=dict, blank=True)
    title = models.JSONField(default=dict, blank=True)
    origin_is_system = models.BooleanField(default=False)
    package = models.ForeignKey(
        Package,
        on_delete=models.CASCADE,
        related_name="boxes",
    )
    pages = models.ManyToManyField(
        Page,
        through="BoxToPage",
        related_name="boxes",
    )

    objects = BoxQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=("identifier", "package"),
                name="unique_box_identifier_per_package",
            ),
        ]

    def __str__(self):
        return self.identifier

    @property
    def is_system(self) -> bool:
        return self.box_type == validators.BoxType.SYSTEM


class BoxContent(models.Model):
    """The title and body of a box in one language, or in no particular
    language when ``language_code`` is empty."""

    box = models.ForeignKey(Box, on_delete=models.CASCADE, related_name="contents")
    language_code = models.CharField(max_length=20, blank=True, default="")
    title = models.CharField(max_length=255)
    content = models.TextField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=("box", "language_code"),
                name="unique_box_content_language",
            ),
        ]

    def __str__(self):
        return f"{self.box} [{self.language_code or '*'}]"


class BoxToPage(models.Model):
    """
    Inverts the default visibility of a box on one page.

    ``visible`` is always the negation of the box's ``visible_everywhere``
    flag at the time the exception was installed.
    """

    box = models.ForeignKey(Box, on_delete=models.CASCADE)
    page = models.ForeignKey(Page, on_delete=models.CASCADE)
    visible = models.BooleanField(default=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=("box", "page"),
                name="unique_box_to_page",
            ),
        ]
