from django.db import models

from packages.models import Package


class Page(models.Model):
    """A page of the site, addressed by installers through its textual
    identifier."""

    identifier = models.CharField(max_length=191, unique=True)
    name = models.CharField(max_length=255, blank=True)
    package = models.ForeignKey(
        Package,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="pages",
    )

    def __str__(self):
        return self.identifier
