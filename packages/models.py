from django.db import models

from common.models import TimestampedMixin


class Package(TimestampedMixin):
    """
    A deployable bundle of content.

    Everything a package installs records the package it came from, so that
    reinstalling or removing the package only touches its own rows.
    """

    identifier = models.CharField(max_length=191, unique=True)
    name = models.CharField(max_length=255, blank=True)

    def __str__(self):
        return self.identifier
