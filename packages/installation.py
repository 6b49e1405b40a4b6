"""The package installation that an import runs on behalf of."""
from __future__ import annotations

from dataclasses import dataclass

from packages.models import Package


@dataclass
class PackageInstallation:
    """Supplies the package whose manifests are currently being installed."""

    package: Package

    @property
    def package_id(self) -> int:
        return self.package.pk

    @classmethod
    def for_identifier(cls, identifier: str, create: bool = False) -> PackageInstallation:
        """
        Look up the package by its textual identifier.

        :param create: Register the package if it does not exist yet
        :raises Package.DoesNotExist: if the package is unknown and
            ``create`` is not set
        """
        if create:
            package, _ = Package.objects.get_or_create(identifier=identifier)
        else:
            package = Package.objects.get(identifier=identifier)
        return cls(package=package)
