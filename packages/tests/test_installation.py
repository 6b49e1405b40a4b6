import pytest

from common.tests import factories
from packages.installation import PackageInstallation
from packages.models import Package

pytestmark = pytest.mark.django_db


def test_for_identifier(package):
    installation = PackageInstallation.for_identifier("com.example.package")

    assert installation.package == package
    assert installation.package_id == package.pk


def test_for_unknown_identifier():
    with pytest.raises(Package.DoesNotExist):
        PackageInstallation.for_identifier("com.example.unknown")


def test_for_identifier_creates_package():
    installation = PackageInstallation.for_identifier(
        "com.example.new",
        create=True,
    )

    assert Package.objects.get(identifier="com.example.new") == installation.package


def test_for_identifier_create_reuses_package():
    existing = factories.PackageFactory.create(identifier="com.example.new")

    installation = PackageInstallation.for_identifier("com.example.new", create=True)

    assert installation.package == existing
    assert Package.objects.count() == 1
