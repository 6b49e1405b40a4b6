from __future__ import annotations

from typing import Callable
from typing import Iterable

import pytest

from boxes.import_handlers import BoxInstaller
from common.tests import factories
from common.tests.util import manifest_xml
from importer.installer import ImportBatch
from importer.installer import process_manifest_stream
from packages.installation import PackageInstallation


@pytest.fixture(autouse=True)
def installed_languages(settings):
    settings.LANGUAGE_CODE = "en"
    settings.LANGUAGES = [("en", "English"), ("de", "German")]


@pytest.fixture
def package():
    return factories.PackageFactory.create(identifier="com.example.package")


@pytest.fixture
def other_package():
    return factories.PackageFactory.create(identifier="com.example.other")


@pytest.fixture
def installation(package) -> PackageInstallation:
    return PackageInstallation(package=package)


@pytest.fixture
def batch(installation) -> ImportBatch:
    return ImportBatch(installation=installation)


@pytest.fixture
def box_installer() -> BoxInstaller:
    return BoxInstaller()


@pytest.fixture
def run_box_import(
    box_installer,
    installation,
) -> Callable[..., ImportBatch]:
    """
    Install a manifest built from rendered ``box`` elements for the current
    package.

    Usage:
        batch = run_box_import(box_xml("com.example.box"), deletes=["old"])
    """

    def run(*imports: str, deletes: Iterable[str] = ()) -> ImportBatch:
        return process_manifest_stream(
            manifest_xml(imports=imports, deletes=deletes),
            box_installer,
            installation,
        )

    return run


@pytest.fixture
def pages():
    return {
        identifier: factories.PageFactory.create(identifier=identifier)
        for identifier in ("com.example.Dashboard", "com.example.Members")
    }
