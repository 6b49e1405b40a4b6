import pytest
from django.db import IntegrityError

from boxes.models import Box
from boxes.validators import BoxPosition
from boxes.validators import BoxType
from common.tests import factories

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize(
    "existing, expected",
    [
        ((), 1),
        ((1,), 2),
        ((1, 3, 5), 6),
        ((0,), 1),
    ],
)
def test_next_show_order(existing, expected):
    for show_order in existing:
        factories.BoxFactory.create(position=BoxPosition.TOP, show_order=show_order)
    factories.BoxFactory.create(position=BoxPosition.FOOTER, show_order=100)

    assert Box.objects.next_show_order(BoxPosition.TOP) == expected


def test_for_package(package, other_package):
    own = factories.BoxFactory.create(package=package)
    factories.BoxFactory.create(package=other_package)

    assert list(Box.objects.for_package(package.pk)) == [own]


def test_is_system():
    assert factories.SystemBoxFactory.build().is_system
    assert not factories.BoxFactory.build(box_type=BoxType.HTML).is_system


def test_identifier_is_unique_per_package(package, other_package):
    factories.BoxFactory.create(identifier="com.example.Welcome", package=package)
    factories.BoxFactory.create(identifier="com.example.Welcome", package=other_package)

    with pytest.raises(IntegrityError):
        factories.BoxFactory.create(identifier="com.example.Welcome", package=package)


def test_deleting_package_deletes_boxes(package):
    box = factories.BoxFactory.create(package=package)
    factories.BoxContentFactory.create(box=box)
    factories.BoxToPageFactory.create(box=box)

    package.delete()

    assert not Box.objects.exists()
