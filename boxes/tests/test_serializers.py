import pytest

from boxes.serializers import BoxContentSerializer
from boxes.serializers import BoxSerializer
from common.tests import factories

pytestmark = pytest.mark.django_db


def box_data(**overrides):
    data = {
        "identifier": "com.example.Welcome",
        "box_type": "html",
        "position": "sidebarRight",
        "show_order": 1,
        "visible_everywhere": True,
        "is_multilingual": False,
        "css_class_name": "",
        "show_header": True,
        "controller": "",
        "name": {"en": "Welcome"},
        "title": {},
        "origin_is_system": True,
    }
    data.update(overrides)
    return data


def test_valid_box():
    serializer = BoxSerializer(data=box_data())

    assert serializer.is_valid(), serializer.errors


def test_system_box_requires_controller():
    serializer = BoxSerializer(data=box_data(box_type="system"))

    assert not serializer.is_valid()
    assert "controller" in serializer.errors


def test_content_box_rejects_controller():
    serializer = BoxSerializer(data=box_data(controller="example\\BoxController"))

    assert not serializer.is_valid()
    assert "controller" in serializer.errors


def test_partial_update_keeps_controller_rule():
    box = factories.SystemBoxFactory.create()
    serializer = BoxSerializer(instance=box, data={"controller": ""}, partial=True)

    assert not serializer.is_valid()
    assert "controller" in serializer.errors


@pytest.mark.parametrize(
    "field, value",
    [
        ("position", "nonexistent"),
        ("box_type", "widget"),
        ("identifier", "com.example Welcome"),
    ],
)
def test_invalid_values(field, value):
    serializer = BoxSerializer(data=box_data(**{field: value}))

    assert not serializer.is_valid()
    assert field in serializer.errors


def test_content_without_language():
    serializer = BoxContentSerializer(
        data={"language_code": "", "title": "Welcome", "content": "<p>Hi</p>"},
    )

    assert serializer.is_valid(), serializer.errors
