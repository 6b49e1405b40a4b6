"""Factory classes for tests."""

import factory
from factory.django import DjangoModelFactory
from factory.fuzzy import FuzzyChoice

from boxes.validators import CONTENT_BOX_TYPES
from boxes.validators import BoxPosition
from boxes.validators import BoxType


def identifier_sequence(prefix):
    return factory.Sequence(lambda n: f"{prefix}{n}")


class PackageFactory(DjangoModelFactory):
    class Meta:
        model = "packages.Package"
        django_get_or_create = ("identifier",)

    identifier = identifier_sequence("com.example.package")
    name = factory.Faker("company")


class PageFactory(DjangoModelFactory):
    class Meta:
        model = "pages.Page"
        django_get_or_create = ("identifier",)

    identifier = identifier_sequence("com.example.Page")
    name = factory.Faker("sentence", nb_words=2)
    package = factory.SubFactory(PackageFactory)


class BoxFactory(DjangoModelFactory):
    """A content-bearing box installed by a package."""

    class Meta:
        model = "boxes.Box"

    identifier = identifier_sequence("com.example.box")
    box_type = FuzzyChoice(CONTENT_BOX_TYPES)
    position = FuzzyChoice(BoxPosition.values)
    show_order = factory.Sequence(lambda n: n + 1)
    visible_everywhere = True
    show_header = True
    name = factory.LazyAttribute(lambda o: {"en": o.identifier})
    origin_is_system = True
    package = factory.SubFactory(PackageFactory)


class SystemBoxFactory(BoxFactory):
    box_type = BoxType.SYSTEM
    controller = "example\\box\\RecentActivityBoxController"


class BoxContentFactory(DjangoModelFactory):
    class Meta:
        model = "boxes.BoxContent"

    box = factory.SubFactory(BoxFactory)
    language_code = ""
    title = factory.Faker("sentence", nb_words=3)
    content = factory.Faker("paragraph")


class BoxToPageFactory(DjangoModelFactory):
    class Meta:
        model = "boxes.BoxToPage"

    box = factory.SubFactory(BoxFactory)
    page = factory.SubFactory(PageFactory)
    visible = factory.LazyAttribute(lambda o: not o.box.visible_everywhere)
