from dataclasses import dataclass
from typing import ClassVar

import pytest

import shapecast as sc
from shapecast.annotations import build_container
from shapecast.errors import ShapecastTypeError
from shapecast.metadata import META_ATTR, DeclarationMeta


@dataclass
class Address:
    street: sc.NotNull[str]
    city: str | None
    lines: list[str | None]


@sc.type
@dataclass
class Person:
    name: sc.NotNull[str]
    nickname: str
    age: int | None
    score: float
    active: bool
    tags: list[str]
    address: Address
    _secret: str = ""
    kind: ClassVar[str] = "person"


@sc.entity(name="Books", description="Catalog entries")
@dataclass
class Book:
    title: sc.Mandatory[str]
    isbn: sc.NotNull[str]


def test_decorators_store_declaration_meta() -> None:
    """
    Verifies @type and @entity attach name, kind and description metadata.
    """
    person_meta = getattr(Person, META_ATTR)
    book_meta = getattr(Book, META_ATTR)
    assert person_meta == DeclarationMeta(kind=sc.ContainerKind.TYPE, name="Person")
    assert book_meta == DeclarationMeta(
        kind=sc.ContainerKind.ENTITY, name="Books", description="Catalog entries"
    )


def test_decorator_requires_dataclass() -> None:
    """
    Ensures decorating a plain class raises a type error.
    """

    class Plain:
        value: int

    with pytest.raises(ShapecastTypeError, match="requires an explicit dataclass"):
        sc.entity(Plain)


def test_build_container_reads_annotations() -> None:
    """
    Verifies annotations map onto properties, skipping hidden fields.
    """
    container = build_container(Person)
    assert container.kind is sc.ContainerKind.TYPE
    assert [prop.name for prop in container.properties] == [
        "name",
        "nickname",
        "age",
        "score",
        "active",
        "tags",
        "address",
    ]
    assert container.lookup("name").nullable is False
    assert container.lookup("nickname").nullable is None
    assert container.lookup("age").nullable is True
    assert container.lookup("age").base_type == sc.ScalarType("number")
    assert container.lookup("score").base_type == sc.ScalarType("number")
    assert container.lookup("active").base_type == sc.ScalarType("boolean")


def test_build_container_reads_arrays_and_inline_structures() -> None:
    """
    Ensures lists become arrays and undecorated dataclasses inline structures.
    """
    container = build_container(Person)
    tags = container.lookup("tags")
    assert tags.base_type == sc.ArrayType(sc.ScalarType("string"))
    address = container.lookup("address").base_type
    assert isinstance(address, sc.StructType)
    assert address.lookup("street").nullable is False
    assert address.lookup("city").nullable is True
    lines = address.lookup("lines").base_type
    assert lines == sc.ArrayType(sc.ScalarType("string"), element_nullable=True)


def test_build_container_reads_mandatory_override() -> None:
    """
    Verifies Mandatory marks the override without touching nullability.
    """
    container = build_container(Book)
    title = container.lookup("title")
    assert title.mandatory is True
    assert title.nullable is None
    assert container.lookup("isbn").mandatory is False


def test_defaults_apply_per_property_kind() -> None:
    """
    Ensures ModelDefaults feed the default nullability of each property kind.
    """
    defaults = sc.ModelDefaults(
        scalar_nullable=False,
        array_nullable=True,
        struct_nullable=False,
        element_nullable=True,
    )
    container = build_container(Person, defaults=defaults)
    assert container.lookup("nickname").default_nullable is False
    assert container.lookup("tags").default_nullable is True
    assert container.lookup("tags").base_type.element_nullable is True
    assert container.lookup("address").default_nullable is False


def test_model_projects_person_with_language_defaults() -> None:
    """
    Verifies the decorated type projects through the default language rules.
    """
    model = sc.Model(Person)
    assert model.member("Person", "name").optional is False
    assert model.member("Person", "nickname").optional is True
    assert model.member("Person", "age").optional is True
    address = model.member("Person", "address")
    assert address.optional is True
    assert address.type.to_typescript() == (
        "{ street: string; city?: string | null; lines?: Array<string | null> | null }"
        " | null"
    )


def test_model_projects_entity_with_mandatory_nullable() -> None:
    """
    Ensures a mandatory but nullable entity property keeps its null union.
    """
    model = sc.Model(Book)
    title = model.member("Books", "title")
    assert title.optional is False
    assert title.type.to_typescript() == "string | null"


def test_mandatory_nullable_type_member_is_required_and_null_union() -> None:
    """
    Verifies mandatory overrides presence but not value nullability on types.
    """

    @sc.type
    @dataclass
    class Form:
        note: sc.Mandatory[str | None]

    note = sc.Model(Form).member("Form", "note")
    assert note.optional is False
    assert note.type.to_typescript() == "string | null"
