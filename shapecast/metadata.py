import dataclasses
import enum
from typing import TYPE_CHECKING, Annotated, Generic, TypeVar

from .errors import unknown_property

if TYPE_CHECKING:
    from typing import Any

META_ATTR = "__shapecast_meta__"
_NOT_NULL_MARKER = object()
_MANDATORY_MARKER = object()


if TYPE_CHECKING:
    type NotNull[T] = Annotated[T, _NOT_NULL_MARKER]
    type Mandatory[T] = Annotated[T, _MANDATORY_MARKER]
else:
    _T = TypeVar("_T")

    class NotNull(Generic[_T]):
        """Declares a property as explicitly not nullable."""

        def __class_getitem__(cls, item: _T) -> Annotated[_T, _NOT_NULL_MARKER]:
            return Annotated[item, _NOT_NULL_MARKER]

    class Mandatory(Generic[_T]):
        """Forces a property to be present even when its value may be null."""

        def __class_getitem__(cls, item: _T) -> Annotated[_T, _MANDATORY_MARKER]:
            return Annotated[item, _MANDATORY_MARKER]


class ContainerKind(enum.Enum):
    TYPE = "type"
    ENTITY = "entity"


@dataclasses.dataclass(frozen=True, slots=True)
class DeclarationMeta:
    kind: ContainerKind
    name: str
    description: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class ScalarType:
    """A leaf value, already mapped to its target primitive name."""

    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class ArrayType:
    """A collection of ``element``; ``element_nullable`` is already resolved."""

    element: "ScalarType | ArrayType | StructType"
    element_nullable: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class StructType:
    """An inline structure with its own ordered properties."""

    properties: tuple["ModelProperty", ...] = ()

    def lookup(self, name: str) -> "ModelProperty":
        return _lookup(self.properties, name, owner="inline structure")


@dataclasses.dataclass(frozen=True, slots=True)
class ModelProperty:
    """A named field of a type or entity, as handed over by the model parser.

    ``nullable`` is ``None`` when the declaration carries no explicit
    nullability; ``default_nullable`` then applies.
    """

    name: str
    base_type: ScalarType | ArrayType | StructType
    nullable: bool | None = None
    default_nullable: bool = True
    mandatory: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class ModelContainer:
    name: str
    kind: ContainerKind
    properties: tuple[ModelProperty, ...] = ()
    description: str | None = None

    def lookup(self, name: str) -> ModelProperty:
        return _lookup(self.properties, name, owner=self.name)


def _lookup(
    properties: tuple[ModelProperty, ...], name: str, *, owner: str
) -> ModelProperty:
    for prop in properties:
        if prop.name == name:
            return prop
    raise unknown_property(owner, name)


def _get_declaration_meta(obj: "Any") -> DeclarationMeta | None:
    # own attribute only; subclasses of a declaration are not declarations
    if not isinstance(obj, type):
        return None
    meta = vars(obj).get(META_ATTR)
    if isinstance(meta, DeclarationMeta):
        return meta
    return None


_SCALARS = {int: "number", float: "number", str: "string", bool: "boolean"}
