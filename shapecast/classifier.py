import dataclasses
from typing import TYPE_CHECKING

from .metadata import ArrayType

if TYPE_CHECKING:
    from .metadata import ModelProperty


@dataclasses.dataclass(frozen=True, slots=True)
class Classification:
    """Facts about a single property that drive its projection."""

    nullable: bool
    mandatory: bool
    is_array: bool


def classify(prop: "ModelProperty") -> Classification:
    """
    Derive the nullability, mandatory override and array shape of ``prop``.

    An explicit nullability annotation wins over the language default; the
    mandatory override is only ever set explicitly and says nothing about
    whether the value may be null.
    """
    nullable = prop.default_nullable if prop.nullable is None else prop.nullable
    return Classification(
        nullable=nullable,
        mandatory=prop.mandatory,
        is_array=isinstance(prop.base_type, ArrayType),
    )
