import dataclasses
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, ClassVar, get_args, get_origin

from .config import DEFAULT_DEFAULTS
from .errors import (
    conflicting_nullability,
    declaration_reference_not_supported,
    list_type_requires_parameter,
    mandatory_list_element,
    not_shapecast_declaration,
    recursive_inline_structure,
    unsupported_annotation,
)
from .metadata import (
    _MANDATORY_MARKER,
    _NOT_NULL_MARKER,
    _SCALARS,
    ArrayType,
    ModelContainer,
    ModelProperty,
    ScalarType,
    StructType,
    _get_declaration_meta,
)

if sys.version_info >= (3, 14):
    from annotationlib import Format
    from annotationlib import get_annotations as _get_annotations
else:
    from typing_extensions import Format
    from typing_extensions import get_annotations as _get_annotations

if TYPE_CHECKING:
    from builtins import type as pytype
    from typing import Any

    from .config import ModelDefaults

_NONE_TYPE = type(None)


def get_annotations(obj: "Any") -> dict[str, "Any"]:
    """Resolve annotations for a class using annotationlib semantics."""
    return _get_annotations(obj, format=Format.VALUE)


# ---------------------------------------------------------------------------
# Annotation analysis
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AnnotationInfo:
    annotation: "Any"
    inner: "Any"
    nullable: bool | None
    mandatory: bool
    metadata: tuple["Any", ...]
    is_list: bool
    list_item: "Any | None"
    is_classvar: bool


def analyze_annotation(annotation: "Any") -> AnnotationInfo:
    inner, metadata = _unwrap_annotated(annotation)
    inner, optional = _split_optional(inner)
    # NotNull[int] | None nests the markers inside the union
    inner, inner_metadata = _unwrap_annotated(inner)
    metadata += inner_metadata

    not_null = _NOT_NULL_MARKER in metadata
    if optional and not_null:
        raise conflicting_nullability(annotation)
    nullable: bool | None = None
    if optional:
        nullable = True
    elif not_null:
        nullable = False

    origin = get_origin(inner)
    args = get_args(inner)
    is_list = inner is list or origin is list
    return AnnotationInfo(
        annotation=annotation,
        inner=inner,
        nullable=nullable,
        mandatory=_MANDATORY_MARKER in metadata,
        metadata=metadata,
        is_list=is_list,
        list_item=args[0] if is_list and args else None,
        is_classvar=origin is ClassVar,
    )


def _unwrap_annotated(annotation: "Any") -> tuple["Any", tuple["Any", ...]]:
    if get_origin(annotation) is Annotated:
        args = get_args(annotation)
        return args[0], tuple(args[1:])
    return annotation, ()


def _split_optional(annotation: "Any") -> tuple["Any", bool]:
    args = get_args(annotation)
    if args:
        non_none = [arg for arg in args if arg is not _NONE_TYPE]
        if len(non_none) == 1 and len(non_none) != len(args):
            return non_none[0], True
    return annotation, False


def is_hidden_field(attr_name: str, annotation: "Any") -> bool:
    if attr_name.startswith("_"):
        return True
    return analyze_annotation(annotation).is_classvar


# ---------------------------------------------------------------------------
# Model building
# ---------------------------------------------------------------------------


def _base_type_from_info(
    info: AnnotationInfo,
    defaults: "ModelDefaults",
    reading: "frozenset[pytype]" = frozenset(),
) -> "tuple[ScalarType | ArrayType | StructType, bool]":
    """Return the base type for ``info`` and the default nullability of its kind.

    ``reading`` holds the inline dataclasses whose fields are currently being
    read, so a structure that contains itself is rejected instead of recursing.
    """
    inner = info.inner
    if info.is_list:
        if info.list_item is None:
            raise list_type_requires_parameter()
        item_info = analyze_annotation(info.list_item)
        if item_info.mandatory:
            raise mandatory_list_element(info.list_item)
        element, _ = _base_type_from_info(item_info, defaults, reading)
        element_nullable = (
            defaults.element_nullable
            if item_info.nullable is None
            else item_info.nullable
        )
        return (
            ArrayType(element=element, element_nullable=element_nullable),
            defaults.array_nullable,
        )
    if inner in _SCALARS:
        return ScalarType(_SCALARS[inner]), defaults.scalar_nullable
    meta = _get_declaration_meta(inner)
    if meta is not None:
        raise declaration_reference_not_supported(meta.name)
    if isinstance(inner, type) and dataclasses.is_dataclass(inner):
        if inner in reading:
            raise recursive_inline_structure(inner.__name__)
        return (
            StructType(_build_properties(inner, defaults, reading)),
            defaults.struct_nullable,
        )
    raise unsupported_annotation(info.annotation)


def _property(
    name: str,
    annotation: "Any",
    defaults: "ModelDefaults",
    reading: "frozenset[pytype]",
) -> ModelProperty:
    info = analyze_annotation(annotation)
    base_type, default_nullable = _base_type_from_info(info, defaults, reading)
    return ModelProperty(
        name=name,
        base_type=base_type,
        nullable=info.nullable,
        default_nullable=default_nullable,
        mandatory=info.mandatory,
    )


def property_from_annotation(
    name: str, annotation: "Any", *, defaults: "ModelDefaults" = DEFAULT_DEFAULTS
) -> ModelProperty:
    return _property(name, annotation, defaults, frozenset())


def _build_properties(
    cls: "pytype",
    defaults: "ModelDefaults",
    reading: "frozenset[pytype]" = frozenset(),
) -> tuple[ModelProperty, ...]:
    reading = reading | {cls}
    hints = get_annotations(cls)
    properties: list[ModelProperty] = []
    for dc_field in dataclasses.fields(cls):
        annotation = hints.get(dc_field.name, dc_field.type)
        if is_hidden_field(dc_field.name, annotation):
            continue
        properties.append(_property(dc_field.name, annotation, defaults, reading))
    return tuple(properties)


def build_container(
    cls: "pytype", *, defaults: "ModelDefaults" = DEFAULT_DEFAULTS
) -> ModelContainer:
    """Read a decorated dataclass into the model the projector consumes."""
    meta = _get_declaration_meta(cls)
    if meta is None:
        raise not_shapecast_declaration(getattr(cls, "__name__", repr(cls)))
    return ModelContainer(
        name=meta.name,
        kind=meta.kind,
        properties=_build_properties(cls, defaults),
        description=meta.description,
    )
