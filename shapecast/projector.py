import logging
from typing import TYPE_CHECKING

from .classifier import classify
from .config import DEFAULT_OPTIONS
from .metadata import ArrayType, ContainerKind, StructType
from .nodes import (
    ArrayNode,
    MemberNode,
    NullableNode,
    ProjectedContainer,
    ScalarNode,
    StructNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .classifier import Classification
    from .config import ProjectionOptions
    from .metadata import ModelContainer, ModelProperty, ScalarType
    from .nodes import TypeNode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


def is_optional(facts: "Classification", kind: ContainerKind) -> bool:
    """Presence rule: only nullable, non-mandatory members of types may be omitted."""
    if kind is ContainerKind.ENTITY:
        return False
    return facts.nullable and not facts.mandatory


def is_null_union(
    facts: "Classification",
    kind: ContainerKind,
    *,
    options: "ProjectionOptions" = DEFAULT_OPTIONS,
) -> bool:
    """Value rule: nullable members carry ``| null`` whatever their presence."""
    if not facts.nullable:
        return False
    if (
        kind is ContainerKind.ENTITY
        and facts.is_array
        and not options.entity_array_null_union
    ):
        return False
    return True


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


def project_type(
    base_type: "ScalarType | ArrayType | StructType",
    kind: ContainerKind,
    *,
    options: "ProjectionOptions" = DEFAULT_OPTIONS,
) -> "TypeNode":
    """Project a property's base type, recursing into elements and inline members."""
    if isinstance(base_type, ArrayType):
        element = project_type(base_type.element, kind, options=options)
        if base_type.element_nullable:
            element = NullableNode(element)
        return ArrayNode(element)
    if isinstance(base_type, StructType):
        return StructNode(
            tuple(
                project_property(prop, kind, options=options)
                for prop in base_type.properties
            )
        )
    return ScalarNode(base_type.name)


def project_property(
    prop: "ModelProperty",
    kind: ContainerKind,
    *,
    options: "ProjectionOptions" = DEFAULT_OPTIONS,
) -> MemberNode:
    """Decorate ``prop`` with its optional marker and, if nullable, ``| null``."""
    facts = classify(prop)
    type_node = project_type(prop.base_type, kind, options=options)
    if is_null_union(facts, kind, options=options):
        type_node = NullableNode(type_node)
    elif facts.nullable:
        logger.debug(
            "Entity array property '%s' is nullable but emitted without null union",
            prop.name,
        )
    return MemberNode(name=prop.name, optional=is_optional(facts, kind), type=type_node)


def project_container(
    container: "ModelContainer", *, options: "ProjectionOptions" = DEFAULT_OPTIONS
) -> ProjectedContainer:
    logger.debug(
        "Projecting %s '%s' with %d properties",
        container.kind.value,
        container.name,
        len(container.properties),
    )
    return ProjectedContainer(
        name=container.name,
        kind=container.kind,
        members=tuple(
            project_property(prop, container.kind, options=options)
            for prop in container.properties
        ),
        description=container.description,
    )


def project_model(
    containers: "Iterable[ModelContainer]",
    *,
    options: "ProjectionOptions" = DEFAULT_OPTIONS,
) -> tuple[ProjectedContainer, ...]:
    return tuple(
        project_container(container, options=options) for container in containers
    )
