from .classifier import Classification, classify
from .config import ModelDefaults, ProjectionOptions
from .decorators import entity, type
from .errors import (
    ShapecastError,
    ShapecastLookupError,
    ShapecastTypeError,
    ShapecastValueError,
)
from .metadata import (
    ArrayType,
    ContainerKind,
    Mandatory,
    ModelContainer,
    ModelProperty,
    NotNull,
    ScalarType,
    StructType,
)
from .model import Model
from .nodes import (
    ArrayNode,
    MemberNode,
    NullableNode,
    ProjectedContainer,
    ScalarNode,
    StructNode,
    TypeNode,
)
from .projector import project_container, project_model, project_property

__all__ = [
    "Model",
    "type",
    "entity",
    "NotNull",
    "Mandatory",
    "ModelDefaults",
    "ProjectionOptions",
    "ContainerKind",
    "ModelContainer",
    "ModelProperty",
    "ScalarType",
    "ArrayType",
    "StructType",
    "TypeNode",
    "ScalarNode",
    "ArrayNode",
    "StructNode",
    "NullableNode",
    "MemberNode",
    "ProjectedContainer",
    "Classification",
    "classify",
    "project_property",
    "project_container",
    "project_model",
    "ShapecastError",
    "ShapecastTypeError",
    "ShapecastLookupError",
    "ShapecastValueError",
]
