from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class ShapecastError(Exception):
    """Base exception for shapecast errors."""


class ShapecastTypeError(TypeError, ShapecastError):
    """Raised when shapecast encounters an invalid declaration or annotation."""


class ShapecastLookupError(KeyError, ShapecastError):
    """Raised when a container or member cannot be found by name."""


class ShapecastValueError(ValueError, ShapecastError):
    """Raised when a model is assembled from invalid declarations."""


def list_type_requires_parameter() -> ShapecastTypeError:
    return ShapecastTypeError("List types must be parameterized.")


def unsupported_annotation(annotation: "Any") -> ShapecastTypeError:
    return ShapecastTypeError(f"Unsupported annotation: {annotation}")


def dataclass_required(decorator_name: str) -> ShapecastTypeError:
    return ShapecastTypeError(f"{decorator_name} requires an explicit dataclass.")


def not_shapecast_declaration(type_name: str) -> ShapecastTypeError:
    return ShapecastTypeError(
        f"{type_name} is not decorated with @shapecast.type or @shapecast.entity"
    )


def declaration_reference_not_supported(type_name: str) -> ShapecastTypeError:
    return ShapecastTypeError(
        f"Declaration '{type_name}' cannot be used as a property type; "
        "use an undecorated dataclass for inline structures."
    )


def conflicting_nullability(annotation: "Any") -> ShapecastTypeError:
    return ShapecastTypeError(
        f"Annotation {annotation} is marked NotNull but also allows None."
    )


def recursive_inline_structure(type_name: str) -> ShapecastTypeError:
    return ShapecastTypeError(
        f"Inline structure '{type_name}' refers back to itself; "
        "recursive structures cannot be inlined."
    )


def mandatory_list_element(annotation: "Any") -> ShapecastTypeError:
    return ShapecastTypeError(
        f"Mandatory applies to properties, not list elements: {annotation}"
    )


def nested_nullable() -> ShapecastTypeError:
    return ShapecastTypeError("A nullable type node cannot wrap another one.")


def unknown_container(name: str) -> ShapecastLookupError:
    return ShapecastLookupError(f"No container named '{name}'")


def unknown_member(container_name: str, member_name: str) -> ShapecastLookupError:
    return ShapecastLookupError(f"{container_name} has no member named '{member_name}'")


def unknown_property(container_name: str, property_name: str) -> ShapecastLookupError:
    return ShapecastLookupError(
        f"{container_name} has no property named '{property_name}'"
    )


def duplicate_container(name: str) -> ShapecastValueError:
    return ShapecastValueError(f"Container '{name}' is declared more than once.")


def model_requires_declarations() -> ShapecastValueError:
    return ShapecastValueError("Model requires at least one declaration.")
