import dataclasses
from typing import TYPE_CHECKING

from .errors import nested_nullable, unknown_member

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .metadata import ContainerKind


class TypeNode:
    """Base class for emitted type nodes."""

    __slots__ = ()

    def to_typescript(self) -> str:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True, slots=True)
class ScalarNode(TypeNode):
    primitive: str

    def to_typescript(self) -> str:
        return self.primitive


@dataclasses.dataclass(frozen=True, slots=True)
class ArrayNode(TypeNode):
    element: TypeNode

    def to_typescript(self) -> str:
        return f"Array<{self.element.to_typescript()}>"


@dataclasses.dataclass(frozen=True, slots=True)
class StructNode(TypeNode):
    members: tuple["MemberNode", ...] = ()

    def member(self, name: str) -> "MemberNode":
        return _find_member(self.members, name, owner="inline structure")

    def to_typescript(self) -> str:
        if not self.members:
            return "{}"
        body = "; ".join(member.to_typescript() for member in self.members)
        return f"{{ {body} }}"


@dataclasses.dataclass(frozen=True, slots=True)
class NullableNode(TypeNode):
    """Union of ``inner`` with null. Never wraps another NullableNode."""

    inner: TypeNode

    def __post_init__(self) -> None:
        if isinstance(self.inner, NullableNode):
            raise nested_nullable()

    def to_typescript(self) -> str:
        return f"{self.inner.to_typescript()} | null"


@dataclasses.dataclass(frozen=True, slots=True)
class MemberNode:
    name: str
    optional: bool
    type: TypeNode

    def to_typescript(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}: {self.type.to_typescript()}"


@dataclasses.dataclass(frozen=True, slots=True)
class ProjectedContainer:
    name: str
    kind: "ContainerKind"
    members: tuple[MemberNode, ...] = ()
    description: str | None = None

    def member(self, name: str) -> MemberNode:
        return _find_member(self.members, name, owner=self.name)


def _find_member(
    members: "Iterable[MemberNode]", name: str, *, owner: str
) -> MemberNode:
    for member in members:
        if member.name == name:
            return member
    raise unknown_member(owner, name)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_nullable(
    node: TypeNode, checks: "Iterable[Callable[[TypeNode], bool]]" = ()
) -> bool:
    """
    Return True if ``node`` is a null union whose inner type passes every check.
    """
    if not isinstance(node, NullableNode):
        return False
    return all(check(node.inner) for check in checks)


def unwrap_nullable(node: TypeNode) -> TypeNode:
    if isinstance(node, NullableNode):
        return node.inner
    return node


def is_scalar(node: TypeNode, primitive: str) -> bool:
    return isinstance(node, ScalarNode) and node.primitive == primitive


def is_number(node: TypeNode) -> bool:
    return is_scalar(node, "number")


def is_string(node: TypeNode) -> bool:
    return is_scalar(node, "string")


def is_boolean(node: TypeNode) -> bool:
    return is_scalar(node, "boolean")


def is_array(
    node: TypeNode, element_check: "Callable[[TypeNode], bool] | None" = None
) -> bool:
    if not isinstance(node, ArrayNode):
        return False
    return element_check is None or element_check(node.element)


def is_struct(node: TypeNode) -> bool:
    return isinstance(node, StructNode)
