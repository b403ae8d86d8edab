import dataclasses
from typing import TYPE_CHECKING, overload

from .annotations import _build_properties
from .config import DEFAULT_DEFAULTS
from .errors import dataclass_required
from .metadata import META_ATTR, ContainerKind, DeclarationMeta

if TYPE_CHECKING:
    from builtins import type as pytype
    from collections.abc import Callable


def _wrap_declaration(
    target: "pytype",
    *,
    kind: ContainerKind,
    name: str | None,
    description: str | None,
) -> "pytype":
    """Shared implementation for @type and @entity decorators.

    Validates the annotations eagerly with the default language settings (the
    result is discarded) and stores the declaration metadata on the class.
    """
    if not dataclasses.is_dataclass(target):
        raise dataclass_required(f"@shapecast.{kind.value}")

    _build_properties(target, DEFAULT_DEFAULTS)
    meta = DeclarationMeta(
        kind=kind, name=name or target.__name__, description=description
    )
    setattr(target, META_ATTR, meta)
    return target


@overload
def type(
    cls: "pytype", *, name: str | None = None, description: str | None = None
) -> "pytype": ...


@overload
def type(
    cls: None = None, *, name: str | None = None, description: str | None = None
) -> "Callable[[pytype], pytype]": ...


def type(
    cls: "pytype | None" = None,
    *,
    name: str | None = None,
    description: str | None = None,
) -> "Callable[[pytype], pytype] | pytype":
    """Marks a dataclass as a standalone type declaration."""

    def wrap(target: "pytype") -> "pytype":
        return _wrap_declaration(
            target, kind=ContainerKind.TYPE, name=name, description=description
        )

    if cls is None:
        return wrap
    return wrap(cls)


@overload
def entity(
    cls: "pytype", *, name: str | None = None, description: str | None = None
) -> "pytype": ...


@overload
def entity(
    cls: None = None, *, name: str | None = None, description: str | None = None
) -> "Callable[[pytype], pytype]": ...


def entity(
    cls: "pytype | None" = None,
    *,
    name: str | None = None,
    description: str | None = None,
) -> "Callable[[pytype], pytype] | pytype":
    """Marks a dataclass as an entity declaration backed by persisted records."""

    def wrap(target: "pytype") -> "pytype":
        return _wrap_declaration(
            target, kind=ContainerKind.ENTITY, name=name, description=description
        )

    if cls is None:
        return wrap
    return wrap(cls)
