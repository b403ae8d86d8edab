"""Shared fixtures and collection guards for the shapecast test suite."""

import inspect
from dataclasses import dataclass

import pytest

import shapecast as sc


@dataclass
class Nested:
    x: str
    y: sc.NotNull[str]
    z: sc.Mandatory[sc.NotNull[str]]
    arr: list[str]
    arr_m: sc.Mandatory[sc.NotNull[list[str]]]


@sc.type(name="T")
@dataclass
class ShapeT:
    a: int
    b: sc.NotNull[int]
    c: sc.Mandatory[sc.NotNull[int]]
    d: list[int]
    e: sc.Mandatory[sc.NotNull[list[int]]]
    s: Nested


@sc.entity(name="E")
@dataclass
class RecordE:
    a: int
    b: sc.NotNull[int]
    d: list[int]
    s: Nested


@pytest.fixture(scope="module")
def reference_model() -> sc.Model:
    """Projects the reference type ``T`` and entity ``E`` once per module."""
    return sc.Model(ShapeT, RecordE)


@pytest.fixture(scope="module")
def type_t(reference_model: sc.Model) -> sc.ProjectedContainer:
    """Provides the projected type declaration ``T``."""
    return reference_model.container("T")


@pytest.fixture(scope="module")
def entity_e(reference_model: sc.Model) -> sc.ProjectedContainer:
    """Provides the projected entity declaration ``E``."""
    return reference_model.container("E")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Fails collection when any test function omits a docstring."""
    del config

    missing_docstrings: set[str] = set()
    for item in items:
        if not item.name.startswith("test_"):
            continue
        obj = getattr(item, "obj", None)
        if obj is None:
            continue
        if inspect.getdoc(obj) is None:
            missing_docstrings.add(item.nodeid)

    if missing_docstrings:
        missing_lines = "\n".join(
            f"- {nodeid}" for nodeid in sorted(missing_docstrings)
        )
        raise pytest.UsageError(
            "Every collected test function must include a docstring.\n"
            f"Missing docstrings:\n{missing_lines}"
        )
