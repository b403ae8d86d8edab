import logging
from typing import TYPE_CHECKING

from .annotations import build_container
from .config import DEFAULT_DEFAULTS, DEFAULT_OPTIONS
from .errors import duplicate_container, model_requires_declarations, unknown_container
from .metadata import ModelContainer
from .projector import project_model
from .render import render_model

if TYPE_CHECKING:
    from builtins import type as pytype

    from .config import ModelDefaults, ProjectionOptions
    from .nodes import MemberNode, ProjectedContainer

logger = logging.getLogger(__name__)


class Model:
    """A set of type and entity declarations together with their projection.

    Declarations may be classes decorated with ``@shapecast.type`` or
    ``@shapecast.entity``, or ready-made ``ModelContainer`` instances.
    """

    def __init__(
        self,
        *declarations: "pytype | ModelContainer",
        options: "ProjectionOptions" = DEFAULT_OPTIONS,
        defaults: "ModelDefaults" = DEFAULT_DEFAULTS,
    ) -> None:
        if not declarations:
            raise model_requires_declarations()
        containers: list[ModelContainer] = []
        seen: set[str] = set()
        for declaration in declarations:
            if isinstance(declaration, ModelContainer):
                container = declaration
            else:
                container = build_container(declaration, defaults=defaults)
            if container.name in seen:
                raise duplicate_container(container.name)
            seen.add(container.name)
            containers.append(container)
        self._options = options
        self._containers = tuple(containers)
        self._projected = project_model(self._containers, options=options)
        self._by_name = {projected.name: projected for projected in self._projected}
        logger.debug("Built model with %d containers", len(self._containers))

    @property
    def containers(self) -> tuple[ModelContainer, ...]:
        return self._containers

    @property
    def projected(self) -> "tuple[ProjectedContainer, ...]":
        return self._projected

    @property
    def options(self) -> "ProjectionOptions":
        return self._options

    def container(self, name: str) -> "ProjectedContainer":
        try:
            return self._by_name[name]
        except KeyError:
            raise unknown_container(name) from None

    def members(self, name: str) -> "tuple[MemberNode, ...]":
        return self.container(name).members

    def member(self, container: str, name: str) -> "MemberNode":
        return self.container(container).member(name)

    def render(self) -> str:
        return render_model(self._projected)

    def __repr__(self) -> str:
        names = ", ".join(container.name for container in self._containers)
        return f"Model({names})"
