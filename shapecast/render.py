from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .nodes import ProjectedContainer


def render_container(container: "ProjectedContainer", *, indent: str = "  ") -> str:
    """Render one projected container as an exported interface declaration."""
    lines: list[str] = []
    if container.description:
        lines.append(f"/** {container.description} */")
    if not container.members:
        lines.append(f"export interface {container.name} {{}}")
        return "\n".join(lines)
    lines.append(f"export interface {container.name} {{")
    lines.extend(f"{indent}{member.to_typescript()};" for member in container.members)
    lines.append("}")
    return "\n".join(lines)


def render_model(
    containers: "Iterable[ProjectedContainer]", *, indent: str = "  "
) -> str:
    rendered = [render_container(container, indent=indent) for container in containers]
    return "\n\n".join(rendered) + "\n"
