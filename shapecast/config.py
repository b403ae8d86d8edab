import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class ModelDefaults:
    """Nullability assumed for declarations that carry no explicit annotation.

    Model-language elements are nullable unless declared otherwise, while the
    elements of an inline array are not.
    """

    scalar_nullable: bool = True
    array_nullable: bool = True
    struct_nullable: bool = True
    element_nullable: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class ProjectionOptions:
    """Switches that alter how the projector decorates members.

    ``entity_array_null_union`` makes nullable array properties of entities
    emit ``| null`` like every other nullable entity property. It is off by
    default, in which case entity arrays are always emitted without it.
    """

    entity_array_null_union: bool = False


DEFAULT_DEFAULTS = ModelDefaults()
DEFAULT_OPTIONS = ProjectionOptions()
