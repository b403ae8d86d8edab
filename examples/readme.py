from dataclasses import dataclass

import shapecast


@dataclass
class Dimensions:
    width: shapecast.NotNull[float]
    height: float


@shapecast.type
@dataclass
class ProductDraft:
    title: shapecast.NotNull[str]
    price: float
    tags: list[str]
    size: Dimensions


@shapecast.entity
@dataclass
class Product:
    id: shapecast.NotNull[int]
    title: shapecast.Mandatory[str]
    tags: list[str]


def main() -> None:
    model = shapecast.Model(ProductDraft, Product)
    print(model.render(), end="")

    strict = shapecast.Model(
        ProductDraft,
        Product,
        options=shapecast.ProjectionOptions(entity_array_null_union=True),
        defaults=shapecast.ModelDefaults(scalar_nullable=False),
    )
    print(strict.render(), end="")


if __name__ == "__main__":
    main()
