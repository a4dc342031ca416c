"""Schema model exports."""

from .schema_entities import (
    Components,
    Discriminator,
    Example,
    Inline,
    Pointer,
    Schema,
    SchemaFormat,
    SchemaReference,
    SchemaType,
)

__all__ = [
    "Components",
    "Discriminator",
    "Example",
    "Inline",
    "Pointer",
    "Schema",
    "SchemaFormat",
    "SchemaReference",
    "SchemaType",
]
