"""Components registry exports."""

from .components_builder import ComponentsBuilder, SchemaDeriver

__all__ = [
    "ComponentsBuilder",
    "SchemaDeriver",
]
