"""Schema building exports."""

from .composition_patterns import (
    all_of_types,
    choice,
    combine,
    combined_with,
    discriminated_union,
    extending,
    nullable,
    one_of_types,
    optional_schema,
    or_else,
)
from .discriminator_builder import DiscriminatorBuilder
from .schema_builder import (
    CompositionBuilder,
    CompositionKeyword,
    ExamplesBuilder,
    SchemaBuilder,
    build_schema,
    inline_schema,
)

__all__ = [
    "CompositionBuilder",
    "CompositionKeyword",
    "DiscriminatorBuilder",
    "ExamplesBuilder",
    "SchemaBuilder",
    "all_of_types",
    "build_schema",
    "choice",
    "combine",
    "combined_with",
    "discriminated_union",
    "extending",
    "inline_schema",
    "nullable",
    "one_of_types",
    "optional_schema",
    "or_else",
]
