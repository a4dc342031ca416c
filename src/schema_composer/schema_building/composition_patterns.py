"""Common schema composition patterns built on `SchemaBuilder`."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeAlias

from schema_composer.reference_resolution import (
    InvalidArgumentError,
    ReferenceIdentifier,
    schema_ref,
)
from schema_composer.schema_model import SchemaReference, SchemaType

from .discriminator_builder import DiscriminatorBuilder
from .schema_builder import CompositionBuilder, CompositionKeyword, SchemaBuilder

ReferenceChain: TypeAlias = SchemaReference | tuple[SchemaReference, ...]


def extending(
    builder: SchemaBuilder,
    *bases: ReferenceIdentifier,
    build_fn: Callable[[SchemaBuilder], None] | None = None,
) -> None:
    """Extend one or more base schemas through `allOf`.

    Pointers to `bases` are appended after any `allOf` members already on the
    builder. `build_fn` is applied to the same builder, so properties it adds
    sit beside `allOf` rather than inside it.
    """
    if not bases:
        raise InvalidArgumentError("extending requires at least one base schema.")
    current = builder.composition(CompositionKeyword.ALL_OF) or ()
    builder.set_composition(
        CompositionKeyword.ALL_OF,
        current + tuple(schema_ref(base) for base in bases),
    )
    if build_fn is not None:
        build_fn(builder)


def discriminated_union(
    builder: SchemaBuilder,
    property_name: str,
    *pairs: tuple[str, ReferenceIdentifier],
) -> None:
    """Set `oneOf` and a matching discriminator from (value, schema) pairs."""
    if not pairs:
        raise InvalidArgumentError("discriminated_union requires at least one mapping.")
    builder.set_one_of(*(identifier for _, identifier in pairs))

    def _mappings(discriminator: DiscriminatorBuilder) -> None:
        for value, identifier in pairs:
            discriminator.mapping(value, identifier)

    builder.discriminator(property_name, _mappings)


def one_of_types(
    builder: SchemaBuilder,
    *types: type,
    discriminator_property: str | None = None,
    discriminator_mappings: Mapping[str, type] | None = None,
) -> None:
    """Set `oneOf` to the given types with an optional discriminator."""
    builder.set_one_of(*types)
    if discriminator_property is None:
        return

    def _mappings(discriminator: DiscriminatorBuilder) -> None:
        for value, mapped_type in (discriminator_mappings or {}).items():
            discriminator.mapping(value, mapped_type)

    builder.discriminator(discriminator_property, _mappings)


def all_of_types(
    builder: SchemaBuilder,
    *types: type,
    build_fn: Callable[[SchemaBuilder], None] | None = None,
) -> None:
    """Set `allOf` to the given types, followed by an inline object built by `build_fn`."""

    def _members(composition: CompositionBuilder) -> None:
        for member in types:
            composition.reference(member)
        if build_fn is not None:
            composition.inline(_object_schema(build_fn))

    builder.all_of(_members)


def nullable(builder: SchemaBuilder, build_fn: Callable[[SchemaBuilder], None]) -> None:
    """Accept either the schema built by `build_fn` or null."""

    def _members(composition: CompositionBuilder) -> None:
        composition.inline(build_fn)
        composition.inline(_null_schema)

    builder.any_of(_members)


def optional_schema(builder: SchemaBuilder, identifier: ReferenceIdentifier) -> None:
    """Accept either the referenced schema or null."""

    def _members(composition: CompositionBuilder) -> None:
        composition.reference(identifier)
        composition.inline(_null_schema)

    builder.any_of(_members)


def choice(builder: SchemaBuilder, build_fn: Callable[[CompositionBuilder], None]) -> None:
    builder.one_of(build_fn)


def combine(builder: SchemaBuilder, build_fn: Callable[[CompositionBuilder], None]) -> None:
    builder.all_of(build_fn)


def or_else(left: ReferenceChain, right: SchemaReference) -> tuple[SchemaReference, ...]:
    """Chain schema alternatives for `oneOf`/`anyOf`."""
    return _chain(left, right)


def combined_with(left: ReferenceChain, right: SchemaReference) -> tuple[SchemaReference, ...]:
    """Chain schemas that must all apply, for `allOf`."""
    return _chain(left, right)


def _chain(left: ReferenceChain, right: SchemaReference) -> tuple[SchemaReference, ...]:
    head = left if isinstance(left, tuple) else (left,)
    return head + (right,)


def _null_schema(builder: SchemaBuilder) -> None:
    builder.type = SchemaType.NULL


def _object_schema(
    build_fn: Callable[[SchemaBuilder], None],
) -> Callable[[SchemaBuilder], None]:
    def _apply(builder: SchemaBuilder) -> None:
        builder.type = SchemaType.OBJECT
        build_fn(builder)

    return _apply
