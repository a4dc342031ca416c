"""Schema construction service."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from schema_composer.reference_resolution import (
    InvalidArgumentError,
    ReferenceIdentifier,
    schema_ref,
)
from schema_composer.schema_model import (
    Discriminator,
    Example,
    Inline,
    Schema,
    SchemaFormat,
    SchemaReference,
    SchemaType,
)

from .discriminator_builder import DiscriminatorBuilder


class CompositionKeyword(str, Enum):
    """Boolean composition keywords holding a list of schemas."""

    ONE_OF = "oneOf"
    ALL_OF = "allOf"
    ANY_OF = "anyOf"


class CompositionBuilder:
    """Ordered collector for the members of one composition keyword."""

    def __init__(self, keyword: CompositionKeyword) -> None:
        self._keyword = keyword
        self._schemas: list[SchemaReference] = []

    def reference(self, identifier: ReferenceIdentifier) -> None:
        """Append a pointer to a schema defined elsewhere."""
        self._schemas.append(schema_ref(identifier))

    def inline(self, build_fn: Callable[[SchemaBuilder], None]) -> None:
        """Append a schema built in place by `build_fn`."""
        self._schemas.append(inline_schema(build_fn))

    def build(self) -> tuple[SchemaReference, ...]:
        if not self._schemas:
            raise InvalidArgumentError(f"{self._keyword.value} requires at least one schema.")
        return tuple(self._schemas)


class ExamplesBuilder:
    """Collector for named examples."""

    def __init__(self) -> None:
        self._examples: dict[str, Example] = {}

    def example(
        self,
        name: str,
        value: Any = None,
        *,
        summary: str | None = None,
        description: str | None = None,
        external_value: str | None = None,
    ) -> None:
        self._examples[name] = Example(
            summary=summary,
            description=description,
            value=_json_shaped(value),
            external_value=external_value,
        )

    def build(self) -> dict[str, Example]:
        return dict(self._examples)


class SchemaBuilder:  # pylint: disable=too-many-instance-attributes
    """Mutable accumulator producing one immutable `Schema`.

    Structural attributes (`type`, `format`, `description`, `ref`) are
    assigned directly. `enum` and `example` values are stored JSON-shaped
    (tuples as lists, enum members as their values). Composition keywords
    are set through the `set_*`/block methods; every call replaces the
    keyword's previous value.
    """

    def __init__(self) -> None:
        self.type: SchemaType | None = None
        self.format: SchemaFormat | None = None
        self.description: str | None = None
        self.ref: str | None = None
        self._example: Any = None
        self._properties: dict[str, Schema] = {}
        self._required: list[str] = []
        self._items: Schema | None = None
        self._enum_values: tuple[Any, ...] | None = None
        self._compositions: dict[CompositionKeyword, tuple[SchemaReference, ...]] = {}
        self._not: SchemaReference | None = None
        self._discriminator: Discriminator | None = None
        self._examples: dict[str, Example] | None = None

    def property(
        self,
        name: str,
        property_type: SchemaType,
        required: bool = False,
        build_fn: Callable[[SchemaBuilder], None] | None = None,
    ) -> None:
        """Add a property of the given type, optionally refined by `build_fn`."""
        builder = SchemaBuilder()
        builder.type = property_type
        if build_fn is not None:
            build_fn(builder)
        self.property_schema(name, builder.build(), required=required)

    def property_schema(self, name: str, schema: Schema, required: bool = False) -> None:
        """Add a property holding an already built schema."""
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Property name must not be empty.")
        self._properties[name] = schema
        if required and name not in self._required:
            self._required.append(name)

    def items(self, build_fn: Callable[[SchemaBuilder], None]) -> None:
        self._items = build_schema(build_fn)

    def enum(self, *values: Any) -> None:
        self._enum_values = tuple(_json_shaped(value) for value in values)

    def example(self, value: Any) -> None:
        self._example = _json_shaped(value)

    def examples(self, build_fn: Callable[[ExamplesBuilder], None]) -> None:
        builder = ExamplesBuilder()
        build_fn(builder)
        self._examples = builder.build()

    def set_one_of(self, *identifiers: ReferenceIdentifier) -> None:
        self._set_identifiers(CompositionKeyword.ONE_OF, identifiers)

    def set_all_of(self, *identifiers: ReferenceIdentifier) -> None:
        self._set_identifiers(CompositionKeyword.ALL_OF, identifiers)

    def set_any_of(self, *identifiers: ReferenceIdentifier) -> None:
        self._set_identifiers(CompositionKeyword.ANY_OF, identifiers)

    def one_of(self, build_fn: Callable[[CompositionBuilder], None]) -> None:
        self._set_block(CompositionKeyword.ONE_OF, build_fn)

    def all_of(self, build_fn: Callable[[CompositionBuilder], None]) -> None:
        self._set_block(CompositionKeyword.ALL_OF, build_fn)

    def any_of(self, build_fn: Callable[[CompositionBuilder], None]) -> None:
        self._set_block(CompositionKeyword.ANY_OF, build_fn)

    def set_one_of_references(self, references: Sequence[SchemaReference]) -> None:
        self.set_composition(CompositionKeyword.ONE_OF, references)

    def set_all_of_references(self, references: Sequence[SchemaReference]) -> None:
        self.set_composition(CompositionKeyword.ALL_OF, references)

    def set_any_of_references(self, references: Sequence[SchemaReference]) -> None:
        self.set_composition(CompositionKeyword.ANY_OF, references)

    def set_composition(
        self, keyword: CompositionKeyword, references: Sequence[SchemaReference]
    ) -> None:
        """Replace the member list of `keyword`."""
        if not references:
            raise InvalidArgumentError(f"{keyword.value} requires at least one schema.")
        self._compositions[keyword] = tuple(references)

    def composition(self, keyword: CompositionKeyword) -> tuple[SchemaReference, ...] | None:
        """Return the current member list of `keyword`, if set."""
        return self._compositions.get(keyword)

    def not_(self, identifier: ReferenceIdentifier) -> None:
        self._not = schema_ref(identifier)

    def not_inline(self, build_fn: Callable[[SchemaBuilder], None]) -> None:
        self._not = inline_schema(build_fn)

    def discriminator(
        self,
        property_name: str,
        build_fn: Callable[[DiscriminatorBuilder], None] | None = None,
    ) -> None:
        builder = DiscriminatorBuilder(property_name)
        if build_fn is not None:
            build_fn(builder)
        self._discriminator = builder.build()

    def build(self) -> Schema:
        return Schema(
            type=self.type,
            format=self.format,
            properties=dict(self._properties) if self._properties else None,
            required=tuple(self._required) if self._required else None,
            items=self._items,
            ref=self.ref,
            enum_values=self._enum_values,
            one_of=self._compositions.get(CompositionKeyword.ONE_OF),
            all_of=self._compositions.get(CompositionKeyword.ALL_OF),
            any_of=self._compositions.get(CompositionKeyword.ANY_OF),
            not_=self._not,
            discriminator=self._discriminator,
            description=self.description,
            example=self._example,
            examples=self._examples,
        )

    def _set_identifiers(
        self, keyword: CompositionKeyword, identifiers: Sequence[ReferenceIdentifier]
    ) -> None:
        self.set_composition(keyword, [schema_ref(identifier) for identifier in identifiers])

    def _set_block(
        self, keyword: CompositionKeyword, build_fn: Callable[[CompositionBuilder], None]
    ) -> None:
        builder = CompositionBuilder(keyword)
        build_fn(builder)
        self._compositions[keyword] = builder.build()


def build_schema(build_fn: Callable[[SchemaBuilder], None]) -> Schema:
    """Run `build_fn` against a fresh builder and return the resulting schema."""
    builder = SchemaBuilder()
    build_fn(builder)
    return builder.build()


def inline_schema(build_fn: Callable[[SchemaBuilder], None]) -> Inline:
    """Create an inline reference from a schema built by `build_fn`.

    Raises:
      InvalidArgumentError: If the built schema sets `ref`; an object holding
        `$ref` is read back as a pointer, so use a reference instead.
    """
    schema = build_schema(build_fn)
    if schema.ref is not None:
        raise InvalidArgumentError(
            f"Inline schema must not set ref ({schema.ref}); reference it instead."
        )
    return Inline(schema)


def _json_shaped(value: Any) -> Any:
    if isinstance(value, Enum):
        return _json_shaped(value.value)
    if isinstance(value, (list, tuple)):
        return [_json_shaped(item) for item in value]
    if isinstance(value, dict):
        return {key: _json_shaped(item) for key, item in value.items()}
    return value
