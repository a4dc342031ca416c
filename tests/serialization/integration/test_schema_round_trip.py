"""Round-trip tests over schemas built with the composition API."""

from __future__ import annotations

import pytest
from schema_composer.components_registry import ComponentsBuilder
from schema_composer.schema_building import (
    CompositionBuilder,
    SchemaBuilder,
    discriminated_union,
    extending,
    nullable,
)
from schema_composer.schema_model import Schema, SchemaFormat, SchemaType
from schema_composer.serialization import (
    CodecConfig,
    OutputFormat,
    decode_components,
    decode_schema,
    dumps,
    encode_components,
    encode_schema,
    loads,
)


class Pet:
    pass


class Dog:
    pass


class Cat:
    pass


def _pet(builder: SchemaBuilder) -> None:
    builder.type = SchemaType.OBJECT
    builder.description = "Base pet"
    builder.property("name", SchemaType.STRING, required=True)
    builder.property(
        "tags",
        SchemaType.ARRAY,
        build_fn=lambda tags: tags.items(lambda item: setattr(item, "type", SchemaType.STRING)),
    )


def _dog(builder: SchemaBuilder) -> None:
    def _extra(dog: SchemaBuilder) -> None:
        dog.property("barks", SchemaType.BOOLEAN)
        dog.property("born", SchemaType.STRING, build_fn=_date_time)

    extending(builder, Pet, build_fn=_extra)


def _date_time(builder: SchemaBuilder) -> None:
    builder.format = SchemaFormat.DATE_TIME


def _cat(builder: SchemaBuilder) -> None:
    builder.set_all_of(Pet)
    builder.not_(Dog)

    def _lives(lives: SchemaBuilder) -> None:
        nullable(lives, lambda inner: setattr(inner, "type", SchemaType.INTEGER))

    builder.property("lives", SchemaType.INTEGER, build_fn=_lives)


def _animal(builder: SchemaBuilder) -> None:
    discriminated_union(builder, "petType", ("dog", Dog), ("cat", Cat))
    builder.example({"petType": "dog", "name": "Rex", "barks": True})


def _mixed(builder: SchemaBuilder) -> None:
    def _members(composition: CompositionBuilder) -> None:
        composition.reference("#/components/schemas/Pet")
        composition.inline(_size)
        composition.reference(Cat)

    builder.any_of(_members)
    builder.not_inline(lambda inner: setattr(inner, "type", SchemaType.NULL))
    builder.discriminator("kind", lambda discriminator: discriminator.mapping("pet", Pet))


def _size(builder: SchemaBuilder) -> None:
    builder.type = SchemaType.STRING
    builder.enum("small", "medium", "large")


_BUILDERS = {"Pet": _pet, "Dog": _dog, "Cat": _cat, "Animal": _animal, "Mixed": _mixed}


def _schema(name: str) -> Schema:
    builder = SchemaBuilder()
    _BUILDERS[name](builder)
    return builder.build()


@pytest.mark.parametrize("name", sorted(_BUILDERS))
def test_decode_of_encoded_schema_is_identity(name: str) -> None:
    schema = _schema(name)

    assert decode_schema(encode_schema(schema)) == schema


@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_components_survive_text_round_trip(output_format: OutputFormat) -> None:
    components_builder = ComponentsBuilder()
    for name, build_fn in _BUILDERS.items():
        components_builder.schema(name, build_fn)
    components_builder.example("rex", {"name": "Rex"}, summary="A dog")
    components = components_builder.build()
    config = CodecConfig(output_format=output_format)

    text = dumps(encode_components(components), config)
    restored = decode_components(loads(text, output_format), config)

    assert restored == components


def test_strict_decoding_accepts_documents_built_by_the_api() -> None:
    schema = _schema("Mixed")

    assert decode_schema(encode_schema(schema), CodecConfig(strict_references=True)) == schema


def test_builder_normalized_values_survive_round_trip() -> None:
    builder = SchemaBuilder()
    builder.type = SchemaType.ARRAY
    builder.enum((1, 2), SchemaType.STRING)
    builder.example(((1, 2),))
    schema = builder.build()

    assert decode_schema(encode_schema(schema)) == schema
