"""Schema builder tests."""

from __future__ import annotations

import pytest
from schema_composer.reference_resolution import InvalidArgumentError
from schema_composer.schema_building import (
    CompositionBuilder,
    ExamplesBuilder,
    SchemaBuilder,
    build_schema,
    inline_schema,
)
from schema_composer.schema_model import (
    Discriminator,
    Example,
    Inline,
    Pointer,
    Schema,
    SchemaFormat,
    SchemaType,
)


class Dog:
    pass


class Cat:
    pass


def _string_schema(builder: SchemaBuilder) -> None:
    builder.type = SchemaType.STRING


def test_empty_builder_produces_empty_schema() -> None:
    assert SchemaBuilder().build() == Schema()


def test_property_adds_typed_child_and_required_entry() -> None:
    builder = SchemaBuilder()
    builder.type = SchemaType.OBJECT

    def _email(child: SchemaBuilder) -> None:
        child.format = SchemaFormat.EMAIL
        child.description = "Contact address"

    builder.property("id", SchemaType.INTEGER, required=True)
    builder.property("email", SchemaType.STRING, build_fn=_email)
    builder.property("id", SchemaType.INTEGER, required=True)

    schema = builder.build()

    assert schema.type is SchemaType.OBJECT
    assert schema.required == ("id",)
    assert schema.properties == {
        "id": Schema(type=SchemaType.INTEGER),
        "email": Schema(
            type=SchemaType.STRING,
            format=SchemaFormat.EMAIL,
            description="Contact address",
        ),
    }


def test_property_name_must_not_be_empty() -> None:
    with pytest.raises(InvalidArgumentError):
        SchemaBuilder().property("", SchemaType.STRING)


def test_items_enum_and_examples_are_collected() -> None:
    builder = SchemaBuilder()
    builder.type = SchemaType.ARRAY
    builder.items(_string_schema)
    builder.enum("a", "b")
    builder.example(["a"])

    def _examples(examples: ExamplesBuilder) -> None:
        examples.example("both", ["a", "b"], summary="Both letters")

    builder.examples(_examples)

    schema = builder.build()

    assert schema.items == Schema(type=SchemaType.STRING)
    assert schema.enum_values == ("a", "b")
    assert schema.example == ["a"]
    assert schema.examples == {"both": Example(summary="Both letters", value=["a", "b"])}


def test_set_one_of_resolves_strings_and_types_in_order() -> None:
    builder = SchemaBuilder()
    builder.set_one_of(Dog, "#/components/schemas/Bird", Cat)

    assert builder.build().one_of == (
        Pointer("#/components/schemas/Dog"),
        Pointer("#/components/schemas/Bird"),
        Pointer("#/components/schemas/Cat"),
    )


def test_set_replaces_previous_value_instead_of_merging() -> None:
    builder = SchemaBuilder()
    builder.set_any_of(Dog, Cat)
    builder.set_any_of("#/components/schemas/Fish")

    assert builder.build().any_of == (Pointer("#/components/schemas/Fish"),)


def test_set_with_no_identifiers_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="allOf requires at least one schema"):
        SchemaBuilder().set_all_of()


def test_block_mode_preserves_mixed_call_order() -> None:
    builder = SchemaBuilder()

    def _members(composition: CompositionBuilder) -> None:
        composition.reference("#/components/schemas/A")
        composition.inline(_string_schema)
        composition.reference(Dog)

    builder.one_of(_members)

    assert builder.build().one_of == (
        Pointer("#/components/schemas/A"),
        Inline(Schema(type=SchemaType.STRING)),
        Pointer("#/components/schemas/Dog"),
    )


def test_block_mode_replaces_earlier_set_value() -> None:
    builder = SchemaBuilder()
    builder.set_all_of(Dog)

    def _members(composition: CompositionBuilder) -> None:
        composition.reference(Cat)

    builder.all_of(_members)

    assert builder.build().all_of == (Pointer("#/components/schemas/Cat"),)


def test_empty_block_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="oneOf requires at least one schema"):
        SchemaBuilder().one_of(lambda composition: None)


def test_reference_in_block_rejects_blank_identifier() -> None:
    def _members(composition: CompositionBuilder) -> None:
        composition.reference("")

    with pytest.raises(InvalidArgumentError):
        SchemaBuilder().any_of(_members)


def test_not_stores_single_reference() -> None:
    builder = SchemaBuilder()
    builder.not_(Dog)
    assert builder.build().not_ == Pointer("#/components/schemas/Dog")

    builder.not_inline(_string_schema)
    assert builder.build().not_ == Inline(Schema(type=SchemaType.STRING))


def test_discriminator_without_mappings_has_no_mapping() -> None:
    builder = SchemaBuilder()
    builder.discriminator("kind")

    assert builder.build().discriminator == Discriminator(property_name="kind", mapping=None)


def test_composition_keywords_absent_when_never_set() -> None:
    schema = build_schema(_string_schema)

    assert schema.one_of is None
    assert schema.all_of is None
    assert schema.any_of is None
    assert schema.not_ is None
    assert schema.discriminator is None


def test_set_references_installs_prebuilt_tuple() -> None:
    builder = SchemaBuilder()
    references = (Pointer("#/a"), inline_schema(_string_schema))

    builder.set_one_of_references(references)

    assert builder.build().one_of == references


def test_built_schema_is_a_snapshot() -> None:
    builder = SchemaBuilder()
    builder.property("a", SchemaType.STRING)
    first = builder.build()

    builder.property("b", SchemaType.STRING)

    assert first.properties is not None
    assert list(first.properties) == ["a"]


def test_enum_and_example_values_are_stored_json_shaped() -> None:
    builder = SchemaBuilder()
    builder.enum((1, 2), SchemaType.STRING, "x")
    builder.example({"sizes": (1, 2), "kind": SchemaType.OBJECT})

    schema = builder.build()

    assert schema.enum_values == ([1, 2], "string", "x")
    assert schema.example == {"sizes": [1, 2], "kind": "object"}


def test_inline_member_must_not_set_ref() -> None:
    def _with_ref(schema: SchemaBuilder) -> None:
        schema.ref = "#/components/schemas/Dog"
        schema.description = "A dog"

    def _members(composition: CompositionBuilder) -> None:
        composition.inline(_with_ref)

    with pytest.raises(InvalidArgumentError, match="must not set ref"):
        SchemaBuilder().one_of(_members)
    with pytest.raises(InvalidArgumentError, match="must not set ref"):
        SchemaBuilder().not_inline(_with_ref)


def test_top_level_ref_is_kept_by_build() -> None:
    builder = SchemaBuilder()
    builder.ref = "#/components/schemas/Dog"

    assert builder.build().ref == "#/components/schemas/Dog"
