"""Schema document encoding and decoding service.

Encoding turns the schema model into plain JSON-compatible dicts and lists;
decoding validates such a document and rebuilds the model. Fields holding
None are omitted at every level. A pointer is written as a lone `$ref`
object and an inline schema as its own fields, with no wrapper key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar, assert_never

from schema_composer.schema_model import (
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

from .codec_settings import DEFAULT_CODEC_CONFIG, CodecConfig

_LOGGER = logging.getLogger(__name__)

REF_KEY = "$ref"

_SCHEMA_KEYS = frozenset(
    {
        "type",
        "format",
        "properties",
        "required",
        "items",
        REF_KEY,
        "enum",
        "oneOf",
        "allOf",
        "anyOf",
        "not",
        "discriminator",
        "description",
        "example",
        "examples",
    }
)

_EnumT = TypeVar("_EnumT", bound=Enum)
_T = TypeVar("_T")


class SchemaCodecError(Exception):
    """Raised when a schema document cannot be read or written."""


class DecodeError(SchemaCodecError):
    """Raised when a document node does not have the expected shape."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def encode_schema(schema: Schema) -> dict[str, Any]:
    """Encode a schema into a JSON-compatible mapping."""
    document: dict[str, Any] = {}
    _put(document, "type", _enum_value(schema.type))
    _put(document, "format", _enum_value(schema.format))
    if schema.properties is not None:
        document["properties"] = {
            name: encode_schema(child) for name, child in schema.properties.items()
        }
    if schema.required is not None:
        document["required"] = list(schema.required)
    if schema.items is not None:
        document["items"] = encode_schema(schema.items)
    _put(document, REF_KEY, schema.ref)
    if schema.enum_values is not None:
        document["enum"] = [_json_value(value) for value in schema.enum_values]
    for key, members in (
        ("oneOf", schema.one_of),
        ("allOf", schema.all_of),
        ("anyOf", schema.any_of),
    ):
        if members is not None:
            document[key] = [encode_reference(member) for member in members]
    if schema.not_ is not None:
        document["not"] = encode_reference(schema.not_)
    if schema.discriminator is not None:
        document["discriminator"] = encode_discriminator(schema.discriminator)
    _put(document, "description", schema.description)
    if schema.example is not None:
        document["example"] = _json_value(schema.example)
    if schema.examples is not None:
        document["examples"] = {
            name: encode_example(example) for name, example in schema.examples.items()
        }
    return document


def encode_reference(reference: SchemaReference) -> dict[str, Any]:
    """Encode a pointer as `{"$ref": ...}` and an inline schema as its own fields."""
    if isinstance(reference, Pointer):
        return {REF_KEY: reference.path}
    if isinstance(reference, Inline):
        return encode_schema(reference.schema)
    assert_never(reference)


def encode_discriminator(discriminator: Discriminator) -> dict[str, Any]:
    document: dict[str, Any] = {"propertyName": discriminator.property_name}
    if discriminator.mapping is not None:
        document["mapping"] = dict(discriminator.mapping)
    return document


def encode_example(example: Example) -> dict[str, Any]:
    document: dict[str, Any] = {}
    _put(document, "summary", example.summary)
    _put(document, "description", example.description)
    if example.value is not None:
        document["value"] = _json_value(example.value)
    _put(document, "externalValue", example.external_value)
    return document


def encode_components(components: Components) -> dict[str, Any]:
    document: dict[str, Any] = {}
    if components.schemas is not None:
        document["schemas"] = {
            name: encode_schema(schema) for name, schema in components.schemas.items()
        }
    if components.examples is not None:
        document["examples"] = {
            name: encode_example(example) for name, example in components.examples.items()
        }
    return document


def decode_schema(
    document: Any, config: CodecConfig | None = None, *, path: str = "$"
) -> Schema:
    """Decode a JSON-compatible mapping into a schema.

    Raises:
      DecodeError: If any known field has the wrong shape.
    """
    settings = config or DEFAULT_CODEC_CONFIG
    node = _require_object(document, path)
    unknown_keys = sorted(str(key) for key in node if key not in _SCHEMA_KEYS)
    if unknown_keys:
        _LOGGER.debug("Ignoring unknown schema keys at %s: %s", path, ", ".join(unknown_keys))

    return Schema(
        type=_optional(node, "type", path, lambda value, at: _enum(SchemaType, value, at)),
        format=_optional(node, "format", path, lambda value, at: _enum(SchemaFormat, value, at)),
        properties=_optional(
            node,
            "properties",
            path,
            lambda value, at: _mapping_of(
                value, at, lambda child, child_at: decode_schema(child, settings, path=child_at)
            ),
        ),
        required=_optional(node, "required", path, _string_tuple),
        items=_optional(
            node, "items", path, lambda value, at: decode_schema(value, settings, path=at)
        ),
        ref=_optional(node, REF_KEY, path, _string),
        enum_values=_optional(node, "enum", path, lambda value, at: tuple(_array(value, at))),
        one_of=_optional(node, "oneOf", path, _composition_decoder(settings)),
        all_of=_optional(node, "allOf", path, _composition_decoder(settings)),
        any_of=_optional(node, "anyOf", path, _composition_decoder(settings)),
        not_=_optional(
            node, "not", path, lambda value, at: decode_reference(value, settings, path=at)
        ),
        discriminator=_optional(node, "discriminator", path, _decode_discriminator_at),
        description=_optional(node, "description", path, _string),
        example=node.get("example"),
        examples=_optional(
            node,
            "examples",
            path,
            lambda value, at: _mapping_of(value, at, _decode_example_at),
        ),
    )


def decode_reference(
    document: Any, config: CodecConfig | None = None, *, path: str = "$"
) -> SchemaReference:
    """Decode a composition member.

    Any object carrying `$ref` is a pointer. Sibling keys are dropped with a
    warning, or rejected when `config.strict_references` is set.
    """
    settings = config or DEFAULT_CODEC_CONFIG
    node = _require_object(document, path)
    if REF_KEY not in node:
        return Inline(decode_schema(node, settings, path=path))

    ref_path = _string(node[REF_KEY], f"{path}.{REF_KEY}")
    siblings = sorted(str(key) for key in node if key != REF_KEY)
    if siblings:
        if settings.strict_references:
            raise DecodeError(
                path, f"expected only '{REF_KEY}' in a reference object, found {siblings}"
            )
        _LOGGER.warning(
            "Dropping keys %s next to %s at %s", ", ".join(siblings), REF_KEY, path
        )
    return Pointer(ref_path)


def decode_discriminator(document: Any, *, path: str = "$") -> Discriminator:
    node = _require_object(document, path)
    if "propertyName" not in node:
        raise DecodeError(path, "missing required field 'propertyName'")
    return Discriminator(
        property_name=_string(node["propertyName"], f"{path}.propertyName"),
        mapping=_optional(
            node, "mapping", path, lambda value, at: _mapping_of(value, at, _string)
        ),
    )


def decode_example(document: Any, *, path: str = "$") -> Example:
    node = _require_object(document, path)
    return Example(
        summary=_optional(node, "summary", path, _string),
        description=_optional(node, "description", path, _string),
        value=node.get("value"),
        external_value=_optional(node, "externalValue", path, _string),
    )


def decode_components(
    document: Any, config: CodecConfig | None = None, *, path: str = "$"
) -> Components:
    settings = config or DEFAULT_CODEC_CONFIG
    node = _require_object(document, path)
    return Components(
        schemas=_optional(
            node,
            "schemas",
            path,
            lambda value, at: _mapping_of(
                value, at, lambda child, child_at: decode_schema(child, settings, path=child_at)
            ),
        ),
        examples=_optional(
            node,
            "examples",
            path,
            lambda value, at: _mapping_of(value, at, _decode_example_at),
        ),
    )


def _decode_discriminator_at(value: Any, path: str) -> Discriminator:
    return decode_discriminator(value, path=path)


def _decode_example_at(value: Any, path: str) -> Example:
    return decode_example(value, path=path)


def _composition_decoder(
    settings: CodecConfig,
) -> Callable[[Any, str], tuple[SchemaReference, ...]]:
    def _decode(value: Any, path: str) -> tuple[SchemaReference, ...]:
        members = _array(value, path)
        if not members:
            raise DecodeError(path, "expected a non-empty array of schemas")
        return tuple(
            decode_reference(member, settings, path=f"{path}[{index}]")
            for index, member in enumerate(members)
        )

    return _decode


def _optional(
    node: Mapping[str, Any],
    key: str,
    path: str,
    decoder: Callable[[Any, str], _T],
) -> _T | None:
    value = node.get(key)
    if value is None:
        return None
    return decoder(value, f"{path}.{key}")


def _require_object(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(path, f"expected an object, got {_json_type(value)}")
    return value


def _array(value: Any, path: str) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise DecodeError(path, f"expected an array, got {_json_type(value)}")
    return list(value)


def _string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(path, f"expected a string, got {_json_type(value)}")
    return value


def _string_tuple(value: Any, path: str) -> tuple[str, ...]:
    return tuple(
        _string(item, f"{path}[{index}]") for index, item in enumerate(_array(value, path))
    )


def _mapping_of(
    value: Any, path: str, decoder: Callable[[Any, str], _T]
) -> dict[str, _T]:
    node = _require_object(value, path)
    decoded: dict[str, _T] = {}
    for key, child in node.items():
        if not isinstance(key, str):
            raise DecodeError(path, f"expected string keys, got {_json_type(key)}")
        decoded[key] = decoder(child, f"{path}.{key}")
    return decoded


def _enum(enum_cls: type[_EnumT], value: Any, path: str) -> _EnumT:
    allowed = ", ".join(member.value for member in enum_cls)
    if not isinstance(value, str):
        raise DecodeError(path, f"expected one of {allowed}, got {_json_type(value)}")
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise DecodeError(path, f"expected one of {allowed}, got '{value}'") from exc


def _enum_value(value: Enum | None) -> Any:
    return value.value if value is not None else None


def _put(document: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        document[key] = value


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _json_value(child) for key, child in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_value(child) for child in value]
    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__
