"""Schema model entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SchemaType(str, Enum):
    """JSON Schema primitive type names."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


class SchemaFormat(str, Enum):
    """Supported `format` keyword values."""

    INT32 = "int32"
    INT64 = "int64"
    DATE_TIME = "date-time"
    EMAIL = "email"
    PASSWORD = "password"
    URL = "url"


@dataclass(frozen=True)
class Example:
    """Named example attached to a schema or registered in components."""

    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None


@dataclass(frozen=True)
class Discriminator:
    """Property whose value selects the applicable `oneOf` member.

    `mapping` is None when no entries were ever added; an empty dict is a
    distinct, explicitly empty mapping.
    """

    property_name: str
    mapping: dict[str, str] | None = None


@dataclass(frozen=True)
class Schema:  # pylint: disable=too-many-instance-attributes
    """OpenAPI 3.1 Schema Object.

    Instances compare by value. A schema holding a dict field (`properties`,
    `examples`, a discriminator `mapping`) is not hashable, so compare
    schemas and inline references with `==` rather than in sets.
    """

    type: SchemaType | None = None
    format: SchemaFormat | None = None
    properties: dict[str, Schema] | None = None
    required: tuple[str, ...] | None = None
    items: Schema | None = None
    ref: str | None = None
    enum_values: tuple[Any, ...] | None = None
    one_of: tuple[SchemaReference, ...] | None = None
    all_of: tuple[SchemaReference, ...] | None = None
    any_of: tuple[SchemaReference, ...] | None = None
    not_: SchemaReference | None = None
    discriminator: Discriminator | None = None
    description: str | None = None
    example: Any = None
    examples: dict[str, Example] | None = None


@dataclass(frozen=True)
class Pointer:
    """Schema located elsewhere in the document, addressed by `$ref`."""

    path: str


@dataclass(frozen=True)
class Inline:
    """Schema embedded in place."""

    schema: Schema


SchemaReference = Pointer | Inline


@dataclass(frozen=True)
class Components:
    """Reusable named schemas and examples of a document."""

    schemas: dict[str, Schema] | None = None
    examples: dict[str, Example] | None = None
