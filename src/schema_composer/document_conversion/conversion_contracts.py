"""Document conversion entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from schema_composer.schema_model import Components, Schema
from schema_composer.serialization import OutputFormat


class DocumentKind(str, Enum):
    """Root object kind of a schema document file."""

    SCHEMA = "schema"
    COMPONENTS = "components"


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for reading and re-rendering one document."""

    input_path: str
    kind: DocumentKind = DocumentKind.SCHEMA
    config_path: str | None = None
    output_format: OutputFormat | None = None
    strict_references: bool = False


@dataclass(frozen=True)
class LoadedDocument:
    """Decoded document together with the format it was read from."""

    kind: DocumentKind
    source_format: OutputFormat
    root: Schema | Components
