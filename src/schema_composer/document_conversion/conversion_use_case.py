"""Document validation and conversion use-case service."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from schema_composer.configuration import ConfigurationError, load_configuration
from schema_composer.schema_model import Components, Schema
from schema_composer.serialization import (
    CodecConfig,
    SchemaCodecError,
    decode_components,
    decode_schema,
    detect_format,
    dumps,
    encode_components,
    encode_schema,
    loads,
)

from .conversion_contracts import ConversionRequest, DocumentKind, LoadedDocument


class ConversionError(Exception):
    """Raised when a document cannot be validated or converted."""


def load_document(request: ConversionRequest) -> LoadedDocument:
    """Read, parse and decode the requested document."""
    codec = resolve_codec_config(request)
    return _decode_file(request.input_path, request.kind, codec)


def convert_document(request: ConversionRequest) -> str:
    """Decode the requested document and render it again in the configured format."""
    codec = resolve_codec_config(request)
    loaded = _decode_file(request.input_path, request.kind, codec)
    try:
        return dumps(_encode_root(loaded.root), codec)
    except SchemaCodecError as exc:
        raise ConversionError(str(exc)) from exc


def resolve_codec_config(request: ConversionRequest) -> CodecConfig:
    """Merge the configuration file settings with per-request overrides."""
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise ConversionError(str(exc)) from exc
    codec = configuration.codec
    if request.output_format is not None:
        codec = replace(codec, output_format=request.output_format)
    if request.strict_references:
        codec = replace(codec, strict_references=True)
    return codec


def _decode_file(input_path: str, kind: DocumentKind, codec: CodecConfig) -> LoadedDocument:
    path = Path(input_path)
    if not path.exists():
        raise ConversionError(f"Input document not found: {path}")
    source_format = detect_format(path)
    try:
        parsed = loads(path.read_text(encoding="utf-8"), source_format)
        root: Schema | Components = (
            decode_components(parsed, codec)
            if kind == DocumentKind.COMPONENTS
            else decode_schema(parsed, codec)
        )
    except (SchemaCodecError, OSError) as exc:
        raise ConversionError(str(exc)) from exc
    return LoadedDocument(kind=kind, source_format=source_format, root=root)


def _encode_root(root: Schema | Components) -> dict[str, Any]:
    if isinstance(root, Components):
        return encode_components(root)
    return encode_schema(root)
