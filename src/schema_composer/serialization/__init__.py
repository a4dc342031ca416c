"""Serialization exports."""

from .codec_settings import DEFAULT_CODEC_CONFIG, CodecConfig, OutputFormat
from .document_codec import (
    REF_KEY,
    DecodeError,
    SchemaCodecError,
    decode_components,
    decode_discriminator,
    decode_example,
    decode_reference,
    decode_schema,
    encode_components,
    encode_discriminator,
    encode_example,
    encode_reference,
    encode_schema,
)
from .document_text import detect_format, dumps, loads

__all__ = [
    "DEFAULT_CODEC_CONFIG",
    "REF_KEY",
    "CodecConfig",
    "DecodeError",
    "OutputFormat",
    "SchemaCodecError",
    "decode_components",
    "decode_discriminator",
    "decode_example",
    "decode_reference",
    "decode_schema",
    "detect_format",
    "dumps",
    "encode_components",
    "encode_discriminator",
    "encode_example",
    "encode_reference",
    "encode_schema",
    "loads",
]
