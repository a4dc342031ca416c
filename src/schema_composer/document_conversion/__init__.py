"""Document conversion domain exports."""

from .conversion_contracts import ConversionRequest, DocumentKind, LoadedDocument
from .conversion_use_case import (
    ConversionError,
    convert_document,
    load_document,
    resolve_codec_config,
)

__all__ = [
    "ConversionRequest",
    "DocumentKind",
    "LoadedDocument",
    "ConversionError",
    "convert_document",
    "load_document",
    "resolve_codec_config",
]
