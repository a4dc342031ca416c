"""Serialization settings entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Text formats a schema document can be written in."""

    JSON = "json"
    YAML = "yaml"


@dataclass(frozen=True)
class CodecConfig:
    """Explicit encoder/decoder settings.

    `indent` of None or 0 writes compact JSON; YAML always uses block style.
    With `strict_references` an object carrying `$ref` next to other keys is
    rejected instead of being read as a plain pointer.
    """

    output_format: OutputFormat = OutputFormat.JSON
    indent: int | None = 2
    strict_references: bool = False
    yaml_width: int = 80


DEFAULT_CODEC_CONFIG = CodecConfig()
