"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_composer.serialization import DEFAULT_CODEC_CONFIG, CodecConfig


@dataclass(frozen=True)
class ToolConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None
    codec: CodecConfig = DEFAULT_CODEC_CONFIG
