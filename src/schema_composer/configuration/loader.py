"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_composer.serialization import DEFAULT_CODEC_CONFIG, CodecConfig, OutputFormat

from .runtime_settings import ToolConfiguration

_LOGGER = logging.getLogger(__name__)

_MAX_INDENT = 9


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> ToolConfiguration:
    """Load and validate the configuration file; None yields the defaults."""
    if config_path is None:
        return ToolConfiguration(path=None)

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    output = _optional_mapping(parsed.get("output"), "output")
    decoding = _optional_mapping(parsed.get("decoding"), "decoding")

    codec = CodecConfig(
        output_format=_parse_output_format(
            output.get("format", DEFAULT_CODEC_CONFIG.output_format.value)
        ),
        indent=_parse_indent(output.get("indent", DEFAULT_CODEC_CONFIG.indent)),
        strict_references=_require_bool(
            decoding.get("strict_references", DEFAULT_CODEC_CONFIG.strict_references),
            "decoding.strict_references",
        ),
        yaml_width=_require_positive_int(
            output.get("yaml_width", DEFAULT_CODEC_CONFIG.yaml_width), "output.yaml_width"
        ),
    )
    _LOGGER.debug("Loaded configuration from %s", path)
    return ToolConfiguration(path=path, codec=codec)


def _parse_output_format(value: Any) -> OutputFormat:
    if not isinstance(value, str):
        raise ConfigurationError("output.format must be a string.")
    normalized = value.strip().lower()
    try:
        return OutputFormat(normalized)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in OutputFormat)
        raise ConfigurationError(f"output.format must be one of: {allowed}.") from exc


def _parse_indent(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError("output.indent must be an integer.")
    if value < 0 or value > _MAX_INDENT:
        raise ConfigurationError(f"output.indent must be between 0 and {_MAX_INDENT}.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
