"""JSON and YAML text rendering for encoded schema documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .codec_settings import DEFAULT_CODEC_CONFIG, CodecConfig, OutputFormat
from .document_codec import SchemaCodecError

_YAML_SUFFIXES = (".yaml", ".yml")
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _DocumentLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe loader that keeps unquoted dates and timestamps as strings."""


_DocumentLoader.yaml_implicit_resolvers = {
    first_char: [(tag, pattern) for tag, pattern in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def dumps(document: Any, config: CodecConfig | None = None) -> str:
    """Render an encoded document in the configured output format.

    Raises:
      SchemaCodecError: If the document holds values the format cannot represent.
    """
    settings = config or DEFAULT_CODEC_CONFIG
    if settings.output_format == OutputFormat.YAML:
        try:
            return yaml.safe_dump(
                document,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
                indent=_yaml_indent(settings.indent),
                width=settings.yaml_width,
            )
        except yaml.YAMLError as exc:
            raise SchemaCodecError(f"Cannot render document as YAML: {exc}") from exc
    indent = settings.indent or None
    separators = None if indent else (",", ":")
    try:
        text = json.dumps(document, indent=indent, separators=separators, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SchemaCodecError(f"Cannot render document as JSON: {exc}") from exc
    return text + "\n"


def loads(text: str, text_format: OutputFormat) -> Any:
    """Parse JSON or YAML text into a plain document.

    Raises:
      SchemaCodecError: If the text is not valid in the given format.
    """
    if text_format == OutputFormat.YAML:
        try:
            return yaml.load(text, Loader=_DocumentLoader)
        except yaml.YAMLError as exc:
            raise SchemaCodecError(f"Invalid YAML document: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaCodecError(f"Invalid JSON document: {exc}") from exc


def detect_format(path: Path | str) -> OutputFormat:
    """Pick the text format from a file suffix; anything not YAML is read as JSON."""
    if Path(path).suffix.lower() in _YAML_SUFFIXES:
        return OutputFormat.YAML
    return OutputFormat.JSON


def _yaml_indent(indent: int | None) -> int:
    if indent is None or indent < 2:
        return 2
    return indent
