"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-composer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-composer.
# Every key is optional; remove a key to fall back to its default.

output:
  # Text format written by convert: json or yaml.
  format: json
  # Indentation width; 0 writes compact JSON. YAML uses at least 2.
  indent: 2
  # Preferred YAML line width before long scalars are folded.
  yaml_width: 80

decoding:
  # Reject reference objects that carry keys next to $ref instead of
  # dropping those keys with a warning.
  strict_references: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
