"""Boundary tests for schema_composer internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "schema_composer"


def test_schema_model_does_not_import_other_domains() -> None:
    forbidden_import_fragments = (
        "schema_composer.schema_building",
        "schema_composer.serialization",
        "schema_composer.reference_resolution",
        "schema_composer.configuration",
    )

    for module_path in (_package_root() / "schema_model").glob("*.py"):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden model dependency in {module_path}: {fragment}"


def test_codec_core_does_not_depend_on_builders_or_configuration() -> None:
    module_path = _package_root() / "serialization" / "document_codec.py"
    text = module_path.read_text(encoding="utf-8")

    for fragment in ("schema_composer.schema_building", "schema_composer.configuration"):
        assert fragment not in text, f"Forbidden codec dependency: {fragment}"
