"""Components registration service."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from schema_composer.reference_resolution import InvalidArgumentError, component_ref
from schema_composer.schema_building import ExamplesBuilder, SchemaBuilder, build_schema
from schema_composer.schema_model import Components, Example, Schema


class SchemaDeriver(Protocol):
    """Produce a component name and schema for a Python type."""

    def __call__(self, cls: type) -> tuple[str, Schema]: ...


class ComponentsBuilder:
    """Collect named schemas and examples; re-registering a name replaces it."""

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}
        self._examples: dict[str, Example] = {}

    def schema(self, name: str, build_fn: Callable[[SchemaBuilder], None]) -> None:
        self.add_schema(name, build_schema(build_fn))

    def add_schema(self, name: str, schema: Schema) -> None:
        _require_name(name)
        self._schemas[name] = schema

    def schema_from_type(self, cls: type, deriver: SchemaDeriver) -> str:
        """Register the schema `deriver` produces for `cls` and return its reference."""
        name, schema = deriver(cls)
        self.add_schema(name, schema)
        return component_ref(name)

    def example(
        self,
        name: str,
        value: Any,
        summary: str | None = None,
        description: str | None = None,
    ) -> None:
        _require_name(name)
        examples = ExamplesBuilder()
        examples.example(name, value, summary=summary, description=description)
        self._examples.update(examples.build())

    def reference_to(self, name: str) -> str:
        """Return the canonical reference for `name`, registered or not."""
        return component_ref(name)

    def build(self) -> Components:
        return Components(
            schemas=dict(self._schemas) if self._schemas else None,
            examples=dict(self._examples) if self._examples else None,
        )


def _require_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Component name must not be empty.")
