"""Discriminator accumulation helper."""

from __future__ import annotations

from schema_composer.reference_resolution import (
    InvalidArgumentError,
    ReferenceIdentifier,
    to_reference,
)
from schema_composer.schema_model import Discriminator


class DiscriminatorBuilder:
    """Collect a discriminator property name and its value-to-reference mapping."""

    def __init__(self, property_name: str) -> None:
        if not isinstance(property_name, str) or not property_name.strip():
            raise InvalidArgumentError("Discriminator property name must not be empty.")
        self._property_name = property_name
        self._mapping: dict[str, str] = {}

    def mapping(self, value: str, identifier: ReferenceIdentifier) -> None:
        """Map a discriminator value to a schema; a repeated value replaces the previous one."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("Discriminator mapping key must not be empty.")
        self._mapping[value] = to_reference(identifier)

    def build(self) -> Discriminator:
        return Discriminator(
            property_name=self._property_name,
            mapping=dict(self._mapping) if self._mapping else None,
        )
