"""Reference resolution exports."""

from .reference_resolver import (
    COMPONENT_SCHEMAS_PREFIX,
    InvalidArgumentError,
    ReferenceIdentifier,
    component_ref,
    schema_ref,
    to_reference,
)

__all__ = [
    "COMPONENT_SCHEMAS_PREFIX",
    "InvalidArgumentError",
    "ReferenceIdentifier",
    "component_ref",
    "schema_ref",
    "to_reference",
]
