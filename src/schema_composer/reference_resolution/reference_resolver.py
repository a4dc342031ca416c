"""Reference resolution service."""

from __future__ import annotations

from schema_composer.schema_model import Pointer

COMPONENT_SCHEMAS_PREFIX = "#/components/schemas/"

ReferenceIdentifier = str | type


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an unusable identifier or name."""


def to_reference(identifier: ReferenceIdentifier) -> str:
    """Return the `$ref` string for a literal reference or a type.

    Strings are used verbatim; a type resolves to its component schema path
    derived from the class name.

    Raises:
      InvalidArgumentError: If the string is blank or the identifier is
        neither a string nor a type.
    """
    if isinstance(identifier, str):
        if not identifier.strip():
            raise InvalidArgumentError("Reference identifier must not be empty.")
        return identifier
    if isinstance(identifier, type):
        return component_ref(identifier.__name__)
    raise InvalidArgumentError(
        f"Reference identifier must be a string or a type, got {type(identifier).__name__}."
    )


def component_ref(name: str) -> str:
    """Return the canonical component schema path for a bare name."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Component schema name must not be empty.")
    return f"{COMPONENT_SCHEMAS_PREFIX}{name}"


def schema_ref(identifier: ReferenceIdentifier) -> Pointer:
    """Create a pointer reference for a literal reference or a type."""
    return Pointer(to_reference(identifier))
