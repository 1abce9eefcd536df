"""Exception taxonomy.

Two families, never conflated:

- ``SchemaError`` — the schema itself is not correct (raised by ``verify``
  or at decode time).  Only the first problem found is reported.
- ``EngineError`` — evaluation was aborted (``MaxDepthExceededError``).

Instance validation errors are *not* exceptions; see
``jsl.model.result.ValidationError``.
"""

from __future__ import annotations


class SchemaError(ValueError):
    """Base class for schema correctness problems."""


class SchemaDecodeError(SchemaError):
    """Raised when a schema document does not have the wire shape."""

    def __init__(self, detail: str, *, pointer: str = "") -> None:
        self.detail = detail
        self.pointer = pointer
        where = f" at {pointer!r}" if pointer else ""
        super().__init__(f"jsl: malformed schema document{where}: {detail}")


class InvalidFormError(SchemaError):
    """The schema populates more than one keyword group."""

    def __init__(self) -> None:
        super().__init__("jsl: ambiguous or invalid schema form")


class NoSuchDefinitionError(SchemaError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"jsl: no such definition: {name}")


class InvalidTypeError(SchemaError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"jsl: no such type: {value}")


class RepeatedEnumValueError(SchemaError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"jsl: repeated enum value: {value}")


class RepeatedPropertyError(SchemaError):
    """A property appears in both ``properties`` and ``optionalProperties``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"jsl: repeated property in properties and optionalProperties: {name}"
        )


class NonPropertiesMappingError(SchemaError):
    """A discriminator mapping value is not of the properties form."""

    def __init__(self) -> None:
        super().__init__(
            "jsl: value of discriminator mapping is not of properties form"
        )


class RepeatedTagInPropertiesError(SchemaError):
    """A discriminator mapping value re-declares the discriminator tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(
            f"jsl: discriminator tag repeated in properties or optionalProperties: {tag}"
        )


class EngineError(RuntimeError):
    """Base class for evaluation aborts."""


class MaxDepthExceededError(EngineError):
    """Too many nested ``ref`` resolutions; usually a cyclic definition."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"jsl: maximum evaluation depth exceeded (max_depth={max_depth})"
        )
