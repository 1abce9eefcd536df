"""Schema correctness verification.

Walks the schema tree once, checking keyword groups in the same priority
order the form resolver uses, and raises the first problem found.

Besides the root node, every root definition is verified, including ones
no ``ref`` reaches.  A schema carrying a broken but unused definition is
therefore rejected, where a root-only walk would accept it.
"""

from __future__ import annotations

from jsl.errors import (
    InvalidFormError,
    InvalidTypeError,
    NonPropertiesMappingError,
    NoSuchDefinitionError,
    RepeatedEnumValueError,
    RepeatedPropertyError,
    RepeatedTagInPropertiesError,
)
from jsl.model import TYPE_NAMES, Form
from jsl.model.schema import Schema


def verify(schema: Schema) -> None:
    """Raise a ``SchemaError`` if *schema* is not a correct root schema.

    The root's own keywords are checked first, then every definition in
    document order.  ``definitions`` on nested nodes are never resolvable
    and are not inspected.
    """
    _verify_node(schema, schema)
    if schema.definitions is not None:
        for sub in schema.definitions.values():
            _verify_node(sub, schema)


def _verify_node(schema: Schema, root: Schema) -> None:
    is_empty = True

    if schema.ref is not None:
        if root.definitions is None or schema.ref not in root.definitions:
            raise NoSuchDefinitionError(schema.ref)
        is_empty = False

    if schema.type:
        if not is_empty:
            raise InvalidFormError()
        if schema.type not in TYPE_NAMES:
            raise InvalidTypeError(schema.type)
        is_empty = False

    if schema.enum is not None:
        if not is_empty:
            raise InvalidFormError()
        seen: set[str] = set()
        for value in schema.enum:
            if value in seen:
                raise RepeatedEnumValueError(value)
            seen.add(value)
        is_empty = False

    if schema.elements is not None:
        if not is_empty:
            raise InvalidFormError()
        _verify_node(schema.elements, root)
        is_empty = False

    if schema.properties is not None or schema.optional_properties is not None:
        if not is_empty:
            raise InvalidFormError()
        required = schema.properties or {}
        optional = schema.optional_properties or {}
        for name in required:
            if name in optional:
                raise RepeatedPropertyError(name)
        for sub in required.values():
            _verify_node(sub, root)
        for sub in optional.values():
            _verify_node(sub, root)
        is_empty = False

    if schema.values is not None:
        if not is_empty:
            raise InvalidFormError()
        _verify_node(schema.values, root)
        is_empty = False

    disc = schema.discriminator
    if disc is not None and disc.mapping is not None:
        if not is_empty:
            raise InvalidFormError()
        for sub in disc.mapping.values():
            _verify_node(sub, root)
            if sub.form is not Form.PROPERTIES:
                raise NonPropertiesMappingError()
            if disc.tag in (sub.properties or {}):
                raise RepeatedTagInPropertiesError(disc.tag)
            if disc.tag in (sub.optional_properties or {}):
                raise RepeatedTagInPropertiesError(disc.tag)
