"""Schema — the in-memory representation of a JSON Schema Language schema.

A ``Schema`` mirrors the wire shape: every keyword group is optional and
``None`` means "absent".  Not every ``Schema`` is *correct*; run
:func:`jsl.core.verifier.verify` before handing one to the validator.

Usage::

    schema = Schema.from_dict({"elements": {"type": "string"}})
    schema.form        # Form.ELEMENTS
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from . import Form


@dataclass(frozen=True)
class Discriminator:
    """Payload of a schema in the discriminator form."""

    tag: str = ""
    mapping: dict[str, Schema] | None = None


@dataclass(frozen=True)
class Schema:
    """A (possibly incorrect) schema node.

    ``definitions`` is only resolvable on the root node.  ``type`` is kept
    as a raw string so that unknown type tags survive decoding and can be
    reported by the verifier.
    """

    definitions: dict[str, Schema] | None = None
    ref: str | None = None
    type: str | None = None
    enum: list[str] | None = None
    elements: Schema | None = None
    properties: dict[str, Schema] | None = None
    optional_properties: dict[str, Schema] | None = None
    values: Schema | None = None
    discriminator: Discriminator | None = None

    @property
    def form(self) -> Form:
        return form_of(self)

    # ── wire (de)serialisation ──────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schema:
        """Build a schema tree from a decoded JSON object.

        Assumes the document already has the wire shape (see
        ``jsl.contracts.load.check_schema_shape``).  JSON ``null`` is
        treated as an absent keyword; unknown keywords are ignored.
        """
        disc = data.get("discriminator")
        discriminator = None
        if disc is not None:
            discriminator = Discriminator(
                tag=disc.get("tag") or "",
                mapping=_schema_map(disc.get("mapping")),
            )

        enum = data.get("enum")
        return cls(
            definitions=_schema_map(data.get("definitions")),
            ref=data.get("ref"),
            type=data.get("type") or None,
            enum=list(enum) if enum is not None else None,
            elements=_schema_or_none(data.get("elements")),
            properties=_schema_map(data.get("properties")),
            optional_properties=_schema_map(data.get("optionalProperties")),
            values=_schema_or_none(data.get("values")),
            discriminator=discriminator,
        )

    def to_dict(self) -> dict[str, Any]:
        """Produce the wire shape, omitting absent keywords."""
        d: dict[str, Any] = {}
        if self.definitions is not None:
            d["definitions"] = {k: v.to_dict() for k, v in self.definitions.items()}
        if self.ref is not None:
            d["ref"] = self.ref
        if self.type:
            d["type"] = self.type
        if self.enum is not None:
            d["enum"] = list(self.enum)
        if self.elements is not None:
            d["elements"] = self.elements.to_dict()
        if self.properties is not None:
            d["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        if self.optional_properties is not None:
            d["optionalProperties"] = {
                k: v.to_dict() for k, v in self.optional_properties.items()
            }
        if self.values is not None:
            d["values"] = self.values.to_dict()
        if self.discriminator is not None:
            disc: dict[str, Any] = {"tag": self.discriminator.tag}
            if self.discriminator.mapping is not None:
                disc["mapping"] = {
                    k: v.to_dict() for k, v in self.discriminator.mapping.items()
                }
            d["discriminator"] = disc
        return d


def form_of(schema: Schema) -> Form:
    """Resolve which form *schema* takes on.

    Fixed priority: ref > type > enum > elements > properties > values >
    discriminator > empty.  Only meaningful for correct schemas; for a
    schema populating several groups this returns the highest-priority one.
    """
    if schema.ref is not None:
        return Form.REF
    if schema.type:
        return Form.TYPE
    if schema.enum is not None:
        return Form.ENUM
    if schema.elements is not None:
        return Form.ELEMENTS
    if schema.properties is not None or schema.optional_properties is not None:
        return Form.PROPERTIES
    if schema.values is not None:
        return Form.VALUES
    if schema.discriminator is not None and schema.discriminator.mapping is not None:
        return Form.DISCRIMINATOR
    return Form.EMPTY


def _schema_or_none(data: Mapping[str, Any] | None) -> Schema | None:
    if data is None:
        return None
    return Schema.from_dict(data)


def _schema_map(data: Mapping[str, Any] | None) -> dict[str, Schema] | None:
    if data is None:
        return None
    return {str(k): Schema.from_dict(v) for k, v in data.items()}
