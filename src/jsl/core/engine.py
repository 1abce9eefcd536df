"""Validation engine — walks a verified schema and an instance in lockstep.

Each call to :meth:`Validator.validate` builds a fresh ``_Evaluation``
holding the mutable walk state (path stacks and collected errors), so one
``Validator`` may be shared across threads as long as the schema and
instance are not mutated during the call.

Two ways to stop early, on separate channels:

- ``max_errors`` reached → private ``_MaxErrorsReached`` unwinds the walk
  and is swallowed; the truncated result is returned normally.
- ``max_depth`` reached → ``MaxDepthExceededError`` propagates to the caller.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any

from jsl.core.config import ValidatorConfig
from jsl.core.timestamps import is_rfc3339_timestamp
from jsl.errors import MaxDepthExceededError
from jsl.model import FLOAT_TYPES, INTEGER_RANGES, Form, Type
from jsl.model.instance import InstanceKind, kind_of
from jsl.model.result import ValidationError, ValidationResult
from jsl.model.schema import Schema

_logger = logging.getLogger(__name__)


class _MaxErrorsReached(Exception):
    """Internal stop signal; never escapes ``Validator.validate``."""


class Validator:
    """Validates instances against verified schemas.

    Parameters
    ----------
    config:
        Base configuration.  Defaults to ``ValidatorConfig()``.
    max_errors, max_depth, strict_instance_semantics:
        Optional per-field overrides of *config*.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        max_errors: int | None = None,
        max_depth: int | None = None,
        strict_instance_semantics: bool | None = None,
    ):
        base = config or ValidatorConfig()
        overrides: dict[str, Any] = {}
        if max_errors is not None:
            overrides["max_errors"] = max_errors
        if max_depth is not None:
            overrides["max_depth"] = max_depth
        if strict_instance_semantics is not None:
            overrides["strict_instance_semantics"] = strict_instance_semantics
        self.config = dataclasses.replace(base, **overrides) if overrides else base

    def validate(self, schema: Schema, instance: Any) -> ValidationResult:
        """Validate *instance* against *schema*.

        *schema* must already have passed ``verify``; the engine does not
        re-check correctness.

        Raises
        ------
        MaxDepthExceededError
            If ``ref`` resolution nests deeper than ``max_depth``.
        """
        evaluation = _Evaluation(schema, self.config)
        try:
            evaluation.validate(schema, instance)
        except _MaxErrorsReached:
            _logger.debug(
                "Evaluation stopped after %d errors (max_errors)",
                len(evaluation.errors),
            )
        except MaxDepthExceededError:
            _logger.warning(
                "Evaluation aborted: ref nesting exceeded max_depth=%d",
                self.config.max_depth,
            )
            raise
        return ValidationResult(errors=evaluation.errors)


class _Evaluation:
    """Mutable state for a single validation call.

    ``schema_tokens`` is a stack of frames: following a ``ref`` pushes a new
    frame starting at ``definitions/<name>`` so errors inside a definition
    are reported relative to it.
    """

    def __init__(self, root: Schema, config: ValidatorConfig):
        self.root = root
        self.max_errors = config.max_errors
        self.max_depth = config.max_depth
        self.strict = config.strict_instance_semantics
        self.instance_tokens: list[str] = []
        self.schema_tokens: list[list[str]] = [[]]
        self.errors: list[ValidationError] = []

    def validate(self, schema: Schema, instance: Any, parent_tag: str | None = None) -> None:
        form = schema.form
        if form is Form.EMPTY:
            return
        if form is Form.REF:
            self._validate_ref(schema, instance)
        elif form is Form.TYPE:
            self._validate_type(schema, instance)
        elif form is Form.ENUM:
            if not (kind_of(instance) is InstanceKind.STRING and instance in schema.enum):
                self._error("enum")
        elif form is Form.ELEMENTS:
            self._validate_elements(schema, instance)
        elif form is Form.PROPERTIES:
            self._validate_properties(schema, instance, parent_tag)
        elif form is Form.VALUES:
            self._validate_values(schema, instance)
        elif form is Form.DISCRIMINATOR:
            self._validate_discriminator(schema, instance)

    # ── forms ───────────────────────────────────────────────────────

    def _validate_ref(self, schema: Schema, instance: Any) -> None:
        # The root frame counts toward the limit.
        if self.max_depth and len(self.schema_tokens) == self.max_depth:
            raise MaxDepthExceededError(self.max_depth)

        target = self.root.definitions[schema.ref]
        self.schema_tokens.append(["definitions", schema.ref])
        self.validate(target, instance)
        self.schema_tokens.pop()

    def _validate_type(self, schema: Schema, instance: Any) -> None:
        kind = kind_of(instance)
        t = Type(schema.type)
        if t is Type.BOOLEAN:
            ok = kind is InstanceKind.BOOLEAN
        elif t in FLOAT_TYPES:
            ok = kind is InstanceKind.NUMBER
        elif t is Type.STRING:
            ok = kind is InstanceKind.STRING
        elif t is Type.TIMESTAMP:
            ok = kind is InstanceKind.STRING and is_rfc3339_timestamp(instance)
        else:
            lo, hi = INTEGER_RANGES[t]
            ok = kind is InstanceKind.NUMBER and _is_integer_in_range(instance, lo, hi)
        if not ok:
            self._error("type")

    def _validate_elements(self, schema: Schema, instance: Any) -> None:
        if kind_of(instance) is not InstanceKind.ARRAY:
            self._error("elements")
            return

        frame = self.schema_tokens[-1]
        frame.append("elements")
        for i, item in enumerate(instance):
            self.instance_tokens.append(str(i))
            self.validate(schema.elements, item)
            self.instance_tokens.pop()
        frame.pop()

    def _validate_properties(
        self, schema: Schema, instance: Any, parent_tag: str | None
    ) -> None:
        if kind_of(instance) is not InstanceKind.OBJECT:
            # No "properties" keyword means the error belongs to "optionalProperties".
            self._error(
                "properties" if schema.properties is not None else "optionalProperties"
            )
            return

        required = schema.properties or {}
        optional = schema.optional_properties or {}
        frame = self.schema_tokens[-1]

        for name, sub in required.items():
            frame.extend(("properties", name))
            if name in instance:
                self.instance_tokens.append(name)
                self.validate(sub, instance[name])
                self.instance_tokens.pop()
            else:
                self._error()
            del frame[-2:]

        for name, sub in optional.items():
            if name not in instance:
                continue
            frame.extend(("optionalProperties", name))
            self.instance_tokens.append(name)
            self.validate(sub, instance[name])
            self.instance_tokens.pop()
            del frame[-2:]

        if self.strict:
            for key in instance:
                # The enclosing discriminator's tag is exempt, one level only.
                if key == parent_tag:
                    continue
                if key not in required and key not in optional:
                    self._error(instance_suffix=(key,))

    def _validate_values(self, schema: Schema, instance: Any) -> None:
        if kind_of(instance) is not InstanceKind.OBJECT:
            self._error("values")
            return

        frame = self.schema_tokens[-1]
        frame.append("values")
        for key, value in instance.items():
            self.instance_tokens.append(key)
            self.validate(schema.values, value)
            self.instance_tokens.pop()
        frame.pop()

    def _validate_discriminator(self, schema: Schema, instance: Any) -> None:
        if kind_of(instance) is not InstanceKind.OBJECT:
            self._error("discriminator")
            return

        disc = schema.discriminator
        frame = self.schema_tokens[-1]
        frame.append("discriminator")

        if disc.tag not in instance:
            self._error("tag")
        elif kind_of(instance[disc.tag]) is not InstanceKind.STRING:
            self._error("tag", instance_suffix=(disc.tag,))
        elif instance[disc.tag] not in disc.mapping:
            self._error("mapping", instance_suffix=(disc.tag,))
        else:
            tag_value = instance[disc.tag]
            frame.extend(("mapping", tag_value))
            self.validate(disc.mapping[tag_value], instance, parent_tag=disc.tag)
            del frame[-2:]

        frame.pop()

    # ── errors ──────────────────────────────────────────────────────

    def _error(self, *schema_suffix: str, instance_suffix: tuple[str, ...] = ()) -> None:
        self.errors.append(
            ValidationError(
                instance_path=(*self.instance_tokens, *instance_suffix),
                schema_path=(*self.schema_tokens[-1], *schema_suffix),
            )
        )
        if len(self.errors) == self.max_errors:
            raise _MaxErrorsReached()


def _is_integer_in_range(value: int | float, lo: int, hi: int) -> bool:
    """Zero fractional part and within the inclusive range, compared exactly."""
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
        value = int(value)
    return lo <= value <= hi
