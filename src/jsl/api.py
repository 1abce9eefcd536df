"""
jsl.api
=======

Programmatic entrypoints for verifying schemas and validating instances.

Goals:
  - No argparse / CLI dependencies
  - Accept schemas as ``Schema`` objects, decoded dicts or file paths
  - Always verify a schema before it reaches the validation engine

Non-goals:
  - Owning persistence or caching of parsed schemas — callers keep the
    ``Schema`` returned by ``verify_schema`` and reuse it

Usage::

    from jsl.api import verify_schema, validate_instance

    schema = verify_schema({"properties": {"name": {"type": "string"}}})
    result = validate_instance(schema, {"name": 42}, max_depth=32)
    result.is_valid      # False
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from jsl.contracts.load import load_document, load_schema, parse_schema
from jsl.core.config import ValidatorConfig
from jsl.core.engine import Validator
from jsl.core.verifier import verify
from jsl.model.result import ValidationResult
from jsl.model.schema import Schema

_logger = logging.getLogger(__name__)

SchemaInput = Schema | Mapping[str, Any] | str | Path


def _to_schema(schema: SchemaInput) -> Schema:
    if isinstance(schema, Schema):
        return schema
    if isinstance(schema, (str, Path)):
        return load_schema(Path(schema))
    return parse_schema(schema)


# ── verify_schema ───────────────────────────────────────────────────


def verify_schema(schema: SchemaInput) -> Schema:
    """Decode (if needed) and verify a schema.

    Parameters
    ----------
    schema:
        A ``Schema``, a decoded JSON mapping, or a path to a JSON/YAML file.

    Returns
    -------
    The verified ``Schema``, safe to validate against repeatedly.

    Raises
    ------
    SchemaError
        The first correctness problem found (``SchemaDecodeError`` if the
        document does not even have the wire shape).
    FileNotFoundError
        If a path-based input does not exist.
    """
    parsed = _to_schema(schema)
    verify(parsed)
    _logger.debug(
        "Verified schema (form=%s, definitions=%d)",
        parsed.form.value,
        len(parsed.definitions or {}),
    )
    return parsed


# ── validate_instance ───────────────────────────────────────────────


def validate_instance(
    schema: SchemaInput,
    instance: Any,
    *,
    config: Optional[ValidatorConfig] = None,
    max_errors: Optional[int] = None,
    max_depth: Optional[int] = None,
    strict: Optional[bool] = None,
) -> ValidationResult:
    """Verify *schema*, then validate *instance* against it.

    Keyword overrides replace the matching field of *config*.

    Raises
    ------
    SchemaError
        If the schema is not correct.
    MaxDepthExceededError
        If ``ref`` resolution nests deeper than ``max_depth``.
    """
    verified = verify_schema(schema)
    validator = Validator(
        config,
        max_errors=max_errors,
        max_depth=max_depth,
        strict_instance_semantics=strict,
    )
    return validator.validate(verified, instance)


def validate_file(
    schema_path: str | Path,
    instance_path: str | Path,
    **kwargs: Any,
) -> ValidationResult:
    """Load both documents from disk and run ``validate_instance``."""
    instance = load_document(Path(instance_path))
    return validate_instance(Path(schema_path), instance, **kwargs)


def is_valid(schema: SchemaInput, instance: Any, **kwargs: Any) -> bool:
    """Shorthand for ``validate_instance(...).is_valid``."""
    return validate_instance(schema, instance, **kwargs).is_valid
