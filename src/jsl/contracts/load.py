"""Load schema and instance documents and decode schemas at the boundary.

Usage::

    from jsl.contracts.load import load_schema, load_document, parse_schema

    schema = load_schema(Path("person.jsl.json"))
    instance = load_document(Path("person.json"))
    schema = parse_schema({"elements": {"type": "string"}})

The wire shape is checked with ``jsonschema`` against the bundled
``jsl_schema.schema.json``; only shape-correct documents reach
``Schema.from_dict``.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from jsl.errors import SchemaDecodeError
from jsl.model.result import to_json_pointer
from jsl.model.schema import Schema

_logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
META_SCHEMA_NAME = "jsl_schema.schema.json"

_YAML_SUFFIXES = (".yaml", ".yml")


class _JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader restricted to what JSON can express.

    Timestamps stay plain strings and mapping keys must be strings.
    """


def _construct_string_keyed_mapping(
    loader: _JsonCompatibleLoader, node: yaml.MappingNode
) -> dict[str, Any]:
    loader.flatten_mapping(node)
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        if not isinstance(key, str):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                f"found non-string key {key!r}; JSON object keys must be strings",
                key_node.start_mark,
            )
        mapping[key] = loader.construct_object(value_node, deep=True)
    return mapping


_JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_JsonCompatibleLoader.add_constructor(
    "tag:yaml.org,2002:map", _construct_string_keyed_mapping
)


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/jsl/data/schemas/`` relative to this file
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical
    with resources.as_file(resources.files("jsl") / SCHEMA_DIR / name) as p:
        return p


@lru_cache(maxsize=None)
def _meta_validator() -> jsonschema.Draft7Validator:
    meta = json.loads(_schema_path(META_SCHEMA_NAME).read_text(encoding="utf-8"))
    return jsonschema.Draft7Validator(meta)


def check_schema_shape(data: Any) -> None:
    """Raise ``SchemaDecodeError`` unless *data* has the schema wire shape."""
    error = jsonschema.exceptions.best_match(_meta_validator().iter_errors(data))
    if error is not None:
        pointer = to_json_pointer([str(p) for p in error.absolute_path])
        raise SchemaDecodeError(error.message, pointer=pointer) from error


def parse_schema(data: Any) -> Schema:
    """Shape-check a decoded document and build the ``Schema`` tree."""
    check_schema_shape(data)
    return Schema.from_dict(data)


def load_document(path: Path) -> Any:
    """Read a JSON or YAML document (chosen by file suffix)."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"document not found: {path}")
    text = path.read_text(encoding="utf-8")
    _logger.debug("Loading %s (%d bytes)", path, len(text))
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.load(text, Loader=_JsonCompatibleLoader)
    return json.loads(text)


def load_schema(path: Path) -> Schema:
    """Load a schema file and decode it (not yet verified)."""
    return parse_schema(load_document(path))
