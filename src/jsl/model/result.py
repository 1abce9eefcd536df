"""ValidationResult — the ordered, path-annotated output of one validation call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence


def to_json_pointer(tokens: Sequence[str]) -> str:
    """Render path tokens as an RFC 6901 JSON Pointer."""
    return "".join("/" + t.replace("~", "~0").replace("/", "~1") for t in tokens)


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single instance validation error.

    Not an exception: these are the *output* of a successful validation.
    ``instance_path`` points into the instance, ``schema_path`` into the
    schema keyword chain that rejected it.
    """

    instance_path: tuple[str, ...]
    schema_path: tuple[str, ...]

    def to_dict(self) -> dict[str, str]:
        return {
            "instancePath": to_json_pointer(self.instance_path),
            "schemaPath": to_json_pointer(self.schema_path),
        }


@dataclass(slots=True)
class ValidationResult:
    """Errors in the order the evaluation discovered them.

    An empty result means the instance is valid.  Callers that need a
    canonical order should use :meth:`sorted`.
    """

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def sorted(self) -> ValidationResult:
        """Return a copy ordered by (schema pointer, instance pointer)."""
        return ValidationResult(
            errors=sorted(
                self.errors,
                key=lambda e: (
                    to_json_pointer(e.schema_path),
                    to_json_pointer(e.instance_path),
                ),
            )
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
        }
