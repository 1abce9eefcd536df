"""Shared utilities for jsl."""

from jsl.utils.exit_codes import ExitCode
from jsl.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
