"""Validator configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable validator configuration.

    ``max_errors`` and ``max_depth`` use 0 for "unbounded".  When evaluating
    untrusted schemas, always set ``max_depth``: cyclic ``ref`` chains are
    legal and would otherwise recurse until the interpreter gives up.
    """

    max_errors: int = 0
    max_depth: int = 0
    strict_instance_semantics: bool = False

    def __post_init__(self) -> None:
        if self.max_errors < 0:
            raise ValueError(f"max_errors must be >= 0, got {self.max_errors}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ValidatorConfig:
        """Read ``JSL_MAX_ERRORS``, ``JSL_MAX_DEPTH`` and ``JSL_STRICT``.

        Unset or empty variables fall back to the defaults.
        """
        if env is None:
            env = os.environ
        return cls(
            max_errors=_env_int(env, "JSL_MAX_ERRORS"),
            max_depth=_env_int(env, "JSL_MAX_DEPTH"),
            strict_instance_semantics=(
                env.get("JSL_STRICT", "").strip().lower() in _TRUTHY
            ),
        )


def _env_int(env: Mapping[str, str], name: str) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
