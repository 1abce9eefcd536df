"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — ``verify``: schema is correct; ``validate``: instance has
      no validation errors; ``form``: form printed
  1   Violation — ``verify``/``validate``: the schema raised a
      ``SchemaError`` (unknown ref, invalid form or type, repeated enum
      value/property/tag, non-properties mapping); ``validate``: one or
      more ``ValidationError`` entries were collected
  2   Error — could not run: usage error, missing file, undecodable or
      wrongly shaped document, depth limit or recursion limit exceeded,
      bad ``JSL_*`` configuration
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
