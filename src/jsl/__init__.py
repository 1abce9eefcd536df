"""jsl — JSON Schema Language schema verifier and validation engine."""

__all__ = [
    "__version__",
    "Form",
    "Type",
    "Schema",
    "Discriminator",
    "form_of",
    "verify",
    "Validator",
    "ValidatorConfig",
    "ValidationError",
    "ValidationResult",
    "verify_schema",
    "validate_instance",
    "validate_file",
    "is_valid",
    # Errors
    "SchemaError",
    "EngineError",
    "MaxDepthExceededError",
]
__version__ = "0.1.0"

from jsl.model import Form, Type  # noqa: E402
from jsl.model.schema import Discriminator, Schema, form_of  # noqa: E402
from jsl.model.result import ValidationError, ValidationResult  # noqa: E402
from jsl.core.config import ValidatorConfig  # noqa: E402
from jsl.core.engine import Validator  # noqa: E402
from jsl.core.verifier import verify  # noqa: E402
from jsl.errors import EngineError, MaxDepthExceededError, SchemaError  # noqa: E402

# Programmatic entrypoints: see jsl/api.py.
from jsl.api import (  # noqa: E402
    is_valid,
    validate_file,
    validate_instance,
    verify_schema,
)
