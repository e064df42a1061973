"""
Contract Validation Module

Контракт interchange-формы BigInteger (JSON Schema + каноническая форма).
"""

from .validators import (
    SCHEMA_PATH,
    big_integer_errors,
    big_integer_schema_validator,
    canonical_form_errors,
    validate_big_integer,
)

__all__ = [
    "SCHEMA_PATH",
    "big_integer_schema_validator",
    "big_integer_errors",
    "canonical_form_errors",
    "validate_big_integer",
]
