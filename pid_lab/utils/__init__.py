"""Utility functions and helpers."""

from pid_lab.utils.validators import (
    ValidationError,
    validate_finite,
    validate_positive,
    validate_non_negative,
    validate_range,
    validate_callable,
)
from pid_lab.utils.math_utils import clamp, sign_changes

__all__ = [
    "ValidationError",
    "validate_finite",
    "validate_positive",
    "validate_non_negative",
    "validate_range",
    "validate_callable",
    "clamp",
    "sign_changes",
]
