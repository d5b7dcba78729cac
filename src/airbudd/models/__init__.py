"""
Data models for AirBudd.

This module contains:
- Render options consumed by the field wrapper
- The bound-object protocol and its pydantic/mapping adapter
- Validation results
"""

from airbudd.models.bound_object import (
    BoundObject,
    ModelBinding,
    bind,
)
from airbudd.models.render_options import RenderOptions
from airbudd.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Options
    "RenderOptions",
    # Bound objects
    "BoundObject",
    "ModelBinding",
    "bind",
    # Validation
    "ValidationResult",
    "FieldValidationError",
]
