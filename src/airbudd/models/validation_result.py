"""
Validation result models.

These models carry per-field error messages into the form builders. They
can be built by hand, from a `{field: [messages]}` mapping, or from a
`pydantic.ValidationError`.
"""

from typing import Mapping

from pydantic import BaseModel, Field, ValidationError


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Name of the field with error")
    error_type: str = Field(default="invalid", description="Type of validation error")
    message: str = Field(..., description="Human-readable error message")


class ValidationResult(BaseModel):
    """Result of validating a bound object."""

    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def add(self, field_name: str, message: str, error_type: str = "invalid") -> None:
        """Record an error against a field."""
        self.errors.append(
            FieldValidationError(field_name=field_name, message=message, error_type=error_type)
        )

    def get_field_errors(self, field_name: str) -> list[FieldValidationError]:
        """Get all errors for a specific field."""
        return [e for e in self.errors if e.field_name == field_name]

    def messages_for(self, field_name: str) -> list[str]:
        """Messages for a field, in the order they were recorded."""
        return [e.message for e in self.get_field_errors(field_name)]

    @classmethod
    def from_dict(cls, errors: Mapping[str, list[str] | str]) -> "ValidationResult":
        """Build from `{field: [messages]}`; a bare string counts as one message."""
        result = cls()
        for field_name, messages in errors.items():
            if isinstance(messages, str):
                messages = [messages]
            for message in messages:
                result.add(field_name, message)
        return result

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationResult":
        """
        Build from a pydantic `ValidationError`.

        Errors are attributed to the first element of their location; errors
        with an empty location (model-level validators) go under `"base"`.
        """
        result = cls()
        for detail in exc.errors():
            loc = detail.get("loc") or ("base",)
            result.add(str(loc[0]), detail.get("msg", ""), detail.get("type", "invalid"))
        return result
