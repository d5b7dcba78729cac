"""
Bound objects: the record a form is rendered for.

The builders only talk to the `BoundObject` protocol. `ModelBinding` adapts
pydantic models, plain mappings and `None` (a form with no record) to it.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from airbudd.models.validation_result import ValidationResult

ErrorSource = ValidationResult | ValidationError | Mapping[str, list[str] | str] | None


@runtime_checkable
class BoundObject(Protocol):
    """
    What a form builder needs from the record being edited.

    Implementations may also provide `is_required(field) -> bool | None`
    (presence reflection, None when unknown) and
    `human_attribute_name(field) -> str | None` (declared display name).
    Both are optional and looked up with `getattr`.
    """

    def value_for(self, field: str) -> Any: ...

    def errors_for(self, field: str) -> list[str]: ...

    def has_errors(self, field: str) -> bool: ...


def _to_result(errors: ErrorSource) -> ValidationResult:
    if errors is None:
        return ValidationResult()
    if isinstance(errors, ValidationResult):
        return errors
    if isinstance(errors, ValidationError):
        return ValidationResult.from_pydantic(errors)
    return ValidationResult.from_dict(errors)


class ModelBinding:
    """
    Adapts a pydantic model instance, a mapping, or None to `BoundObject`.

    For a pydantic model, reading an unknown field raises `AttributeError`,
    and both required-ness and display names come from the model's field
    declarations. `model_class` supplies that metadata when the data is a
    mapping, e.g. when re-rendering a form whose submission failed
    validation.
    """

    def __init__(
        self,
        obj: BaseModel | Mapping[str, Any] | None = None,
        errors: ErrorSource = None,
        model_class: type[BaseModel] | None = None,
    ):
        self.obj = obj
        self.errors = _to_result(errors)
        if model_class is None and isinstance(obj, BaseModel):
            model_class = type(obj)
        self.model_class = model_class

    def value_for(self, field: str) -> Any:
        if self.obj is None:
            return None
        if isinstance(self.obj, Mapping):
            return self.obj.get(field)
        return getattr(self.obj, field)

    def errors_for(self, field: str) -> list[str]:
        return self.errors.messages_for(field)

    def has_errors(self, field: str) -> bool:
        return bool(self.errors.get_field_errors(field))

    def is_required(self, field: str) -> bool | None:
        """Presence reflection from the model declaration; None when unknown."""
        info = self._field_info(field)
        if info is None:
            return None
        return info.is_required()

    def human_attribute_name(self, field: str) -> str | None:
        info = self._field_info(field)
        if info is None:
            return None
        return info.title

    def _field_info(self, field: str):
        if self.model_class is None:
            return None
        return self.model_class.model_fields.get(field)

    def __repr__(self) -> str:
        return f"ModelBinding({self.obj!r}, errors={self.errors.error_count})"


def bind(obj: Any = None, errors: ErrorSource = None) -> BoundObject:
    """Return `obj` if it already is a bound object, else wrap it in a `ModelBinding`."""
    if isinstance(obj, BoundObject) and errors is None:
        return obj
    if isinstance(obj, BoundObject):
        raise TypeError("errors can only be supplied when wrapping a plain object")
    return ModelBinding(obj, errors)
