"""
Per-field rendering options.

The wrapper consumes a handful of keys; everything else is kept as a
pass-through option for the host field helper.
"""

from typing import Any

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderOptions(BaseModel):
    """
    Options recognised by the AirBudd field wrapper.

    `label=None` given explicitly suppresses the label, which is different
    from leaving `label` out (use the field's display name). Use
    `label_suppressed` rather than testing `label is None`.

    Text options are escaped when rendered unless they are passed in as
    `markupsafe.Markup`, which is kept as is.
    """

    model_config = ConfigDict(extra="allow")

    label: str | None = Field(default=None, description="Label text; explicit None hides the label")
    suffix: str | None = Field(default=None, description="Text appended to the label")
    required: bool | str | None = Field(
        default=None, description="True for the default signifier, or custom signifier text"
    )
    hint: str | None = Field(default=None, description="Hint shown after the input")
    addendum: str | None = Field(default=None, description="Text shown right after the input")
    capitalize: bool | None = Field(default=None, description="Capitalize error feedback")

    @field_validator("label", "suffix", "required", "hint", "addendum", mode="wrap")
    @classmethod
    def keep_markup(cls, value: Any, handler):
        # str validation would coerce Markup to a plain str and lose its safety
        if isinstance(value, Markup):
            return value
        return handler(value)

    @property
    def label_suppressed(self) -> bool:
        return "label" in self.model_fields_set and self.label is None

    @property
    def passthrough(self) -> dict[str, Any]:
        """Options not consumed by the wrapper, for the host helper."""
        return dict(self.model_extra or {})

    @classmethod
    def split(cls, options: dict[str, Any] | None = None, **kwargs) -> "RenderOptions":
        """Merge an options dict with keyword options; keywords win."""
        return cls(**{**(options or {}), **kwargs})
