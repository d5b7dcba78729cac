"""
Form builders.

- `FormBuilder`: plain field helpers
- `AirBuddFormBuilder`: the same helpers with labels, feedback, hints and buttons
"""

from airbudd.builder.base import FormBuilder
from airbudd.builder.buttons import (
    ButtonGroup,
    link_to_form,
    render_button,
)
from airbudd.builder.form_builder import AirBuddFormBuilder

__all__ = [
    "FormBuilder",
    "AirBuddFormBuilder",
    "ButtonGroup",
    "render_button",
    "link_to_form",
]
