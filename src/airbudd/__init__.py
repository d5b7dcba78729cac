"""
AirBudd: labelled, error-aware HTML form fields and action buttons.

Simple Usage:
    from airbudd import airbudd_form_for, form_tag

    f = airbudd_form_for("article", article, errors={"title": ["can't be blank"]})

    html = form_tag(
        f.text_field("title", required=True, hint="Keep it short"),
        f.text_area("body", label="Article text"),
        f.check_box("published"),
        f.buttons(f.save(), f.cancel(url="/articles")),
        url="/articles",
    )

Pydantic models:
    Bind a model instance and its validation errors. Required fields get the
    required marker and `Field(title=...)` becomes the label text.

    try:
        Article.model_validate(form_data)
    except ValidationError as exc:
        f = airbudd_form_for("article", ModelBinding(form_data, exc, model_class=Article))

Configuration:
    from airbudd.config import update_config

    # Once, at startup
    update_config(required_signifier="*", label_suffix="")

    # Per form
    f = airbudd_form_for("article", article, label_suffix="")

Jinja2:
    from airbudd.jinja import init_app

    init_app(env)
"""

from airbudd.builder import (
    AirBuddFormBuilder,
    ButtonGroup,
    FormBuilder,
    render_button,
)
from airbudd.config import (
    FormDefaults,
    get_config,
    update_config,
)
from airbudd.constants import FieldKind, Purpose
from airbudd.errors import ConfigurationError, UnsupportedFieldKind
from airbudd.helpers import (
    airbudd_fields_for,
    airbudd_form_for,
    form_tag,
    link_to_form,
)
from airbudd.html import TemplateContext
from airbudd.models import (
    BoundObject,
    FieldValidationError,
    ModelBinding,
    RenderOptions,
    ValidationResult,
)

__all__ = [
    # Main interface
    "airbudd_form_for",
    "airbudd_fields_for",
    "form_tag",
    "link_to_form",
    # Builders
    "FormBuilder",
    "AirBuddFormBuilder",
    "ButtonGroup",
    "render_button",
    "TemplateContext",
    # Vocabulary
    "FieldKind",
    "Purpose",
    # Models
    "RenderOptions",
    "BoundObject",
    "ModelBinding",
    "ValidationResult",
    "FieldValidationError",
    # Configuration
    "FormDefaults",
    "get_config",
    "update_config",
    # Errors
    "UnsupportedFieldKind",
    "ConfigurationError",
]

__version__ = "0.1.0"
