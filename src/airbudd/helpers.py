"""
Template helpers.

Entry points used from views and templates: builders bound to AirBudd, the
enclosing `<form>` tag, and stand-alone form-style links.
"""

from typing import Any

from markupsafe import Markup

from airbudd.builder.buttons import link_to_form
from airbudd.builder.form_builder import AirBuddFormBuilder
from airbudd.config import FormDefaults
from airbudd.html import TemplateContext
from airbudd.models.bound_object import ErrorSource


def airbudd_form_for(
    object_name: str,
    obj: Any = None,
    *,
    errors: ErrorSource = None,
    template: TemplateContext | None = None,
    defaults: FormDefaults | None = None,
    builder: type[AirBuddFormBuilder] = AirBuddFormBuilder,
    **overrides,
) -> AirBuddFormBuilder:
    """
    Builder for a record's form.

    Example:
        >>> f = airbudd_form_for("article", article, errors=result)
        >>> html = form_tag(f.text_field("title"), f.buttons(f.save()), url="/articles")
    """
    return builder(object_name, obj, template=template, errors=errors, defaults=defaults, **overrides)


def airbudd_fields_for(
    object_name: str,
    obj: Any = None,
    *,
    errors: ErrorSource = None,
    template: TemplateContext | None = None,
    defaults: FormDefaults | None = None,
    builder: type[AirBuddFormBuilder] = AirBuddFormBuilder,
    **overrides,
) -> AirBuddFormBuilder:
    """Builder for fields rendered inside some other form; no `<form>` tag of its own."""
    return airbudd_form_for(
        object_name, obj, errors=errors, template=template, defaults=defaults, builder=builder, **overrides
    )


def form_tag(
    *fragments: Any,
    url: str = "",
    method: str = "post",
    multipart: bool = False,
    remote: bool = False,
    template: TemplateContext | None = None,
    **html_options,
) -> Markup:
    """
    Wrap fragments in a `<form>`.

    Methods other than GET and POST are sent as POST with a hidden `_method`
    input. `remote=True` marks the form with `data-remote` for script-driven
    submission.
    """
    template = template or TemplateContext()
    method = method.lower()
    body: list[Any] = []
    form_method = method
    if method not in ("get", "post"):
        form_method = "post"
        body.append(template.tag("input", {"type": "hidden", "name": "_method", "value": method}))
    body.extend(fragments)

    attrs = {
        "action": url,
        "method": form_method,
        "enctype": "multipart/form-data" if multipart else None,
        "data-remote": "true" if remote else None,
        **html_options,
    }
    return template.content_tag("form", body, attrs)


__all__ = [
    "airbudd_form_for",
    "airbudd_fields_for",
    "form_tag",
    "link_to_form",
]
