"""
Action buttons and links.

Each purpose (new, save, cancel, edit, delete) has a fixed element, icon
and styling nature. `PurposeMethods` gives any class with a `button`
method one named method per purpose.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable

from markupsafe import Markup

from airbudd.config import FormDefaults, get_config
from airbudd.constants import BUTTON_STYLES, LINK_PURPOSES, Purpose
from airbudd.errors import UnsupportedFieldKind
from airbudd.html import TemplateContext, attribute_name, merge_classes

logger = logging.getLogger("airbudd.buttons")


def resolve_purpose(purpose: Purpose | str, allowed: Iterable[Purpose] = tuple(Purpose)) -> Purpose:
    """Look up a purpose by name.

    Raises:
        UnsupportedFieldKind: If the purpose is not one of `allowed`.
    """
    allowed = list(allowed)
    try:
        resolved = Purpose(purpose)
    except ValueError:
        resolved = None
    if resolved not in allowed:
        logger.error(f"Unsupported button purpose: {purpose!r}")
        raise UnsupportedFieldKind(str(purpose), [p.value for p in allowed])
    return resolved


def icon_src(icon: str, defaults: FormDefaults) -> str:
    return f"{defaults.icon_path.rstrip('/')}/{icon}.{defaults.icon_extension}"


def _legend(
    template: TemplateContext,
    defaults: FormDefaults,
    purpose: Purpose,
    icon: str | bool | None,
    label: str | None,
) -> Markup:
    text = label or purpose.value.capitalize()
    if icon is False:
        return template.join(text)
    if not isinstance(icon, str):
        icon = BUTTON_STYLES[purpose].icon
    return template.image_tag(icon_src(icon, defaults)) + Markup(" ") + template.join(text)


def _attributes(nature: str | None, html_options: dict[str, Any]) -> dict[str, Any]:
    """Normalize attribute names and put the merged class first."""
    attrs = {attribute_name(k): v for k, v in html_options.items()}
    extra_class = attrs.pop("class", None)
    return {"class": merge_classes(nature, extra_class), **attrs}


def render_button(
    purpose: Purpose | str,
    options: dict[str, Any] | None = None,
    html_options: dict[str, Any] | None = None,
    *,
    template: TemplateContext | None = None,
    defaults: FormDefaults | None = None,
    **kwargs,
) -> Markup:
    """
    Render the button or link for a purpose.

    Options:
        icon: False to omit the icon image, or an icon name to replace the
            purpose's default.
        label: Legend text; defaults to the capitalized purpose.
        url: Link target for link-style purposes (default "").

    Any other option, and everything in `html_options`, becomes an
    attribute. A `class` attribute is merged with the purpose's nature.
    """
    purpose = resolve_purpose(purpose)
    template = template or TemplateContext()
    defaults = defaults or get_config()
    options = {**(options or {}), **kwargs}
    style = BUTTON_STYLES[purpose]

    legend = _legend(template, defaults, purpose, options.pop("icon", None), options.pop("label", None))
    url = options.pop("url", None)
    attrs = _attributes(style.nature, {**options, **(html_options or {})})

    if style.element == "button":
        attrs.setdefault("type", "submit")
        return template.content_tag("button", legend, attrs)
    return template.link_to(legend, url or "", attrs)


class PurposeMethods(ABC):
    """One method per purpose, delegating to `self.button`."""

    @abstractmethod
    def button(self, purpose: Purpose | str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        """Render the control for `purpose`."""

    def new(self, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self.button(Purpose.NEW, options, html_options, **kwargs)

    def save(self, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self.button(Purpose.SAVE, options, html_options, **kwargs)

    def cancel(self, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self.button(Purpose.CANCEL, options, html_options, **kwargs)

    def edit(self, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self.button(Purpose.EDIT, options, html_options, **kwargs)

    def delete(self, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self.button(Purpose.DELETE, options, html_options, **kwargs)


class ButtonGroup(PurposeMethods):
    """
    A `<div class="buttons">` collecting buttons and links.

    Use as a context manager to add controls one by one:

        with form.buttons() as group:
            group.save()
            group.cancel(url="/articles")
        html = group.render()

    The group renders itself in Jinja2 templates through `__html__`.
    """

    def __init__(
        self,
        template: TemplateContext | None = None,
        defaults: FormDefaults | None = None,
        fragments: Iterable[Any] = (),
    ):
        self.template = template or TemplateContext()
        self.defaults = defaults or get_config()
        self.items: list[Markup] = [self.template.join(f) for f in fragments]

    def button(self, purpose: Purpose | str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        html = render_button(
            purpose, options, html_options, template=self.template, defaults=self.defaults, **kwargs
        )
        self.items.append(html)
        return html

    def add(self, fragment: Any) -> None:
        """Add any other markup (e.g. a plain link) to the group."""
        self.items.append(self.template.join(fragment))

    def render(self) -> Markup:
        return self.template.content_tag("div", self.items, {"class": self.defaults.buttons_class})

    def __enter__(self) -> "ButtonGroup":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def __html__(self) -> Markup:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())


def link_to_form(
    purpose: Purpose | str,
    options: dict[str, Any] | str | None = None,
    html_options: dict[str, Any] | None = None,
    *,
    template: TemplateContext | None = None,
    defaults: FormDefaults | None = None,
) -> Markup:
    """
    A stand-alone link styled like the form buttons, in its own buttons div.

    `options` is either the URL or a dict with `url`, `label` and `icon`.
    Only new, edit, delete and cancel are drawn, always as links.
    """
    purpose = resolve_purpose(purpose, LINK_PURPOSES)
    template = template or TemplateContext()
    defaults = defaults or get_config()
    if isinstance(options, str):
        options = {"url": options}
    options = dict(options or {})

    legend = _legend(template, defaults, purpose, options.pop("icon", None), options.pop("label", None))
    url = options.pop("url", None) or ""
    attrs = _attributes(BUTTON_STYLES[purpose].nature, {**options, **(html_options or {})})
    link = template.link_to(legend, url, attrs)
    return template.content_tag("div", link, {"class": defaults.buttons_class})
