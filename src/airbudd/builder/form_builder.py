"""
AirBudd form builder.

Wraps each field helper of the plain `FormBuilder` in a `<p>` block with a
generated label, required marker, inline error feedback, addendum and hint:

    form.text_field("title", required=True, hint="Keep it short")

renders, for a record whose title failed validation:

    <p class="error text">
      <label for="article_title">Title: <em class="required">(required)</em>
        <span class="feedback">Can't be blank.</span></label>
      <input type="text" id="article_title" name="article[title]">
      <span class="hint">Keep it short</span>
    </p>

Options the wrapper consumes (label, suffix, required, hint, addendum,
capitalize) are removed before the plain helper is called; any other option
is passed through to it.
"""

import logging
from typing import Any, Callable, Iterable

from markupsafe import Markup

from airbudd.builder.base import Choices, FormBuilder
from airbudd.builder.buttons import ButtonGroup, PurposeMethods, render_button
from airbudd.config import FormDefaults, get_config
from airbudd.constants import KIND_CLASSES, SHORT_KINDS, FieldKind, Purpose
from airbudd.errors import UnsupportedFieldKind
from airbudd.html import TemplateContext, attribute_name, humanize, merge_classes, to_sentence
from airbudd.models.bound_object import ErrorSource
from airbudd.models.render_options import RenderOptions

logger = logging.getLogger("airbudd.builder")


class AirBuddFormBuilder(PurposeMethods, FormBuilder):
    """
    Form builder with labelled, error-aware field helpers and action buttons.

    Args:
        object_name: Prefix for field names and ids.
        obj: The record being edited (see `FormBuilder`).
        template: Tag construction context.
        errors: Validation errors for `obj`.
        defaults: Settings for this form; the process-wide defaults when
            omitted.
        **overrides: Per-form overrides of individual settings, e.g.
            `label_suffix=""`.
    """

    def __init__(
        self,
        object_name: str | None,
        obj: Any = None,
        template: TemplateContext | None = None,
        errors: ErrorSource = None,
        defaults: FormDefaults | None = None,
        **overrides,
    ):
        super().__init__(object_name, obj, template=template, errors=errors)
        base = defaults or get_config()
        self.defaults = base.derive(**overrides) if overrides else base

    def _child_kwargs(self, errors: ErrorSource) -> dict[str, Any]:
        return {**super()._child_kwargs(errors), "defaults": self.defaults}

    # -- generic dispatch ----------------------------------------------

    def field(self, kind: FieldKind | str, method: str, *args, **kwargs) -> Markup:
        """
        Render a field by kind name, e.g. `field("text_field", "title")`.

        Raises:
            UnsupportedFieldKind: If `kind` is not a decorated field helper.
        """
        try:
            kind = FieldKind(kind)
        except ValueError:
            logger.error(f"Unsupported field kind: {kind!r}")
            raise UnsupportedFieldKind(str(kind), [k.value for k in FieldKind]) from None
        logger.debug(f"Rendering {kind.value} for {self.object_name}.{method}")
        return self._renderers()[kind](method, *args, **kwargs)

    def _renderers(self) -> dict[FieldKind, Callable[..., Markup]]:
        return {
            FieldKind.TEXT_FIELD: self.text_field,
            FieldKind.TEXT_AREA: self.text_area,
            FieldKind.PASSWORD_FIELD: self.password_field,
            FieldKind.FILE_FIELD: self.file_field,
            FieldKind.DATE_SELECT: self.date_select,
            FieldKind.DATETIME_SELECT: self.datetime_select,
            FieldKind.TIME_SELECT: self.time_select,
            FieldKind.COUNTRY_SELECT: self.country_select,
            FieldKind.SELECT: self.select,
            FieldKind.COLLECTION_SELECT: self.collection_select,
            FieldKind.CHECK_BOX: self.check_box,
            FieldKind.RADIO_BUTTON: self.radio_button,
            FieldKind.READ_ONLY_TEXT_FIELD: self.read_only_text_field,
        }

    # -- text-like fields ----------------------------------------------

    def text_field(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        """Text input. `html_options` are attributes of the `<label>`."""
        return self._simple(FieldKind.TEXT_FIELD, super().text_field, method, options, html_options, kwargs)

    def text_area(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self._simple(FieldKind.TEXT_AREA, super().text_area, method, options, html_options, kwargs)

    def password_field(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self._simple(FieldKind.PASSWORD_FIELD, super().password_field, method, options, html_options, kwargs)

    def file_field(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        return self._simple(FieldKind.FILE_FIELD, super().file_field, method, options, html_options, kwargs)

    def read_only_text_field(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        """The value as plain text, carried by a hidden input."""
        opts = RenderOptions.split(options, **kwargs)
        value = self.value(method)
        input_html = FormBuilder.hidden_field(self, method, opts.passthrough) + self.template.content_tag(
            "span", "" if value is None else str(value), {"class": "read_only"}
        )
        for_id = opts.passthrough.get("id", self.tag_id(method))
        return self._wrap(FieldKind.READ_ONLY_TEXT_FIELD, method, opts, html_options, input_html, for_id)

    def _simple(
        self,
        kind: FieldKind,
        host: Callable[[str, dict], Markup],
        method: str,
        options: dict | None,
        html_options: dict | None,
        kwargs: dict,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = host(method, opts.passthrough)
        for_id = opts.passthrough.get("id", self.tag_id(method))
        return self._wrap(kind, method, opts, html_options, input_html, for_id)

    # -- check boxes and radios ----------------------------------------

    def check_box(
        self,
        method: str,
        options: dict | None = None,
        html_options: dict | None = None,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
        **kwargs,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().check_box(method, opts.passthrough, checked_value, unchecked_value)
        for_id = opts.passthrough.get("id", self.tag_id(method))
        return self._wrap(FieldKind.CHECK_BOX, method, opts, html_options, input_html, for_id)

    def radio_button(
        self,
        method: str,
        tag_value: Any,
        options: dict | None = None,
        html_options: dict | None = None,
        **kwargs,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().radio_button(method, tag_value, opts.passthrough)
        for_id = opts.passthrough.get("id", self.radio_id(method, tag_value))
        return self._wrap(FieldKind.RADIO_BUTTON, method, opts, html_options, input_html, for_id)

    # -- selects -------------------------------------------------------
    # For selects `html_options` belong to the <select>, as in the plain
    # builder; the label only gets its `for`.

    def select(
        self,
        method: str,
        choices: Choices,
        options: dict | None = None,
        html_options: dict | None = None,
        **kwargs,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().select(method, choices, opts.passthrough, html_options)
        return self._wrap(FieldKind.SELECT, method, opts, None, input_html, self._select_id(method, html_options))

    def collection_select(
        self,
        method: str,
        collection: Iterable[Any],
        value_method: str,
        text_method: str,
        options: dict | None = None,
        html_options: dict | None = None,
        **kwargs,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().collection_select(
            method, collection, value_method, text_method, opts.passthrough, html_options
        )
        return self._wrap(
            FieldKind.COLLECTION_SELECT, method, opts, None, input_html, self._select_id(method, html_options)
        )

    def country_select(
        self,
        method: str,
        priority_countries: list[str] | None = None,
        options: dict | None = None,
        html_options: dict | None = None,
        **kwargs,
    ) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().country_select(method, priority_countries, opts.passthrough, html_options)
        return self._wrap(
            FieldKind.COUNTRY_SELECT, method, opts, None, input_html, self._select_id(method, html_options)
        )

    def date_select(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().date_select(method, opts.passthrough, html_options)
        return self._wrap(FieldKind.DATE_SELECT, method, opts, None, input_html, f"{self.tag_id(method)}_1i")

    def datetime_select(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().datetime_select(method, opts.passthrough, html_options)
        return self._wrap(FieldKind.DATETIME_SELECT, method, opts, None, input_html, f"{self.tag_id(method)}_1i")

    def time_select(self, method: str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        opts = RenderOptions.split(options, **kwargs)
        input_html = super().time_select(method, opts.passthrough, html_options)
        return self._wrap(FieldKind.TIME_SELECT, method, opts, None, input_html, f"{self.tag_id(method)}_4i")

    def _select_id(self, method: str, html_options: dict | None) -> str:
        return (html_options or {}).get("id") or self.tag_id(method)

    # -- composition ---------------------------------------------------

    def _wrap(
        self,
        kind: FieldKind,
        method: str,
        opts: RenderOptions,
        html_options: dict | None,
        input_html: Markup,
        for_id: str,
    ) -> Markup:
        label = self.label_element(method, opts, html_options, for_id)
        hint = self._span("hint", opts.hint)
        if kind in SHORT_KINDS:
            body = [input_html, label, hint]
        else:
            body = [label, input_html, self._span("addendum", opts.addendum), hint]
        error = "error" if self.object.has_errors(method) else None
        return self.template.content_tag("p", body, {"class": merge_classes(error, KIND_CLASSES[kind])})

    def label_element(
        self,
        method: str,
        opts: RenderOptions,
        html_options: dict | None = None,
        for_id: str | None = None,
    ) -> Markup:
        """
        The `<label>` for a field: text and suffix, then the required marker,
        then error feedback. Empty when the label was explicitly set to None.
        """
        if opts.label_suppressed:
            return Markup("")
        text = opts.label if opts.label is not None else self.display_name(method)
        suffix = self.defaults.label_suffix if opts.suffix is None else opts.suffix
        content: list[Any] = [text + suffix]

        marker = self._required_marker(method, opts.required)
        if marker:
            content += [Markup(" "), marker]
        if self.object.has_errors(method):
            content += [Markup(" "), self._feedback(method, opts.capitalize)]

        attrs = {"for": for_id or self.tag_id(method)}
        attrs.update({attribute_name(k): v for k, v in (html_options or {}).items()})
        return self.template.content_tag("label", content, attrs)

    def display_name(self, method: str) -> str:
        """Model-declared display name if the bound object offers one, else the humanized field name."""
        lookup = getattr(self.object, "human_attribute_name", None)
        name = lookup(method) if lookup else None
        return name or humanize(method)

    def _required_marker(self, method: str, required: bool | str | None) -> Markup | None:
        if required is None:
            infer = getattr(self.object, "is_required", None)
            required = bool(infer(method)) if infer else False
        if not required:
            return None
        text = required if isinstance(required, str) else self.defaults.required_signifier
        return self.template.content_tag("em", text, {"class": "required"})

    def _feedback(self, method: str, capitalize: bool | None) -> Markup:
        sentence = to_sentence(self.object.errors_for(method))
        if self.defaults.capitalize_errors if capitalize is None else capitalize:
            sentence = sentence[:1].upper() + sentence[1:]
        if not sentence.endswith("."):
            sentence += "."
        return self.template.content_tag("span", sentence, {"class": "feedback"})

    def _span(self, css_class: str, text: str | None) -> Markup:
        if not text:
            return Markup("")
        return self.template.content_tag("span", text, {"class": css_class})

    # -- buttons -------------------------------------------------------

    def button(self, purpose: Purpose | str, options: dict | None = None, html_options: dict | None = None, **kwargs) -> Markup:
        """Action button or link for a purpose; see `render_button`."""
        return render_button(
            purpose, options, html_options, template=self.template, defaults=self.defaults, **kwargs
        )

    def buttons(self, *fragments: Any) -> ButtonGroup:
        """
        A buttons container, pre-filled with `fragments`. Also a context
        manager yielding the group for adding controls one at a time.
        """
        return ButtonGroup(self.template, self.defaults, fragments)
