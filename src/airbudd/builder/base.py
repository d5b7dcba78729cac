"""
Plain form builder.

Renders the native, undecorated markup for each field helper. Field names
follow the `object[field]` convention and ids the `object_field` one. The
AirBudd builder wraps these helpers; they are usable on their own too.
"""

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from markupsafe import Markup

from airbudd.constants import COUNTRIES, MONTH_NAMES
from airbudd.html import TemplateContext, humanize, sanitize_id
from airbudd.models.bound_object import BoundObject, ErrorSource, bind

Choices = Iterable[Any] | Mapping[str, Any]

COUNTRY_SEPARATOR = "-------------"


def _normalize_choices(choices: Choices) -> list[tuple[str, Any]]:
    """Choices as (text, value) pairs; bare items are their own text."""
    if isinstance(choices, Mapping):
        return [(str(text), value) for text, value in choices.items()]
    pairs = []
    for choice in choices:
        if isinstance(choice, (list, tuple)) and len(choice) == 2:
            pairs.append((str(choice[0]), choice[1]))
        else:
            pairs.append((str(choice), choice))
    return pairs


def _is_selected(value: Any, selected: Any) -> bool:
    if selected is None:
        return False
    if isinstance(selected, (list, tuple, set, frozenset)):
        return str(value) in {str(s) for s in selected}
    return str(value) == str(selected)


def _read(item: Any, attribute: str) -> Any:
    if isinstance(item, Mapping):
        return item[attribute]
    return getattr(item, attribute)


def _as_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, time):
        today = date.today()
        return datetime.combine(today, value)
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        # Unparseable submissions re-render with nothing selected.
        return None


class FormBuilder:
    """
    Native field helpers for one bound object.

    Args:
        object_name: Prefix for field names and ids (e.g. "article"). May be
            None for forms not tied to a record.
        obj: The record: anything `bind` accepts (a `BoundObject`, a pydantic
            model, a mapping, or None).
        template: Tag construction context.
        errors: Validation errors for `obj` when it is not already bound.
    """

    def __init__(
        self,
        object_name: str | None,
        obj: Any = None,
        template: TemplateContext | None = None,
        errors: ErrorSource = None,
    ):
        self.object_name = object_name
        self.object: BoundObject = bind(obj, errors)
        self.template = template or TemplateContext()

    # -- naming ---------------------------------------------------------

    def tag_name(self, method: str, multiple: bool = False) -> str:
        name = f"{self.object_name}[{method}]" if self.object_name else method
        return f"{name}[]" if multiple else name

    def tag_id(self, method: str) -> str:
        if self.object_name:
            return sanitize_id(f"{self.object_name}_{method}")
        return sanitize_id(method)

    def value(self, method: str) -> Any:
        return self.object.value_for(method)

    # -- inputs ---------------------------------------------------------

    def _input(self, input_type: str, method: str, options: dict | None, with_value: bool = True) -> Markup:
        attrs: dict[str, Any] = {
            "type": input_type,
            "id": self.tag_id(method),
            "name": self.tag_name(method),
        }
        if with_value:
            value = self.value(method)
            attrs["value"] = None if value is None else str(value)
        attrs.update(options or {})
        return self.template.tag("input", attrs)

    def text_field(self, method: str, options: dict | None = None) -> Markup:
        return self._input("text", method, options)

    def password_field(self, method: str, options: dict | None = None) -> Markup:
        return self._input("password", method, options, with_value=False)

    def file_field(self, method: str, options: dict | None = None) -> Markup:
        return self._input("file", method, options, with_value=False)

    def hidden_field(self, method: str, options: dict | None = None) -> Markup:
        return self._input("hidden", method, options)

    def text_area(self, method: str, options: dict | None = None) -> Markup:
        attrs = {"id": self.tag_id(method), "name": self.tag_name(method), **(options or {})}
        value = attrs.pop("value", self.value(method))
        return self.template.content_tag("textarea", "" if value is None else str(value), attrs)

    def check_box(
        self,
        method: str,
        options: dict | None = None,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
    ) -> Markup:
        """
        Check box preceded by a hidden input carrying `unchecked_value`, so
        an unticked box still submits a value. Pass `unchecked_value=None`
        to drop the hidden input.
        """
        attrs = dict(options or {})
        if "checked" not in attrs:
            current = self.value(method)
            if isinstance(current, bool):
                attrs["checked"] = current
            else:
                attrs["checked"] = _is_selected(checked_value, current)
        box = self.template.tag("input", {
            "type": "checkbox",
            "id": self.tag_id(method),
            "name": self.tag_name(method),
            "value": str(checked_value),
            **attrs,
        })
        if unchecked_value is None:
            return box
        hidden = self.template.tag("input", {
            "type": "hidden",
            "name": attrs.get("name", self.tag_name(method)),
            "value": str(unchecked_value),
        })
        return hidden + box

    def radio_button(self, method: str, tag_value: Any, options: dict | None = None) -> Markup:
        attrs = dict(options or {})
        attrs.setdefault("checked", _is_selected(tag_value, self.value(method)))
        return self.template.tag("input", {
            "type": "radio",
            "id": self.radio_id(method, tag_value),
            "name": self.tag_name(method),
            "value": str(tag_value),
            **attrs,
        })

    def radio_id(self, method: str, tag_value: Any) -> str:
        return f"{self.tag_id(method)}_{sanitize_id(str(tag_value).lower())}"

    # -- selects --------------------------------------------------------

    def options_for_select(self, choices: Choices, selected: Any = None) -> Markup:
        return Markup("\n").join(
            self.template.content_tag(
                "option", text, {"value": str(value), "selected": _is_selected(value, selected)}
            )
            for text, value in _normalize_choices(choices)
        )

    def _select_tag(
        self,
        method: str,
        option_tags: Markup,
        options: dict | None,
        html_options: dict | None,
        name: str | None = None,
        tag_id: str | None = None,
    ) -> Markup:
        options = options or {}
        attrs = dict(html_options or {})
        value = options.get("selected", self.value(method))
        blank = Markup("")
        include_blank = options.get("include_blank")
        if include_blank:
            text = include_blank if isinstance(include_blank, str) else ""
            blank = self.template.content_tag("option", text, {"value": ""}) + Markup("\n")
        elif options.get("prompt") and value is None:
            blank = self.template.content_tag("option", options["prompt"], {"value": ""}) + Markup("\n")
        attrs = {
            "id": tag_id or self.tag_id(method),
            "name": name or self.tag_name(method, multiple=bool(attrs.get("multiple"))),
            **attrs,
        }
        return self.template.content_tag("select", Markup("\n") + blank + option_tags + Markup("\n"), attrs)

    def select(
        self,
        method: str,
        choices: Choices,
        options: dict | None = None,
        html_options: dict | None = None,
    ) -> Markup:
        """
        Select box.

        `options` understands `include_blank` (True or blank option text),
        `prompt` (shown only while the value is unset) and `selected`
        (overrides the bound value). `html_options` are `<select>` attributes.
        """
        return self._choice_select(method, choices, options, html_options)

    def _choice_select(self, method: str, choices: Choices, options: dict | None, html_options: dict | None) -> Markup:
        selected = (options or {}).get("selected", self.value(method))
        return self._select_tag(method, self.options_for_select(choices, selected), options, html_options)

    def collection_select(
        self,
        method: str,
        collection: Iterable[Any],
        value_method: str,
        text_method: str,
        options: dict | None = None,
        html_options: dict | None = None,
    ) -> Markup:
        choices = [(_read(item, text_method), _read(item, value_method)) for item in collection]
        return self._choice_select(method, choices, options, html_options)

    def country_select(
        self,
        method: str,
        priority_countries: list[str] | None = None,
        options: dict | None = None,
        html_options: dict | None = None,
    ) -> Markup:
        """Select of country names; priority countries come first, above a disabled separator."""
        selected = (options or {}).get("selected", self.value(method))
        option_tags = Markup("")
        if priority_countries:
            option_tags = self.options_for_select(priority_countries, selected) + Markup("\n")
            option_tags += self.template.content_tag(
                "option", COUNTRY_SEPARATOR, {"value": "", "disabled": True}
            ) + Markup("\n")
            # Selected only once, in the priority block
            if _is_selected(selected, priority_countries):
                selected = None
        option_tags += self.options_for_select(COUNTRIES, selected)
        return self._select_tag(method, option_tags, options, html_options)

    # -- dates and times ------------------------------------------------

    def _datetime_part(
        self,
        method: str,
        position: int,
        choices: list[tuple[str, int]],
        selected: int | None,
        options: dict,
        html_options: dict | None,
    ) -> Markup:
        suffix = f"({position}i)"
        return self._select_tag(
            method,
            self.options_for_select(choices, selected),
            {"include_blank": options.get("include_blank")},
            html_options,
            name=self.tag_name(f"{method}{suffix}"),
            tag_id=f"{self.tag_id(method)}_{position}i",
        )

    def _current_datetime(self, method: str, options: dict) -> datetime | None:
        value = self.value(method)
        if value is None:
            value = options.get("default")
        current = _as_datetime(value)
        if current is None and not options.get("include_blank"):
            current = datetime.now()
        return current

    def _date_parts(self, method: str, current: datetime | None, options: dict, html_options: dict | None) -> list[Markup]:
        anchor = current.year if current else date.today().year
        start_year = options.get("start_year", anchor - 5)
        end_year = options.get("end_year", anchor + 5)
        step = 1 if end_year >= start_year else -1
        years = [(str(y), y) for y in range(start_year, end_year + step, step)]
        months = [(name, i) for i, name in enumerate(MONTH_NAMES, start=1)]
        days = [(str(d), d) for d in range(1, 32)]
        parts = [
            self._datetime_part(method, 1, years, current.year if current else None, options, html_options),
            self._datetime_part(method, 2, months, current.month if current else None, options, html_options),
        ]
        if not options.get("discard_day"):
            parts.append(
                self._datetime_part(method, 3, days, current.day if current else None, options, html_options)
            )
        return parts

    def _time_parts(self, method: str, current: datetime | None, options: dict, html_options: dict | None) -> list[Markup]:
        minute_step = options.get("minute_step", 1)
        hours = [(f"{h:02d}", h) for h in range(24)]
        minutes = [(f"{m:02d}", m) for m in range(0, 60, minute_step)]
        return [
            self._datetime_part(method, 4, hours, current.hour if current else None, options, html_options),
            self._datetime_part(method, 5, minutes, current.minute if current else None, options, html_options),
        ]

    def date_select(self, method: str, options: dict | None = None, html_options: dict | None = None) -> Markup:
        """
        Year, month and day selects named `object[method(1i)]` to `(3i)`.

        Options: `start_year`, `end_year` (default five years either side of
        the value), `include_blank`, `discard_day`, `default`.
        """
        options = options or {}
        current = self._current_datetime(method, options)
        return Markup("\n").join(self._date_parts(method, current, options, html_options))

    def time_select(self, method: str, options: dict | None = None, html_options: dict | None = None) -> Markup:
        """Hour and minute selects, `(4i)` and `(5i)`. Options: `minute_step`, `include_blank`, `default`."""
        options = options or {}
        current = self._current_datetime(method, options)
        return Markup(" : ").join(self._time_parts(method, current, options, html_options))

    def datetime_select(self, method: str, options: dict | None = None, html_options: dict | None = None) -> Markup:
        options = options or {}
        current = self._current_datetime(method, options)
        date_html = Markup("\n").join(self._date_parts(method, current, options, html_options))
        time_html = Markup(" : ").join(self._time_parts(method, current, options, html_options))
        return date_html + Markup(" &mdash; ") + time_html

    # -- misc -----------------------------------------------------------

    def label(self, method: str, text: str | None = None, attrs: dict | None = None) -> Markup:
        merged = {"for": self.tag_id(method), **(attrs or {})}
        return self.template.content_tag("label", text or humanize(method), merged)

    def submit(self, value: str = "Save changes", attrs: dict | None = None) -> Markup:
        return self.template.tag("input", {"type": "submit", "name": "commit", "value": value, **(attrs or {})})

    def fields_for(self, child_name: str, obj: Any = None, errors: ErrorSource = None) -> "FormBuilder":
        """Builder for a nested record; fields are named `parent[child][field]`."""
        name = f"{self.object_name}[{child_name}]" if self.object_name else child_name
        return type(self)(name, obj, **self._child_kwargs(errors))

    def _child_kwargs(self, errors: ErrorSource) -> dict[str, Any]:
        return {"template": self.template, "errors": errors}
