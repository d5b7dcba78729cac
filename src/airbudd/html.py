"""
Template context: leaf tag construction and text helpers.

Every fragment is a `markupsafe.Markup`, so plain strings passed as content
or attribute values are escaped exactly once, and fragments can be handed to
Jinja2 templates without `|safe`.
"""

import re
from typing import Any, Iterable

from markupsafe import Markup, escape

_ID_UNSAFE = re.compile(r"[^-a-zA-Z0-9:.]")


def attribute_name(key: str) -> str:
    """Map a Python keyword to an HTML attribute name (`class_` -> `class`, `data_id` -> `data-id`)."""
    return key.rstrip("_").replace("_", "-")


def render_attributes(attrs: dict[str, Any] | None) -> Markup:
    """
    Render attributes in insertion order.

    `None` and `False` drop the attribute, `True` renders it bare, and
    lists or tuples are space-joined (for `class`).
    """
    if not attrs:
        return Markup("")
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = attribute_name(key)
        if value is True:
            parts.append(Markup(" {}").format(name))
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v)
        parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


def sanitize_id(value: str) -> str:
    """Turn a field name such as `article[author][name]` into `article_author_name`."""
    return _ID_UNSAFE.sub("_", value.replace("]", "")).strip("_")


def humanize(field: str) -> str:
    """`first_name` -> `First name`, `author_id` -> `Author`."""
    text = str(field)
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def to_sentence(
    words: Iterable[str],
    connector: str = ", ",
    last_connector: str = ", and ",
    two_connector: str = " and ",
) -> str:
    """Join words into a sentence: `a`, `a and b`, `a, b, and c`."""
    items = [str(w) for w in words]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return two_connector.join(items)
    return connector.join(items[:-1]) + last_connector + items[-1]


def merge_classes(*classes: str | None) -> str | None:
    """Space-join the non-empty class names, or None if there are none."""
    joined = " ".join(c for c in classes if c)
    return joined or None


class TemplateContext:
    """
    Builds leaf elements for the form builders.

    Subclass and override to change how individual tags are drawn; the
    builders only compose what this class returns.
    """

    def content_tag(self, name: str, content: Any = None, attrs: dict[str, Any] | None = None, **kwargs) -> Markup:
        """Element with content: `<name attrs>content</name>`."""
        merged = {**(attrs or {}), **kwargs}
        return Markup("<{0}{1}>{2}</{0}>").format(
            Markup(name), render_attributes(merged), self.join(content)
        )

    def tag(self, name: str, attrs: dict[str, Any] | None = None, **kwargs) -> Markup:
        """Void element: `<name attrs>`."""
        merged = {**(attrs or {}), **kwargs}
        return Markup("<{0}{1}>").format(Markup(name), render_attributes(merged))

    def join(self, content: Any) -> Markup:
        """Escape and concatenate content; lists and tuples are joined in order."""
        if content is None:
            return Markup("")
        if isinstance(content, (list, tuple)):
            return Markup("").join(self.join(c) for c in content)
        return escape(content)

    def link_to(self, legend: Any, url: str = "", attrs: dict[str, Any] | None = None) -> Markup:
        """Anchor element; attributes in `attrs` come before `href`."""
        merged = dict(attrs or {})
        merged.setdefault("href", url)
        return self.content_tag("a", legend, merged)

    def image_tag(self, src: str, alt: str = "", attrs: dict[str, Any] | None = None) -> Markup:
        return self.tag("img", {"src": src, "alt": alt, **(attrs or {})})
