"""
Jinja2 integration.

    env = jinja2.Environment(autoescape=True)
    init_app(env)

    {% set f = airbudd_form_for("article", article, errors=errors) %}
    {{ form_tag(f.text_field("title", required=True), f.buttons(f.save()), url="/articles") }}

All helpers return `Markup`, so they render unescaped under autoescaping.
"""

import functools
import logging

from jinja2 import Environment

from airbudd.config import FormDefaults
from airbudd.helpers import airbudd_fields_for, airbudd_form_for, form_tag, link_to_form

logger = logging.getLogger("airbudd.jinja")

GLOBAL_NAMES = ("airbudd_form_for", "airbudd_fields_for", "form_tag", "link_to_form")


def init_app(env: Environment, defaults: FormDefaults | None = None) -> Environment:
    """
    Register the AirBudd helpers as globals of a Jinja2 environment.

    Args:
        env: The environment to extend.
        defaults: Settings used by every helper rendered in this
            environment. Omit to use the process-wide defaults at render time.
    """
    helpers = {
        "airbudd_form_for": airbudd_form_for,
        "airbudd_fields_for": airbudd_fields_for,
        "form_tag": form_tag,
        "link_to_form": link_to_form,
    }
    if defaults is not None:
        for name in ("airbudd_form_for", "airbudd_fields_for", "link_to_form"):
            helpers[name] = functools.partial(helpers[name], defaults=defaults)

    env.globals.update(helpers)
    logger.debug(f"Registered AirBudd helpers: {', '.join(GLOBAL_NAMES)}")
    return env
