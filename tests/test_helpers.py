"""Tests for template helpers and the Jinja2 integration."""

from jinja2 import Environment

from airbudd.builder import AirBuddFormBuilder
from airbudd.config import FormDefaults
from airbudd.helpers import airbudd_fields_for, airbudd_form_for, form_tag
from airbudd.jinja import init_app


class TestFormFor:
    """Tests for builder entry points."""

    def test_form_for_returns_airbudd_builder(self):
        f = airbudd_form_for("article", {"title": "Hi"}, errors={"title": ["is short"]})
        assert isinstance(f, AirBuddFormBuilder)
        assert f.text_field("title").startswith('<p class="error text">')

    def test_overrides(self):
        f = airbudd_form_for("article", defaults=FormDefaults(), label_suffix="")
        assert f.defaults.label_suffix == ""

    def test_fields_for(self):
        f = airbudd_fields_for("comment", {"body": "Nice"})
        assert 'name="comment[body]"' in f.text_area("body")


class TestFormTag:
    """Tests for the enclosing form element."""

    def test_post(self):
        assert form_tag("<x>", url="/articles") == '<form action="/articles" method="post">&lt;x&gt;</form>'

    def test_method_override(self):
        html = form_tag(url="/articles/1", method="DELETE")
        assert html == (
            '<form action="/articles/1" method="post">'
            '<input type="hidden" name="_method" value="delete"></form>'
        )

    def test_multipart_and_remote(self):
        html = form_tag(url="/upload", multipart=True, remote=True, id="upload")
        assert html == (
            '<form action="/upload" method="post" enctype="multipart/form-data" '
            'data-remote="true" id="upload"></form>'
        )

    def test_get(self):
        assert form_tag(url="/search", method="get") == '<form action="/search" method="get"></form>'


class TestJinja:
    """Tests for rendering from Jinja2 templates."""

    def test_builder_output_not_escaped(self):
        env = init_app(Environment(autoescape=True))
        template = env.from_string(
            '{% set f = airbudd_form_for("article", article, errors=errors) %}'
            '{{ form_tag(f.text_field("title", required=True), f.buttons(f.save(icon=False)), url="/articles") }}'
        )
        html = template.render(article={"title": "<x>"}, errors={"title": ["can't be blank"]})
        assert html.startswith('<form action="/articles" method="post"><p class="error text">')
        assert 'value="&lt;x&gt;"' in html
        assert '<span class="feedback">Can&#39;t be blank.</span>' in html
        assert html.endswith(
            '<div class="buttons"><button class="positive" type="submit">Save</button></div></form>'
        )

    def test_button_group_renders_directly(self):
        env = init_app(Environment(autoescape=True))
        html = env.from_string(
            '{% set f = airbudd_form_for("article") %}{{ f.buttons(f.cancel(url="/", icon=False)) }}'
        ).render()
        assert html == '<div class="buttons"><a href="/">Cancel</a></div>'

    def test_environment_defaults(self):
        env = init_app(Environment(autoescape=True), FormDefaults(label_suffix="", icon_path="/static"))
        html = env.from_string(
            '{{ airbudd_form_for("article").text_field("title") }}{{ link_to_form("new", "/n") }}'
        ).render()
        assert '<label for="article_title">Title</label>' in html
        assert 'src="/static/add.png"' in html
