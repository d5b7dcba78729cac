"""Tests for the plain form builder."""

from datetime import date, datetime, time
from types import SimpleNamespace

from airbudd.builder import FormBuilder


def builder(values=None, **kwargs):
    return FormBuilder("article", values or {}, **kwargs)


class TestInputs:
    """Tests for input-style helpers."""

    def test_text_field(self):
        assert builder({"title": "Hi"}).text_field("title") == (
            '<input type="text" id="article_title" name="article[title]" value="Hi">'
        )

    def test_no_object_name(self):
        assert FormBuilder(None, {"q": "x"}).text_field("q") == '<input type="text" id="q" name="q" value="x">'

    def test_password_never_echoes_value(self):
        assert builder({"secret": "hunter2"}).password_field("secret") == (
            '<input type="password" id="article_secret" name="article[secret]">'
        )

    def test_file_field(self):
        html = builder().file_field("attachment", {"accept": "image/*"})
        assert html == '<input type="file" id="article_attachment" name="article[attachment]" accept="image/*">'

    def test_text_area_escapes(self):
        assert builder({"body": "a < b"}).text_area("body", {"rows": 4}) == (
            '<textarea id="article_body" name="article[body]" rows="4">a &lt; b</textarea>'
        )

    def test_check_box_without_hidden(self):
        html = builder({"published": "yes"}).check_box("published", None, "yes", None)
        assert html == '<input type="checkbox" id="article_published" name="article[published]" value="yes" checked>'

    def test_radio_unchecked(self):
        html = builder({"category": "news"}).radio_button("category", "Blog Post")
        assert html == (
            '<input type="radio" id="article_category_blog_post" name="article[category]" value="Blog Post">'
        )

    def test_label_and_submit(self):
        f = builder()
        assert f.label("title") == '<label for="article_title">Title</label>'
        assert f.label("title", "Headline", {"class": "x"}) == '<label for="article_title" class="x">Headline</label>'
        assert f.submit() == '<input type="submit" name="commit" value="Save changes">'


class TestSelects:
    """Tests for select helpers."""

    def test_select_choices_mapping(self):
        html = builder({"category": "b"}).select("category", {"Alpha": "a", "Beta": "b"})
        assert html == (
            '<select id="article_category" name="article[category]">\n'
            '<option value="a">Alpha</option>\n'
            '<option value="b" selected>Beta</option>\n'
            '</select>'
        )

    def test_include_blank(self):
        html = builder().select("category", ["a"], {"include_blank": "None"})
        assert '<select id="article_category" name="article[category]">\n<option value="">None</option>\n' in html

    def test_prompt_only_when_unset(self):
        assert "Pick one" in builder().select("category", ["a"], {"prompt": "Pick one"})
        assert "Pick one" not in builder({"category": "a"}).select("category", ["a"], {"prompt": "Pick one"})

    def test_selected_option_overrides_value(self):
        html = builder({"category": "a"}).select("category", ["a", "b"], {"selected": "b"})
        assert '<option value="b" selected>b</option>' in html
        assert '<option value="a">a</option>' in html

    def test_multiple(self):
        html = builder({"tags": ["a", "c"]}).select("tags", ["a", "b", "c"], None, {"multiple": True})
        assert 'name="article[tags][]" multiple' in html
        assert html.count(" selected") == 2

    def test_collection_select(self):
        authors = [SimpleNamespace(id=1, name="Ann"), SimpleNamespace(id=2, name="Bob")]
        html = builder({"author_id": 2}).collection_select("author_id", authors, "id", "name")
        assert '<option value="1">Ann</option>' in html
        assert '<option value="2" selected>Bob</option>' in html

    def test_country_select_priority(self):
        html = builder({"country": "France"}).country_select("country", ["United Kingdom", "France"])
        assert html.index("United Kingdom") < html.index("-------------") < html.index("Afghanistan")
        assert '<option value="" disabled>-------------</option>' in html
        assert html.count(" selected") == 1
        assert '<option value="France" selected>France</option>' in html


class TestDates:
    """Tests for date and time selects."""

    def test_date_select(self):
        html = builder({"published_on": date(2024, 3, 9)}).date_select(
            "published_on", {"start_year": 2020, "end_year": 2025}
        )
        assert 'id="article_published_on_1i" name="article[published_on(1i)]"' in html
        assert '<option value="2024" selected>2024</option>' in html
        assert '<option value="2026">' not in html
        assert '<option value="3" selected>March</option>' in html
        assert '<option value="9" selected>9</option>' in html

    def test_discard_day(self):
        html = builder({"published_on": date(2024, 3, 9)}).date_select("published_on", {"discard_day": True})
        assert "(3i)" not in html
        assert '<option value="2029">2029</option>' in html

    def test_include_blank_leaves_unselected(self):
        html = builder().date_select("published_on", {"include_blank": True})
        assert html.count('<option value=""></option>') == 3
        assert " selected" not in html

    def test_default_used_when_unset(self):
        html = builder().date_select("published_on", {"default": date(2001, 2, 3)})
        assert '<option value="2001" selected>2001</option>' in html

    def test_time_select(self):
        html = builder({"starts_at": time(14, 35)}).time_select("starts_at", {"minute_step": 5})
        assert 'name="article[starts_at(4i)]"' in html
        assert '<option value="14" selected>14</option>' in html
        assert '<option value="35" selected>35</option>' in html
        assert '<option value="36">' not in html
        assert "</select> : <select" in html

    def test_datetime_select(self):
        html = builder({"starts_at": datetime(2024, 3, 9, 10, 30)}).datetime_select("starts_at")
        assert " &mdash; " in html
        for part in ("1i", "2i", "3i", "4i", "5i"):
            assert f"article[starts_at({part})]" in html

    def test_unparseable_value_renders(self):
        """Test a malformed submitted string falls back instead of raising."""
        html = builder({"published_on": "next tuesday"}).date_select("published_on", {"include_blank": True})
        assert 'name="article[published_on(1i)]"' in html
        assert " selected" not in html

    def test_iso_string_value(self):
        html = builder({"starts_at": "2024-03-09T10:30:00"}).datetime_select("starts_at")
        assert '<option value="10" selected>10</option>' in html


class TestNesting:
    """Tests for nested plain builders."""

    def test_fields_for(self):
        child = builder().fields_for("author", {"name": "Ann"})
        assert type(child) is FormBuilder
        assert child.text_field("name") == (
            '<input type="text" id="article_author_name" name="article[author][name]" value="Ann">'
        )
