"""Tests for action buttons and links."""

import pytest

from airbudd.builder import ButtonGroup, link_to_form, render_button
from airbudd.builder.buttons import PurposeMethods
from airbudd.config import FormDefaults
from airbudd.constants import Purpose
from airbudd.errors import UnsupportedFieldKind


class TestPurposes:
    """Tests for the purpose vocabulary on the builder."""

    def test_save(self, make_builder):
        """Test save is a positive submit button with an icon."""
        assert make_builder().save() == (
            '<button class="positive" type="submit">'
            '<img src="/images/icons/tick.png" alt=""> Save</button>'
        )

    def test_save_without_icon(self, make_builder):
        assert make_builder().save(icon=False) == '<button class="positive" type="submit">Save</button>'

    def test_delete(self, make_builder):
        """Test delete is a negative submit button."""
        html = make_builder().delete()
        assert html.startswith('<button class="negative" type="submit">')
        assert 'src="/images/icons/cross.png"' in html
        assert html.endswith(" Delete</button>")

    def test_new(self, make_builder):
        assert make_builder().new(url="/articles/new") == (
            '<a class="positive" href="/articles/new">'
            '<img src="/images/icons/add.png" alt=""> New</a>'
        )

    def test_cancel_defaults_to_empty_href(self, make_builder):
        assert make_builder().cancel() == (
            '<a href=""><img src="/images/icons/arrow_undo.png" alt=""> Cancel</a>'
        )

    def test_edit_with_label_and_icon(self, make_builder):
        html = make_builder().edit(label="Change", icon="wrench", url="/articles/1/edit")
        assert html == (
            '<a href="/articles/1/edit"><img src="/images/icons/wrench.png" alt=""> Change</a>'
        )

    def test_named_methods_match_button(self, make_builder):
        """Test each named method is the same as button(purpose)."""
        f = make_builder()
        for purpose in Purpose:
            assert getattr(f, purpose.value)(url="/x") == f.button(purpose.value, url="/x")

    def test_classes_merged(self, make_builder):
        html = make_builder().save({"icon": False}, {"class": "big"}, id="go")
        assert html == '<button class="positive big" id="go" type="submit">Save</button>'

    def test_label_escaped(self, make_builder):
        html = make_builder().save(icon=False, label="Save & close")
        assert ">Save &amp; close</button>" in html

    def test_unknown_purpose(self, make_builder):
        with pytest.raises(UnsupportedFieldKind) as exc_info:
            make_builder().button("archive")
        assert exc_info.value.supported == ["new", "save", "cancel", "edit", "delete"]

    def test_icon_settings(self):
        defaults = FormDefaults(icon_path="/static/icons/", icon_extension="gif")
        html = render_button("save", defaults=defaults)
        assert 'src="/static/icons/tick.gif"' in html

    def test_purpose_methods_need_button(self):
        """Test the purpose mixin cannot be used without a button method."""
        with pytest.raises(TypeError):
            PurposeMethods()

        class Recorder(PurposeMethods):
            def button(self, purpose, options=None, html_options=None, **kwargs):
                return purpose

        assert Recorder().delete() is Purpose.DELETE


class TestButtonGroup:
    """Tests for the buttons container."""

    def test_context_manager(self, make_builder):
        f = make_builder()
        with f.buttons() as group:
            group.save(icon=False)
            group.cancel(url="/articles", icon=False)
        assert group.render() == (
            '<div class="buttons">'
            '<button class="positive" type="submit">Save</button>'
            '<a href="/articles">Cancel</a>'
            '</div>'
        )

    def test_prefilled(self, make_builder):
        f = make_builder()
        group = f.buttons(f.save(icon=False))
        assert group.__html__() == '<div class="buttons"><button class="positive" type="submit">Save</button></div>'
        assert str(group) == group.render()

    def test_empty_and_add(self):
        group = ButtonGroup(defaults=FormDefaults(buttons_class="actions"))
        assert group.render() == '<div class="actions"></div>'
        group.add("<b>")
        assert group.render() == '<div class="actions">&lt;b&gt;</div>'


class TestLinkToForm:
    """Tests for stand-alone form links."""

    def test_url_string(self):
        assert link_to_form("new", "/articles/new") == (
            '<div class="buttons"><a class="positive" href="/articles/new">'
            '<img src="/images/icons/add.png" alt=""> New</a></div>'
        )

    def test_options_dict(self):
        html = link_to_form("delete", {"url": "/articles/1", "label": "Remove", "icon": False})
        assert html == '<div class="buttons"><a class="negative" href="/articles/1">Remove</a></div>'

    def test_html_options(self):
        html = link_to_form("edit", "/articles/1/edit", {"data_confirm": "Sure?"})
        assert '<a data-confirm="Sure?" href="/articles/1/edit">' in html

    def test_save_is_not_a_link(self):
        with pytest.raises(UnsupportedFieldKind):
            link_to_form("save", "/articles")
