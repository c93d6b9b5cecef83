"""Tests for attribute serialization."""

from __future__ import annotations

import pytest

from quire import html, xml


def _render(**attrs: object) -> str:
    return html(lambda r: r.div(**attrs)).render()


class TestAttributes:
    def test_values_are_written_verbatim(self) -> None:
        assert _render(class_="blue and green") == '<div class="blue and green"/>'
        assert _render(onclick="return doit();") == '<div onclick="return doit();"/>'

    def test_values_are_not_entity_escaped(self) -> None:
        """Ordinary attribute values are inserted as-is (unlike text content)."""
        assert _render(title="a & b") == '<div title="a & b"/>'

    def test_non_string_values(self) -> None:
        assert _render(tabindex=1) == '<div tabindex="1"/>'

    def test_insertion_order_is_preserved(self) -> None:
        assert _render(z="1", a="2", m="3") == '<div z="1" a="2" m="3"/>'


class TestValuelessAttributes:
    def test_true_emits_name_only(self) -> None:
        component = html(lambda r: r.input(type="checkbox", checked=True))
        assert component.render() == '<input type="checkbox" checked/>'

    def test_false_omits_attribute(self) -> None:
        component = html(lambda r: r.input(type="checkbox", checked=False))
        assert component.render() == '<input type="checkbox"/>'

    def test_none_omits_attribute(self) -> None:
        assert _render(id=None, class_="x") == '<div class="x"/>'

    def test_true_name_is_hyphenated(self) -> None:
        assert _render(data_active=True) == "<div data-active/>"


class TestURIAttributes:
    def test_href_is_percent_encoded(self) -> None:
        assert html(lambda r: r.a(href="/?q=a b")).render() == '<a href="/?q=a%20b"/>'

    def test_src_is_percent_encoded(self) -> None:
        component = html(lambda r: r.img(src="/images/my photo.png"))
        assert component.render() == '<img src="/images/my%20photo.png"/>'

    def test_uri_delimiters_are_kept(self) -> None:
        component = html(lambda r: r.a("x", href="https://example.com/a?b=1&c=2#top"))
        assert component.render() == '<a href="https://example.com/a?b=1&c=2#top">x</a>'

    def test_quotes_cannot_break_out(self) -> None:
        component = html(lambda r: r.a(href='/" onclick="x'))
        assert component.render() == '<a href="/%22%20onclick=%22x"/>'

    @pytest.mark.parametrize("value", [None, False])
    def test_missing_uri_is_omitted(self, value: object) -> None:
        assert html(lambda r: r.a("x", href=value)).render() == "<a>x</a>"

    def test_uri_encoding_applies_in_xml_mode(self) -> None:
        component = xml(lambda r: r.link(href="/a b"))
        assert component.render() == '<link href="/a%20b"/>'

    def test_other_attributes_are_not_uri_encoded(self) -> None:
        assert _render(data_url="/a b") == '<div data-url="/a b"/>'
