"""Unit tests for text and URI escaping."""

from __future__ import annotations

import pytest

from quire import Markup, Mode, html, html_escape, uri_escape, xml_escape
from quire.utils.html import escaper_for


class TestHtmlEscape:
    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("plain", "plain"),
            ("a & b", "a &amp; b"),
            ("<p>", "&lt;p&gt;"),
            ('"quoted"', "&quot;quoted&quot;"),
            ("it's", "it&#39;s"),
            ("&amp;", "&amp;amp;"),
            ("", ""),
        ],
    )
    def test_entities(self, raw: str, escaped: str) -> None:
        assert html_escape(raw) == escaped

    def test_none_is_empty(self) -> None:
        assert html_escape(None) == ""

    def test_non_strings_use_str(self) -> None:
        assert html_escape(3.5) == "3.5"
        assert html_escape(["<a>"]) == "[&#39;&lt;a&gt;&#39;]"

    def test_unchanged_string_is_same_object(self) -> None:
        s = "nothing to escape here"
        assert html_escape(s) is s

    def test_markup_is_trusted(self) -> None:
        assert html_escape(Markup("<b>x</b>")) == "<b>x</b>"

    def test_dunder_html_is_trusted(self) -> None:
        class Widget:
            def __html__(self) -> str:
                return "<widget/>"

        assert html_escape(Widget()) == "<widget/>"


class TestXmlEscape:
    def test_apostrophe(self) -> None:
        assert xml_escape("it's") == "it&apos;s"

    def test_other_entities(self) -> None:
        assert xml_escape('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_markup_is_trusted(self) -> None:
        assert xml_escape(Markup("<x/>")) == "<x/>"


class TestMarkup:
    def test_escape_classmethod(self) -> None:
        result = Markup.escape("<i>")
        assert isinstance(result, Markup)
        assert result == "&lt;i&gt;"

    def test_repr(self) -> None:
        assert repr(Markup("<b>")) == "Markup('<b>')"

    def test_emitted_as_text_is_not_escaped(self) -> None:
        assert html(lambda r: r.p(Markup("<b>bold</b>"))).render() == "<p><b>bold</b></p>"


class TestUriEscape:
    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("/?q=a b", "/?q=a%20b"),
            ("https://example.com/a?b=1&c=2#top", "https://example.com/a?b=1&c=2#top"),
            ('/"quoted"', "/%22quoted%22"),
            ("/<script>", "/%3Cscript%3E"),
            ("/café", "/caf%C3%A9"),
            ("mailto:a@b.c", "mailto:a@b.c"),
            ("/a%20b", "/a%2520b"),
        ],
    )
    def test_encode_uri(self, raw: str, escaped: str) -> None:
        assert uri_escape(raw) == escaped

    def test_non_strings(self) -> None:
        assert uri_escape(42) == "42"


class TestEscaperFor:
    def test_modes(self) -> None:
        assert escaper_for(Mode.HTML) is html_escape
        assert escaper_for(Mode.XML) is xml_escape
