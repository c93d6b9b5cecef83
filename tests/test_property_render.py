"""Property-based tests for rendering invariants.

Uses hypothesis to verify properties that must hold for all inputs:

- Escaped text unescapes back to the original and never contains raw markup
- Attributes are written in insertion order
- Deferred segments appear exactly where they were registered
- Rendering is pure: the same component gives the same output every time
"""

from __future__ import annotations

from html import unescape
from urllib.parse import unquote

from hypothesis import given, settings

from quire import html, uri_escape, xml

from .strategies import attribute_map, defer_depth, defer_program, markup_text


class TestEscapingProperties:
    @given(s=markup_text)
    @settings(max_examples=200)
    def test_html_text_roundtrips_through_unescape(self, s: str) -> None:
        out = html(lambda r: r.p(s)).render()
        body = out[len("<p>") : -len("</p>")]
        assert not set(body) & set("<>\"'")
        assert unescape(body) == s

    @given(s=markup_text)
    @settings(max_examples=200)
    def test_xml_text_has_no_raw_markup(self, s: str) -> None:
        out = xml(lambda r: r.item(s)).render()
        body = out[len("<item>") : -len("</item>")]
        assert not set(body) & set("<>\"'")

    @given(s=markup_text)
    @settings(max_examples=200)
    def test_uri_attribute_has_no_quotes_or_spaces(self, s: str) -> None:
        encoded = uri_escape(s)
        assert '"' not in encoded
        assert " " not in encoded
        assert unquote(encoded) == s


class TestAttributeProperties:
    @given(attrs=attribute_map)
    @settings(max_examples=200)
    def test_insertion_order_preserved(self, attrs: dict[str, str]) -> None:
        out = html(lambda r: r.div(attrs)).render()
        expected = "".join(f' {name}="{value}"' for name, value in attrs.items())
        assert out == f"<div{expected}/>"


class TestDeferProperties:
    @given(program=defer_program)
    @settings(max_examples=200)
    def test_segments_keep_registration_order(self, program: list[bool]) -> None:
        def template(r):
            for index, deferred in enumerate(program):
                if deferred:
                    r.defer(lambda r, index=index: r.text(f"[{index}]"))
                else:
                    r.text(f"[{index}]")

        expected = "".join(f"[{index}]" for index in range(len(program)))
        assert html(template).render() == expected

    @given(program=defer_program)
    @settings(max_examples=100)
    def test_deferred_blocks_see_final_namespace(self, program: list[bool]) -> None:
        def template(r):
            for index, deferred in enumerate(program):
                r.ns["last"] = index
                if deferred:
                    r.defer(lambda r: r.text(r.ns["last"]))
                else:
                    r.text(index)

        last = len(program) - 1
        expected = "".join(
            str(last if deferred else index) for index, deferred in enumerate(program)
        )
        assert html(template).render() == expected

    @given(depth=defer_depth)
    @settings(max_examples=50)
    def test_nested_defer_chain(self, depth: int) -> None:
        def link(n):
            def block(r):
                r.text(f"<{n}")
                if n:
                    r.defer(link(n - 1))
                r.text(">")

            return block

        out = html(lambda r: r.defer(link(depth))).render()
        opening = "".join(f"&lt;{n}" for n in range(depth, -1, -1))
        assert out == opening + "&gt;" * (depth + 1)


class TestPurity:
    @given(program=defer_program, s=markup_text)
    @settings(max_examples=100)
    def test_render_is_repeatable(self, program: list[bool], s: str) -> None:
        def template(r):
            r.ns["count"] = r.ns.get("count", 0) + 1
            for deferred in program:
                if deferred:
                    r.defer(lambda r: r.span(r.ns["count"]))
                else:
                    r.p(s)

        component = html(template)
        assert component.render() == component.render()
