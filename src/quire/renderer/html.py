"""HTML renderer and its document helpers."""

from __future__ import annotations

from typing import Any, ClassVar

from quire._types import Mode
from quire.renderer.core import Renderer
from quire.utils.attributes import encode_attributes
from quire.utils.constants import S_DOCTYPE_HTML, S_GT

_S_SCRIPT_OPEN = "<script"
_S_SCRIPT_CLOSE = "</script>"
_S_STYLE_OPEN = "<style"
_S_STYLE_CLOSE = "</style>"


class HTMLRenderer(Renderer):
    """Renderer for HTML documents: HTML entity escaping plus helpers.

    The helpers are ordinary methods, so they take precedence over dynamic
    tags of the same name; use ``r.tag("style", ...)`` for an escaped
    ``<style>`` element.
    """

    mode: ClassVar[Mode] = Mode.HTML

    __slots__ = ()

    def html5(self, content: Any = None, /, **attrs: Any) -> None:
        """Emit ``<!DOCTYPE html>`` followed by an ``html`` element.

        Example:
            >>> r.html5(lambda r: r.div(lambda r: r.h1("foobar")))
            # <!DOCTYPE html><html><div><h1>foobar</h1></div></html>

        """
        self._buffer.append(S_DOCTYPE_HTML)
        self.tag("html", content, **attrs)

    def link_stylesheet(self, href: str, /, **attrs: Any) -> None:
        """Emit a stylesheet ``link``; extra attributes come first.

        Example:
            >>> r.link_stylesheet("/assets/style.css", media="print")
            # <link media="print" rel="stylesheet" href="/assets/style.css"/>

        """
        self.tag("link", {**attrs, "rel": "stylesheet", "href": href})

    def style(self, css: Any, /, **attrs: Any) -> None:
        """Emit an inline ``style`` element; ``css`` is written unescaped.

        ``css`` goes through ``emit()``, so a callable produces the body and
        any other value is written with ``str()``.
        """
        buf = self._buffer
        buf.append(_S_STYLE_OPEN)
        if attrs:
            encode_attributes(buf, attrs)
        buf.append(S_GT)
        self.emit(css)
        self._buffer.append(_S_STYLE_CLOSE)

    def script(self, js: Any = None, /, **attrs: Any) -> None:
        """Emit a ``script`` element; ``js`` is written unescaped, like ``style()``.

        Without ``js`` the element still gets an explicit closing tag, since
        browsers do not accept ``<script/>``.
        """
        buf = self._buffer
        buf.append(_S_SCRIPT_OPEN)
        if attrs:
            encode_attributes(buf, attrs)
        buf.append(S_GT)
        self.emit(js)
        self._buffer.append(_S_SCRIPT_CLOSE)
