"""Escaping policies for text content and URI-bearing attributes.

Escaping happens exactly once, at the point text enters a render buffer.
Values that already carry markup (``Markup`` instances, or any object with
an ``__html__`` method) are trusted and passed through unchanged, so output
produced by one render can be emitted into another without double-escaping.

Performance:
    Entity escaping is a single pass via ``str.translate()`` with a
    precomputed table. A cheap membership pre-check skips the translate call
    entirely for the common case of text with no special characters.

Thread-Safety:
    All functions are pure; the translation tables are read-only after
    module load.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from quire._types import Mode

_HTML_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

_XML_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)

_ESCAPE_CHARS = frozenset("&<>\"'")

# Characters left intact by JavaScript's encodeURI() beyond the ones
# urllib.parse.quote() always keeps (letters, digits and "_.-~").
_URI_SAFE = ";,/?:@&=+$!*'()#"


class Markup(str):
    """A string that is already safe markup and must not be escaped again.

    Example:
        >>> html_escape(Markup("<b>bold</b>"))
        '<b>bold</b>'
        >>> html_escape("<b>bold</b>")
        '&lt;b&gt;bold&lt;/b&gt;'

    """

    __slots__ = ()

    def __html__(self) -> str:
        return self

    def __repr__(self) -> str:
        return f"Markup({super().__repr__()})"

    @classmethod
    def escape(cls, value: Any) -> Markup:
        """Escape ``value`` for HTML and wrap the result as Markup."""
        return cls(html_escape(value))


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def html_escape(value: Any) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` as HTML entities.

    Non-string values are converted with ``str()``; ``None`` becomes ``""``.
    Objects implementing ``__html__`` are returned as their markup.
    """
    html = getattr(value, "__html__", None)
    if html is not None:
        return html()
    s = _to_str(value)
    if _ESCAPE_CHARS.isdisjoint(s):
        return s
    return s.translate(_HTML_ESCAPE_TABLE)


def xml_escape(value: Any) -> str:
    """Escape the five predefined XML entities (``'`` becomes ``&apos;``)."""
    html = getattr(value, "__html__", None)
    if html is not None:
        return html()
    s = _to_str(value)
    if _ESCAPE_CHARS.isdisjoint(s):
        return s
    return s.translate(_XML_ESCAPE_TABLE)


def uri_escape(value: Any) -> str:
    """Percent-encode ``value`` the way ``encodeURI()`` does.

    URI delimiters (``/?#&=`` and friends) are kept, everything else outside
    the unreserved set is percent-encoded as UTF-8.

    Example:
        >>> uri_escape("/?q=a b")
        '/?q=a%20b'

    """
    return quote(_to_str(value), safe=_URI_SAFE)


_ESCAPERS: dict[Mode, Callable[[Any], str]] = {
    Mode.HTML: html_escape,
    Mode.XML: xml_escape,
}


def escaper_for(mode: Mode) -> Callable[[Any], str]:
    """Return the text escaping function for a markup mode."""
    return _ESCAPERS[mode]


__all__ = [
    "Markup",
    "escaper_for",
    "html_escape",
    "uri_escape",
    "xml_escape",
]
