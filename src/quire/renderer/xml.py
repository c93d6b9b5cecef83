"""XML renderer."""

from __future__ import annotations

from typing import ClassVar

from quire._types import Mode
from quire.renderer.core import Renderer


class XMLRenderer(Renderer):
    """Renderer for XML documents: XML entity escaping, no HTML helpers.

    Example:
        >>> r = XMLRenderer()
        >>> r.item("it's", id="1")
        >>> r.finalize()
        '<item id="1">it&apos;s</item>'

    """

    mode: ClassVar[Mode] = Mode.XML

    __slots__ = ()
