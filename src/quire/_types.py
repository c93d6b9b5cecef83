"""Shared types for quire.

Kept dependency-free so every other module can import from here without
creating import cycles.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from quire.renderer import Renderer


class Mode(Enum):
    """Markup mode of a component; selects the text escaping policy."""

    HTML = "html"
    XML = "xml"

    @property
    def mime_type(self) -> str:
        """MIME type of documents rendered in this mode."""
        return _MIME_TYPES[self]


_MIME_TYPES = {
    Mode.HTML: "text/html",
    Mode.XML: "application/xml",
}

# A template body: called with the active renderer first, then caller args.
TemplateFunc: TypeAlias = Callable[..., Any]

# Block passed to tag()/defer(): called with the active renderer only.
Block: TypeAlias = "Callable[[Renderer], Any]"

# True/False are presence flags, None omits the attribute, anything else
# is written as text.
Attributes: TypeAlias = Mapping[str, Any]

__all__ = ["Attributes", "Block", "Mode", "TemplateFunc"]
