"""quire renderer package.

Re-exports the renderer classes and picks the one matching a markup mode.
"""

from __future__ import annotations

from quire._types import Mode
from quire.renderer.core import Deferred, Renderer
from quire.renderer.html import HTMLRenderer
from quire.renderer.params import ParameterSpec, parameter_spec, verify_parameters
from quire.renderer.xml import XMLRenderer

_RENDERERS: dict[Mode, type[Renderer]] = {
    Mode.HTML: HTMLRenderer,
    Mode.XML: XMLRenderer,
}


def renderer_class(mode: Mode) -> type[Renderer]:
    """Return the Renderer subclass for ``mode``."""
    return _RENDERERS[mode]


__all__ = [
    "Deferred",
    "HTMLRenderer",
    "ParameterSpec",
    "Renderer",
    "XMLRenderer",
    "parameter_spec",
    "renderer_class",
    "verify_parameters",
]
