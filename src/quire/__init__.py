"""quire — composable markup generation in plain Python.

Templates are ordinary Python callables that receive a renderer and call
methods on it to emit elements. Components wrap templates, compose with
each other, and render to a single string.

Quickstart:
    >>> from quire import html
    >>> @html
    ... def card(r, title):
    ...     r.div(lambda r: r.h2(title), class_="card")
    >>> card.render("Tom & Jerry")
    '<div class="card"><h2>Tom &amp; Jerry</h2></div>'

Slots:
    A wrapping component calls ``r.emit_yield()`` where caller-supplied
    content should go; the content is given with ``render(inner_block=...)``
    or bound ahead of time with ``apply()``.

Deferred evaluation:
    ``r.defer(block)`` reserves a place in the output for ``block`` but runs
    it at the end of the render pass, so it can read values that later parts
    of the document put in ``r.ns`` (the page title set by a nested
    component, for example).

Architecture:
    Component.render() → Renderer + RenderContext → template(r, ...) →
    Renderer.finalize() → str

Thread-Safety:
    Components are immutable; each render pass allocates its own Renderer
    and RenderContext, so a component may be rendered concurrently from any
    number of threads.

"""

from quire._types import Mode
from quire.component import Component, html, xml
from quire.exceptions import (
    ErrorCode,
    InvalidModeError,
    NoInnerBlockError,
    ParameterError,
    QuireError,
)
from quire.extensions import ExtensionProxy, ExtensionRegistry, default_registry, extension
from quire.render_context import RenderContext
from quire.renderer import HTMLRenderer, Renderer, XMLRenderer, renderer_class
from quire.utils.html import Markup, html_escape, uri_escape, xml_escape

__version__ = "0.1.0"

__all__ = [
    "Component",
    "ErrorCode",
    "ExtensionProxy",
    "ExtensionRegistry",
    "HTMLRenderer",
    "InvalidModeError",
    "Markup",
    "Mode",
    "NoInnerBlockError",
    "ParameterError",
    "QuireError",
    "RenderContext",
    "Renderer",
    "XMLRenderer",
    "__version__",
    "default_registry",
    "extension",
    "html",
    "html_escape",
    "renderer_class",
    "uri_escape",
    "xml",
    "xml_escape",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'quire' has no attribute {name!r}")
