"""quire Component — an immutable, reusable piece of markup logic.

A Component wraps a template callable and a markup mode. Rendering it
creates a fresh Renderer and RenderContext, runs the template, and returns
the finalized string; the Component itself is never modified, so the same
instance can be rendered any number of times, from any number of threads.

Templates receive the active renderer as their first argument:

    >>> from quire import html
    >>> @html
    ... def greeting(r, name):
    ...     r.h1(f"Hello, {name}!")
    >>> greeting.render("world")
    '<h1>Hello, world!</h1>'

Components are callables with the same shape as templates, so they can be
emitted from other templates, passed as blocks, bound as inner blocks, or
deferred; in every case they run inside the caller's renderer.

Thread-Safety:
    Components are immutable after construction and ``render()`` only
    creates local state.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from quire._types import Mode, TemplateFunc
from quire.exceptions import InvalidModeError
from quire.extensions import ExtensionRegistry, default_registry
from quire.render_context import RenderContext
from quire.renderer import Renderer, renderer_class
from quire.renderer.params import ParameterSpec, parameter_spec


def _coerce_mode(mode: Mode | str) -> Mode:
    if isinstance(mode, Mode):
        return mode
    if isinstance(mode, str):
        try:
            return Mode(mode.lower())
        except ValueError:
            raise InvalidModeError(mode) from None
    raise InvalidModeError(mode)


class Component:
    """A template callable plus its markup mode, ready for rendering.

    Attributes:
        template: The wrapped template callable.
        mode: Markup mode (``Mode.HTML`` or ``Mode.XML``).
        inner_block: Slot content bound with ``apply()``, or None.

    Methods:
        render(*args, inner_block=None, **kwargs): Render to a string.
        apply(inner_block=None, *args, **kwargs): Bind a slot and/or curry
            arguments, returning a new Component.

    Example:
        >>> layout = html(lambda r: r.body(lambda r: r.emit_yield()))
        >>> layout.render(inner_block=lambda r: r.p("foo"))
        '<body><p>foo</p></body>'

    """

    __slots__ = (
        "_args",
        "_extensions",
        "_inner_block",
        "_kwargs",
        "_mode",
        "_spec",
        "_template",
    )

    def __init__(
        self,
        template: TemplateFunc,
        mode: Mode | str = Mode.HTML,
        *,
        extensions: ExtensionRegistry | Mapping[str, Any] | None = None,
    ):
        if not callable(template):
            raise TypeError(f"Component template must be callable, got {type(template).__name__}")
        _set = object.__setattr__
        _set(self, "_mode", _coerce_mode(mode))
        if isinstance(template, Component):
            # Re-wrapping keeps the inner template, its bindings and its checks.
            for name in ("_template", "_inner_block", "_args", "_kwargs", "_spec"):
                _set(self, name, getattr(template, name))
            if extensions is None:
                extensions = template._extensions
            _set(self, "_extensions", extensions)
            return
        _set(self, "_template", template)
        _set(self, "_extensions", extensions)
        _set(self, "_inner_block", None)
        _set(self, "_args", ())
        _set(self, "_kwargs", {})
        _set(self, "_spec", parameter_spec(template))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        name = getattr(self._template, "__qualname__", None) or repr(self._template)
        return f"<Component {name} mode={self._mode.value}>"

    @property
    def template(self) -> TemplateFunc:
        return self._template

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def mime_type(self) -> str:
        """``text/html`` or ``application/xml``, depending on the mode."""
        return self._mode.mime_type

    @property
    def inner_block(self) -> Callable[..., Any] | None:
        return self._inner_block

    def _copy(self, **changes: Any) -> Component:
        clone = object.__new__(Component)
        for name in Component.__slots__:
            object.__setattr__(clone, name, changes.get(name, getattr(self, name)))
        return clone

    def apply(
        self, inner_block: Callable[..., Any] | None = None, /, *args: Any, **kwargs: Any
    ) -> Component:
        """Return a new Component with a slot bound and/or arguments curried.

        Nothing is executed. ``args`` are prepended to the arguments given at
        render time, ``kwargs`` are merged under them.

        Example:
            >>> div_wrap = html(lambda r, *args: r.div(lambda r: r.emit_yield(*args)))
            >>> greeter = div_wrap.apply(lambda r, name: r.h1(f"Hello, {name}!"))
            >>> greeter.render("world")
            '<div><h1>Hello, world!</h1></div>'

        """
        return self._copy(
            _inner_block=inner_block if inner_block is not None else self._inner_block,
            _args=(*self._args, *args),
            _kwargs={**self._kwargs, **kwargs},
        )

    def verify_arguments(self, args: Sequence[Any], kwargs: Mapping[str, Any]) -> None:
        """Raise ParameterError unless the template accepts ``args``/``kwargs``.

        Curried arguments count towards the template's requirements.
        """
        if self._args or self._kwargs:
            self._spec.check((*self._args, *args), {**self._kwargs, **kwargs})
        else:
            self._spec.check(args, kwargs)

    @property
    def parameter_spec(self) -> ParameterSpec:
        return self._spec

    def __call__(self, renderer: Renderer, *args: Any, **kwargs: Any) -> None:
        """Run the template inside ``renderer``.

        Arguments are verified first, however the component was reached
        (emitted, passed as a block, deferred or bound as an inner block).
        The component's bound inner block, if any, is installed for the
        duration of the call; otherwise the caller's inner block stays bound.

        Raises:
            ParameterError: If the template's required parameters are not
                satisfied by the curried and given arguments.
        """
        self.verify_arguments(args, kwargs)
        if self._args:
            args = (*self._args, *args)
        if self._kwargs:
            kwargs = {**self._kwargs, **kwargs}
        if self._inner_block is None:
            self._template(renderer, *args, **kwargs)
            return
        with renderer.context.bound(self._inner_block):
            self._template(renderer, *args, **kwargs)

    def render(
        self, *args: Any, inner_block: Callable[..., Any] | None = None, **kwargs: Any
    ) -> str:
        """Render the component and return the markup.

        Args:
            *args: Positional arguments for the template.
            inner_block: Slot content for ``emit_yield()``; defaults to the
                block bound with ``apply()``.
            **kwargs: Keyword arguments for the template.

        Raises:
            ParameterError: If the template's required parameters are not
                satisfied by the given arguments.
        """
        component = self if inner_block is None else self._copy(_inner_block=inner_block)
        renderer = renderer_class(self._mode)(RenderContext(), extensions=self._extension_snapshot())
        renderer.emit(component, *args, **kwargs)
        return renderer.finalize()

    def _extension_snapshot(self) -> Mapping[str, Any]:
        extensions = self._extensions
        if extensions is None:
            return default_registry.snapshot()
        if isinstance(extensions, ExtensionRegistry):
            return extensions.snapshot()
        return extensions


def html(template: TemplateFunc, **options: Any) -> Component:
    """Create an HTML component; usable as a decorator.

    A Component that is already in HTML mode is returned as is.
    """
    if isinstance(template, Component) and template.mode is Mode.HTML and not options:
        return template
    return Component(template, Mode.HTML, **options)


def xml(template: TemplateFunc, **options: Any) -> Component:
    """Create an XML component; usable as a decorator."""
    if isinstance(template, Component) and template.mode is Mode.XML and not options:
        return template
    return Component(template, Mode.XML, **options)


__all__ = ["Component", "html", "xml"]
