"""quire Renderer — executes templates into a text buffer.

A Renderer is created for a single render pass. Templates, blocks and
deferred callables all receive the Renderer as their first argument and
write to it by calling its methods; nested components run recursively in
the same Renderer, sharing its buffer and RenderContext.

Architecture:
    ```
    Renderer
    ├── context: RenderContext        # namespace + bound inner block
    ├── _buffer: list[str]            # StringBuilder for the open segment
    ├── _segments: list | None        # None until the first defer()
    ├── _tag_cache: dict              # tag name -> (open, close) fragments
    └── _extensions: dict             # snapshot of registered extensions
    ```

StringBuilder Pattern:
    Output is accumulated with ``list.append`` and joined once, O(n) overall.

Deferred Evaluation:
    ``defer(block)`` closes the open buffer into a literal segment, records
    ``block`` as the next segment and opens a fresh buffer. ``finalize()``
    walks the segments in order, running each deferred block against the same
    RenderContext, so the block sees namespace values set after it was
    registered. Blocks that defer again are resolved with an explicit work
    stack rather than native recursion.

Thread-Safety:
    Renderer state is local to one render pass. Nothing here touches module
    globals while rendering.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from functools import partial
from typing import Any, ClassVar, NamedTuple

from quire._types import Attributes, Block, Mode
from quire.exceptions import NoInnerBlockError
from quire.extensions import ExtensionProxy
from quire.render_context import RenderContext
from quire.renderer.params import parameter_spec
from quire.utils.attributes import encode_attributes, normalize_name
from quire.utils.constants import S_GT, S_LT, S_LT_SLASH, S_SLASH_GT
from quire.utils.html import escaper_for

logger = logging.getLogger(__name__)


class Deferred(NamedTuple):
    """A deferred segment: the block and the inner block bound at registration."""

    block: Block
    inner_block: Callable[..., Any] | None


class _Frame(NamedTuple):
    """One level of deferred resolution on the finalize work stack."""

    segments: Iterator[str | Deferred]
    tail: list[str]


def _merge_attributes(attributes: Attributes, attrs: Mapping[str, Any]) -> dict[str, Any]:
    # Keys are compared after normalization so that class_= overrides "class".
    merged = {normalize_name(key): value for key, value in attributes.items()}
    for key, value in attrs.items():
        merged[normalize_name(key)] = value
    return merged


class Renderer:
    """Executes templates and accumulates their markup.

    Subclasses choose the markup mode, which selects the text escaping
    policy (see ``HTMLRenderer`` and ``XMLRenderer``).

    Any attribute that is not a Renderer method or a registered extension is
    treated as a tag name, so ``r.div("hi", class_="x")`` is equivalent to
    ``r.tag("div", "hi", class_="x")``.

    Example:
        >>> r = HTMLRenderer()
        >>> r.p("Tom & Jerry", class_="title")
        >>> r.finalize()
        '<p class="title">Tom &amp; Jerry</p>'

    """

    mode: ClassVar[Mode] = Mode.HTML

    __slots__ = (
        "_buffer",
        "_escape",
        "_extensions",
        "_proxies",
        "_segments",
        "_tag_cache",
        "_tag_methods",
        "context",
    )

    def __init__(
        self,
        context: RenderContext | None = None,
        extensions: Mapping[str, Any] | None = None,
    ):
        self.context = context if context is not None else RenderContext()
        self._buffer: list[str] = []
        self._segments: list[str | Deferred] | None = None
        self._escape = escaper_for(self.mode)
        self._tag_cache: dict[str, tuple[str, str]] = {}
        self._tag_methods: dict[str, Callable[..., None]] = {}
        self._extensions: Mapping[str, Any] = extensions if extensions is not None else {}
        self._proxies: dict[str, ExtensionProxy] = {}

    @property
    def ns(self) -> dict[str, Any]:
        """The render pass namespace (shared across components and deferred blocks)."""
        return self.context.namespace

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def text(self, data: Any) -> None:
        """Escape ``data`` for the active mode and append it."""
        self._buffer.append(self._escape(data))

    emit_text = text

    def emit(self, value: Any, *args: Any, **kwargs: Any) -> None:
        """Emit a callable, a component, or trusted markup.

        - callables (including components) are verified against ``args`` and
          ``kwargs`` and then run in this renderer, writing into the same
          buffer
        - ``None`` emits nothing
        - anything else is appended verbatim, without escaping

        Example:
            >>> greeter = lambda r, name: r.h1(f"Hello, {name}!")
            >>> r.emit(greeter, "world")      # <h1>Hello, world!</h1>
            >>> r.emit("hi&<bye>")            # hi&<bye>

        """
        if value is None:
            return
        if isinstance(value, str):
            self._buffer.append(value)
        elif callable(value):
            self._call(value, args, kwargs)
        else:
            html = getattr(value, "__html__", None)
            self._buffer.append(html() if html is not None else str(value))

    e = emit

    def emit_yield(self, *args: Any, **kwargs: Any) -> None:
        """Run the bound inner block here, passing it ``args`` and ``kwargs``.

        Raises:
            NoInnerBlockError: if no inner block is bound.

        Example:
            >>> wrap = html(lambda r: r.div(lambda r: r.emit_yield("world")))
            >>> wrap.render(inner_block=lambda r, name: r.h1(f"Hello, {name}!"))
            '<div><h1>Hello, world!</h1></div>'

        """
        inner = self.context.inner_block
        if inner is None:
            raise NoInnerBlockError()
        self._call(inner, args, kwargs)

    def tag(
        self,
        name: str,
        text: Any = None,
        attributes: Attributes | None = None,
        /,
        *,
        block: Block | None = None,
        **attrs: Any,
    ) -> None:
        """Emit an element.

        The element body is, in order of preference: ``block`` run in place;
        ``text`` emitted through ``emit()`` if it is callable; ``text``
        escaped. With none of them (``None`` or ``False`` text) the element is
        self-closing.

        A mapping passed as ``text`` with no ``attributes`` is taken to be the
        attribute map. ``attributes`` and keyword attributes are merged, with
        keywords winning.

        Args:
            name: Tag name; underscores become hyphens (``my_tag`` ->
                ``my-tag``).
            text: Text content, or a callable producing the body.
            attributes: Ordered attribute mapping.
            block: Callable producing the body, called as ``block(renderer)``.
            **attrs: More attributes (``class_="x"`` for ``class="x"``).
        """
        if attributes is None and isinstance(text, Mapping):
            attributes, text = text, None
        if attrs:
            attributes = _merge_attributes(attributes, attrs) if attributes else attrs

        open_, close = self._fragments(name)
        self._buffer.append(open_)
        if attributes:
            encode_attributes(self._buffer, attributes)

        if block is not None:
            self._buffer.append(S_GT)
            block(self)
            self._buffer.append(close)
        elif callable(text):
            self._buffer.append(S_GT)
            self.emit(text)
            self._buffer.append(close)
        elif text is not None and text is not False:
            buf = self._buffer
            buf.append(S_GT)
            buf.append(self._escape(text))
            buf.append(close)
        else:
            self._buffer.append(S_SLASH_GT)

    def _fragments(self, name: str) -> tuple[str, str]:
        try:
            return self._tag_cache[name]
        except KeyError:
            tag = normalize_name(name)
            fragments = (S_LT + tag, S_LT_SLASH + tag + S_GT)
            self._tag_cache[name] = fragments
            return fragments

    def _call(self, fn: Callable[..., Any], args: Sequence[Any], kwargs: Mapping[str, Any]) -> None:
        # Components verify their own arguments when called.
        if not hasattr(fn, "verify_arguments"):
            parameter_spec(fn).check(args, kwargs)
        fn(self, *args, **kwargs)

    # ------------------------------------------------------------------
    # Deferred evaluation
    # ------------------------------------------------------------------

    def defer(self, block: Block) -> None:
        """Postpone ``block`` until the render is finalized.

        The block keeps its position in the output, but runs after the rest
        of the template, so it can read namespace values set later in the
        pass. Content emitted after ``defer()`` is ordered after the block.

        Example:
            >>> def page(r):
            ...     r.head(lambda r: r.defer(lambda r: r.title(r.ns["title"])))
            ...     r.ns["title"] = "Set later"

        """
        if self._segments is None:
            self._segments = ["".join(self._buffer)]
        elif self._buffer:
            self._segments.append("".join(self._buffer))
        self._segments.append(Deferred(block, self.context.inner_block))
        self._buffer = []

    def finalize(self) -> str:
        """Resolve deferred segments and return the rendered markup.

        Without any ``defer()`` calls this is a single join. Otherwise the
        segments are walked in order: literal segments are copied, deferred
        blocks run against a fresh buffer and their output (including their
        own deferred blocks) takes the block's place.
        """
        if self._segments is None:
            return "".join(self._buffer)

        logger.debug("Resolving %d deferred segments", len(self._segments))
        out: list[str] = []
        stack = [_Frame(iter(self._segments), self._buffer)]
        self._segments = None
        self._buffer = []

        while stack:
            frame = stack[-1]
            for segment in frame.segments:
                if isinstance(segment, str):
                    out.append(segment)
                    continue
                with self.context.bound(segment.inner_block):
                    segment.block(self)
                if self._segments is None:
                    out.extend(self._buffer)
                    self._buffer = []
                    continue
                # The block deferred again: resolve its segments before
                # resuming this frame.
                stack.append(_Frame(iter(self._segments), self._buffer))
                self._segments = None
                self._buffer = []
                break
            else:
                stack.pop()
                out.extend(frame.tail)

        result = "".join(out)
        self._buffer = [result]
        return result

    # ------------------------------------------------------------------
    # Dynamic tags and extensions
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        if name in self._extensions:
            proxy = self._proxies.get(name)
            if proxy is None:
                proxy = self._proxies[name] = ExtensionProxy(self, self._extensions[name])
            return proxy
        method = self._tag_methods.get(name)
        if method is None:
            method = self._tag_methods[name] = partial(self.tag, name)
        return method
