"""quire RenderContext — per-render shared state.

One RenderContext is created for every render pass and discarded when the
pass finishes. It is passed explicitly (through the Renderer) to every
nested component, block, and deferred callable executed during the pass;
nothing about a render lives in module globals or context variables.

Thread Safety:
    A RenderContext is never shared between render passes, so independent
    passes on different threads cannot observe each other's state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class RenderContext:
    """Shared mutable state for one render pass.

    Attributes:
        namespace: Free-form values set by one part of a template and read by
            another (including deferred blocks registered before the value
            was set). Insertion-ordered.
        inner_block: The slot content spliced in by ``emit_yield()``, or None.
    """

    namespace: dict[str, Any] = field(default_factory=dict)
    inner_block: Callable[..., Any] | None = None

    @contextmanager
    def bound(self, inner_block: Callable[..., Any] | None) -> Iterator[RenderContext]:
        """Bind ``inner_block`` for the duration of the with block.

        The previously bound block is restored on exit, including when the
        body raises.

        Example:
            with ctx.bound(content):
                renderer.emit(layout)   # layout's emit_yield() runs content
        """
        previous = self.inner_block
        self.inner_block = inner_block
        try:
            yield self
        finally:
            self.inner_block = previous
