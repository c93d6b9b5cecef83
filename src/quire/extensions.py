"""Extension registry for quire templates.

An extension is any object (typically a module or a class with plain
functions) whose callables take the renderer as their first argument, just
like templates do. Registering it under a name makes it reachable from
every template as ``r.<name>``:

    # components.py
    def card(r, title, content):
        def body(r):
            r.h3(title)
            r.div(content, class_="card-content")

        r.div(body, class_="card")

    quire.extension(components=components)

    @quire.html
    def page(r):
        r.components.card("Foo", "Bar")

Thread-Safety:
    Mutations are copy-on-write: the registry swaps in a new dict instead of
    changing the one renderers already hold, so registering an extension
    never races with a render in progress.
"""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Iterator, KeysView, Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from quire.renderer import Renderer

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Dict-like, copy-on-write mapping of extension name to extension object.

    Supports:
        - registry['name'] = module
        - registry.update({'name': module})
        - registry.register(name=module, other=obj)
        - 'name' in registry
    """

    __slots__ = ("_extensions",)

    def __init__(self, extensions: Mapping[str, Any] | None = None):
        self._extensions: dict[str, Any] = dict(extensions or {})

    def __getitem__(self, name: str) -> Any:
        return self._extensions[name]

    def __setitem__(self, name: str, extension: Any) -> None:
        self.update({name: extension})

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __iter__(self) -> Iterator[str]:
        return iter(self._extensions)

    def __len__(self) -> int:
        return len(self._extensions)

    def get(self, name: str, default: Any = None) -> Any:
        return self._extensions.get(name, default)

    def update(self, mapping: Mapping[str, Any]) -> None:
        """Register several extensions at once."""
        for name in mapping:
            if not name.isidentifier() or name.startswith("_"):
                raise ValueError(f"Invalid extension name {name!r}")
        new = self._extensions.copy()
        new.update(mapping)
        self._extensions = new
        logger.debug("Registered extensions: %s", ", ".join(mapping))

    def register(self, **mapping: Any) -> None:
        """Register extensions given as keyword arguments."""
        self.update(mapping)

    def unregister(self, name: str) -> None:
        new = self._extensions.copy()
        del new[name]
        self._extensions = new

    def snapshot(self) -> Mapping[str, Any]:
        """Return the current mapping; later registrations do not affect it."""
        return self._extensions

    def keys(self) -> KeysView[str]:
        return self._extensions.keys()

    def items(self) -> ItemsView[str, Any]:
        return self._extensions.items()


class ExtensionProxy:
    """An extension as seen from inside one render.

    Attribute access returns the extension's callables bound to the active
    renderer, so ``r.components.card("Foo")`` calls
    ``components.card(r, "Foo")``. Names the extension does not define fall
    through to the renderer (``r.components.div()`` emits a ``div``).
    """

    __slots__ = ("_extension", "_renderer")

    def __init__(self, renderer: Renderer, extension: Any):
        self._renderer = renderer
        self._extension = extension

    def __getattr__(self, name: str) -> Any:
        try:
            attr = getattr(self._extension, name)
        except AttributeError:
            return getattr(self._renderer, name)
        if callable(attr):
            return partial(attr, self._renderer)
        return attr

    def __repr__(self) -> str:
        return f"<ExtensionProxy {self._extension!r}>"


# Extensions available to every component that does not bring its own registry.
default_registry = ExtensionRegistry()


def extension(**mapping: Any) -> None:
    """Register extensions in the default registry.

    Example:
        >>> import quire
        >>> quire.extension(components=components)

    """
    default_registry.update(mapping)


__all__ = ["ExtensionProxy", "ExtensionRegistry", "default_registry", "extension"]
