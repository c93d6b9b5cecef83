"""Template parameter verification.

Before any template body runs, its signature is checked against the
arguments it is about to receive so that a missing argument surfaces as a
``ParameterError`` naming the parameter, rather than as a ``TypeError`` from
deep inside a half-rendered document.

The first positional parameter of every template is the renderer and is
never counted. ``*args`` and ``**kwargs`` never make anything required.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from quire.exceptions import ParameterError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Required parameters of a template, excluding the renderer.

    Attributes:
        positional: ``(name, keyword_allowed)`` for each required positional
            parameter, in declaration order.
        keyword: Names of required keyword-only parameters.
        template_name: Qualified name of the template, for error messages.
    """

    positional: tuple[tuple[str, bool], ...] = ()
    keyword: tuple[str, ...] = ()
    template_name: str | None = None

    def check(self, args: Sequence[Any], kwargs: Mapping[str, Any]) -> None:
        """Raise ParameterError unless ``args``/``kwargs`` cover every requirement."""
        if len(self.positional) > len(args):
            for name, keyword_allowed in self.positional[len(args):]:
                if not (keyword_allowed and name in kwargs):
                    raise ParameterError(name, self.template_name, supplied=frozenset(kwargs))
        for name in self.keyword:
            if name not in kwargs:
                raise ParameterError(name, self.template_name, supplied=frozenset(kwargs))


# Used for callables whose signature cannot be inspected (some builtins).
UNCHECKED = ParameterSpec()


def parameter_spec(template: Callable[..., Any]) -> ParameterSpec:
    """Build the ParameterSpec for ``template``."""
    try:
        signature = inspect.signature(template)
    except (TypeError, ValueError):
        return UNCHECKED

    positional: list[tuple[str, bool]] = []
    keyword: list[str] = []
    renderer_seen = False
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL:
            if not renderer_seen:
                renderer_seen = True
                continue
            if param.default is param.empty:
                positional.append(
                    (param.name, param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD)
                )
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            renderer_seen = True
        elif param.kind is inspect.Parameter.KEYWORD_ONLY and param.default is param.empty:
            keyword.append(param.name)

    name = getattr(template, "__qualname__", None) or getattr(template, "__name__", None)
    return ParameterSpec(tuple(positional), tuple(keyword), name)


def verify_parameters(
    template: Callable[..., Any], args: Sequence[Any], kwargs: Mapping[str, Any]
) -> None:
    """Check that ``template`` can be called with ``(renderer, *args, **kwargs)``.

    Raises:
        ParameterError: naming the first required parameter left unsatisfied.

    Example:
        >>> def greeter(r, name): ...
        >>> verify_parameters(greeter, (), {})
        Traceback (most recent call last):
        ...
        quire.exceptions.ParameterError: Missing template parameter 'name' for greeter()

    """
    parameter_spec(template).check(args, kwargs)
