"""Attribute serialization.

Attributes are written in mapping insertion order, each preceded by a
single space. The policy per value:

- ``True``: the name alone (a presence attribute such as ``checked``)
- ``False`` / ``None``: nothing at all
- URI-bearing keys (``href``, ``src``): ``name="value"`` with the value
  percent-encoded
- anything else: ``name="value"`` with the value written verbatim

Ordinary attribute values are deliberately *not* entity-escaped; callers
that interpolate untrusted data into attributes must escape it themselves
(see ``quire.utils.html.html_escape``).
"""

from __future__ import annotations

from typing import Any

from quire._types import Attributes
from quire.utils.constants import S_EQUAL_QUOTE, S_QUOTE, S_SPACE, URI_ATTRS
from quire.utils.html import uri_escape


def normalize_name(name: str) -> str:
    """Turn a Python identifier into a tag or attribute name.

    One trailing underscore is dropped so keywords can be used (``class_``,
    ``for_``), then the remaining underscores become hyphens.

    Example:
        >>> normalize_name("data_foo")
        'data-foo'
        >>> normalize_name("class_")
        'class'

    """
    if "_" not in name:
        return name
    if name.endswith("_") and len(name) > 1:
        name = name[:-1]
    return name.replace("_", "-")


def encode_attributes(buf: list[str], attributes: Attributes) -> None:
    """Append serialized ``attributes`` to the ``buf`` string list."""
    append = buf.append
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = normalize_name(key)
        if value is True:
            append(S_SPACE)
            append(name)
        elif name in URI_ATTRS:
            append(S_SPACE)
            append(name)
            append(S_EQUAL_QUOTE)
            append(uri_escape(value))
            append(S_QUOTE)
        else:
            append(S_SPACE)
            append(name)
            append(S_EQUAL_QUOTE)
            append(_value_str(value))
            append(S_QUOTE)


def _value_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    return str(value)


__all__ = ["encode_attributes", "normalize_name"]
