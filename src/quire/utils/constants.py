"""Shared constants for quire.

Markup fragments are interned module-level strings so the renderer appends
the same objects over and over instead of building new ones per tag.
"""

from __future__ import annotations

# Attributes whose values are URIs. Their text values are percent-encoded
# instead of being written verbatim, in both HTML and XML mode.
URI_ATTRS: frozenset[str] = frozenset({"href", "src"})

# Markup fragments
S_LT = "<"
S_GT = ">"
S_LT_SLASH = "</"
S_SLASH_GT = "/>"
S_SPACE = " "
S_EQUAL_QUOTE = '="'
S_QUOTE = '"'

S_DOCTYPE_HTML = "<!DOCTYPE html>"
