"""Tag-scoped scanning of SVG markup.

Everything here works on the text of a single opening tag at a time. Nothing
builds a document tree: untouched bytes of the markup stay byte-identical, and
the rewriter only ever sees one tag's text and its element name.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

# Element types whose presentation attributes the rewriter edits
SHAPE_TAGS = ("circle", "rect", "path", "ellipse", "polygon", "line", "polyline")

# Quote-aware body of an opening tag: a ">" inside an attribute value does not end it
_TAG_BODY = r"""(?:"[^"]*"|'[^']*'|[^'">])*"""

_SHAPE_TAG_RE = re.compile(
    r"<(" + "|".join(SHAPE_TAGS) + r")\b" + _TAG_BODY + r">",
    re.IGNORECASE,
)
_ROOT_TAG_RE = re.compile(r"<svg\b" + _TAG_BODY + r">", re.IGNORECASE)
_TAG_END_RE = re.compile(r"\s*/?>$")

# One attribute with its quoted value; values are consumed whole, so an
# "x=" written inside another attribute's value is never taken for a name
_ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*("[^"]*"|'[^']*')""")
_TAG_NAME_RE = re.compile(r"<[\w:-]+")

ShapeEditor = Callable[[str, str], str]


def _find_attr(tag: str, name: str) -> re.Match[str] | None:
    start = _TAG_NAME_RE.match(tag)
    pos = start.end() if start else 0
    wanted = name.lower()
    for m in _ATTR_RE.finditer(tag, pos):
        if m.group(1).lower() == wanted:
            return m
    return None


def find_root_tag(markup: str) -> re.Match[str] | None:
    """Return the match of the outermost ``<svg ...>`` opening tag, if any."""
    return _ROOT_TAG_RE.search(markup)


def iter_shape_tags(markup: str):
    """Yield ``(element_name, tag_text)`` for each shape opening tag in document order."""
    for m in _SHAPE_TAG_RE.finditer(markup):
        yield m.group(1).lower(), m.group(0)


def rewrite_shape_tags(markup: str, editor: ShapeEditor) -> str:
    """Replace each shape opening tag with ``editor(element_name, tag_text)``."""
    return _SHAPE_TAG_RE.sub(lambda m: editor(m.group(1).lower(), m.group(0)), markup)


def read_attr(tag: str, name: str) -> str | None:
    """Value of attribute ``name`` in a single tag, or None when absent."""
    m = _find_attr(tag, name)
    if m is None:
        return None
    return m.group(2)[1:-1]


def has_attr(tag: str, name: str) -> bool:
    return read_attr(tag, name) is not None


def is_none_value(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "none"


def set_attr(tag: str, name: str, value: str) -> str:
    """Set ``name="value"`` on a single tag.

    An existing attribute keeps its position and only its value changes. A new
    attribute is inserted right before the closing ``>`` or ``/>``.
    """
    safe_v = html.escape(value, quote=True)
    m = _find_attr(tag, name)
    if m is not None:
        return f'{tag[:m.start()]}{name}="{safe_v}"{tag[m.end():]}'

    end = _TAG_END_RE.search(tag)
    if end is None:
        return tag
    closing = tag[end.start():].strip()
    if closing == "/>":
        return f'{tag[:end.start()]} {name}="{safe_v}"{tag[end.start():]}'
    return f'{tag[:end.start()]} {name}="{safe_v}">'
