"""Tag-scoped attribute rewriting: recolor, resize, restroke.

AI-generated icons mix "filled" and "outline" conventions, often inside one
document. A blind replace of every ``fill``/``stroke`` corrupts icons that use
``none`` on purpose, so recoloring follows per-element rules:

- ``path`` honors the fill/stroke declared on the root ``<svg>``: a painted
  root fill (or stroke) means the path's fill (or stroke) is set, inserting
  the attribute when missing.
- other shapes only get an existing ``fill`` replaced, never inserted.
- any shape with an explicit ``stroke-width`` is meant to be stroked, so its
  stroke is recolored as well.

``none`` is never overwritten. All operations are idempotent for a fixed
parameter and only change attribute values or presence inside existing tags.
"""

from __future__ import annotations

import logging
import re

from iconfactory.svg.tags import (
    find_root_tag,
    has_attr,
    is_none_value,
    iter_shape_tags,
    read_attr,
    rewrite_shape_tags,
    set_attr,
)

logger = logging.getLogger(__name__)

_WIDTH_RE = re.compile(r'(?<![\w:-])width\s*=\s*"[^"]*"')
_HEIGHT_RE = re.compile(r'(?<![\w:-])height\s*=\s*"[^"]*"')
_VIEWBOX_RE = re.compile(r'(?<![\w:-])viewBox\s*=\s*"[^"]*"')


def _fmt(value: float) -> str:
    """Format a number the way it is written in markup: 48, not 48.0."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _is_painted(value: str | None) -> bool:
    return value is not None and value.strip() != "" and not is_none_value(value)


# ---------------------------------------------------------------------------
# Recolor
# ---------------------------------------------------------------------------

def _recolorable(value: str | None) -> bool:
    # A shape's own fill/stroke is replaced unless it is absent or "none"
    return value is not None and not is_none_value(value)


def _insert_or_replace(tag: str, name: str, color: str) -> str:
    value = read_attr(tag, name)
    if value is None or _recolorable(value):
        return set_attr(tag, name, color)
    return tag


def _recolor_shape(element: str, tag: str, color: str, root_fill: str | None, root_stroke: str | None) -> str:
    if element == "path":
        if _is_painted(root_fill):
            tag = _insert_or_replace(tag, "fill", color)
        if _is_painted(root_stroke):
            tag = _insert_or_replace(tag, "stroke", color)
    elif _recolorable(read_attr(tag, "fill")):
        tag = set_attr(tag, "fill", color)

    if has_attr(tag, "stroke-width"):
        tag = _insert_or_replace(tag, "stroke", color)
    return tag


def _has_recolorable_shape(markup: str, root_fill: str | None, root_stroke: str | None) -> bool:
    for element, tag in iter_shape_tags(markup):
        if has_attr(tag, "stroke-width"):
            return True
        if element == "path" and (_is_painted(root_fill) or _is_painted(root_stroke)):
            return True
        if element != "path" and _recolorable(read_attr(tag, "fill")):
            return True
    return False


def set_color(markup: str, color: str) -> str:
    """Recolor the shapes of an icon.

    The root tag keeps its attributes, with one legacy exception: markup with
    no ``fill=`` anywhere and no shape the per-shape rules would recolor gets
    ``fill="color"`` on the root tag, so a bare single-fill icon still changes
    color. Shapes are then recolored against that root.
    """
    root = find_root_tag(markup)
    if root is None:
        logger.debug("set_color: no <svg> root tag, leaving markup unchanged")
        return markup

    root_tag = root.group(0)
    root_fill = read_attr(root_tag, "fill")
    root_stroke = read_attr(root_tag, "stroke")
    if "fill=" not in markup and not _has_recolorable_shape(markup, root_fill, root_stroke):
        new_root = set_attr(root_tag, "fill", color)
        markup = markup[:root.start()] + new_root + markup[root.end():]
        root_fill = read_attr(new_root, "fill")

    return rewrite_shape_tags(
        markup,
        lambda element, tag: _recolor_shape(element, tag, color, root_fill, root_stroke),
    )


# ---------------------------------------------------------------------------
# Resize
# ---------------------------------------------------------------------------

def set_size(markup: str, size: float) -> str:
    """Set every ``width``/``height`` to ``size`` and every ``viewBox`` to ``0 0 size size``.

    Not tag-scoped: in icon markup these attributes are expected on the root only.
    """
    s = _fmt(size)
    markup = _WIDTH_RE.sub(f'width="{s}"', markup)
    markup = _HEIGHT_RE.sub(f'height="{s}"', markup)
    return _VIEWBOX_RE.sub(f'viewBox="0 0 {s} {s}"', markup)


# ---------------------------------------------------------------------------
# Stroke width
# ---------------------------------------------------------------------------

def _restroke(tag: str, width: str) -> str:
    if has_attr(tag, "stroke-width"):
        return set_attr(tag, "stroke-width", width)
    if has_attr(tag, "stroke"):
        return set_attr(tag, "stroke-width", width)
    return tag


def set_stroke_width(markup: str, width: float) -> str:
    """Set ``stroke-width`` on every stroked shape.

    A shape with a ``stroke-width`` gets it replaced, a shape with only a
    ``stroke`` gets one inserted, an unstroked shape is left alone. The root
    tag follows the same rule since outline icons usually declare their
    stroke there.
    """
    w = _fmt(width)
    root = find_root_tag(markup)
    if root is not None:
        new_root = _restroke(root.group(0), w)
        markup = markup[:root.start()] + new_root + markup[root.end():]
    return rewrite_shape_tags(markup, lambda _element, tag: _restroke(tag, w))
