"""Shallow structural SVG check gating persistence and export."""

from __future__ import annotations

import re

_ELEMENT_RE = re.compile(r"<(circle|rect|path|polygon|polyline|ellipse|line|g)")


def is_valid_svg(markup: object) -> bool:
    """True iff markup is a non-empty string with ``<svg``, ``</svg>`` and a closing tag marker.

    This is not a schema or DOM check. It only decides whether markup is
    complete enough to be stored, shown or exported.
    """
    if not markup or not isinstance(markup, str):
        return False
    if "<svg" not in markup or "</svg>" not in markup:
        return False
    return "</" in markup


def count_elements(markup: str) -> int:
    """Count opening tags of drawable elements and groups."""
    return len(_ELEMENT_RE.findall(markup or ""))


def validation_report(markup: str) -> dict[str, object]:
    return {
        "is_valid": is_valid_svg(markup),
        "size": len(markup or ""),
        "element_count": count_elements(markup),
    }
