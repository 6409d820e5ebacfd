"""Whitespace normalization for storage and combined export."""

from __future__ import annotations

import re

_WS_RUN_RE = re.compile(r"\s+")
_INTER_TAG_WS_RE = re.compile(r">\s+<")


def normalize(markup: str) -> str:
    """Collapse whitespace runs and drop whitespace between adjacent tags.

    Tag order and attribute content are untouched apart from whitespace, and
    ``normalize(normalize(x)) == normalize(x)``.
    """
    collapsed = _WS_RUN_RE.sub(" ", markup)
    return _INTER_TAG_WS_RE.sub("><", collapsed).strip()
