"""Turn a raw model response into candidate icon records.

Strict JSON parsing is tried first. Generative models sometimes wrap or
truncate the JSON while still emitting usable markup, so on failure the raw
text is scanned for embedded ``<svg>...</svg>`` fragments instead.
"""

from __future__ import annotations

import enum
import json
import logging
import re
from dataclasses import dataclass, field

from iconfactory.models.icon import CandidateIcon

logger = logging.getLogger(__name__)

MAX_FALLBACK_ICONS = 6

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*\n?")
_FENCE_CLOSE_RE = re.compile(r"\n?```\s*$")
_SVG_FRAGMENT_RE = re.compile(r"<svg[^>]*>[\s\S]*?</svg>")


class ExtractionKind(str, enum.Enum):
    STRICT = "strict"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass
class ExtractionResult:
    kind: ExtractionKind
    candidates: list[CandidateIcon] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return self.kind is ExtractionKind.FALLBACK


def _strip_fences(text: str) -> str:
    cleaned = _FENCE_OPEN_RE.sub("", text.strip())
    return _FENCE_CLOSE_RE.sub("", cleaned).strip()


def _parse_strict(raw_text: str) -> list[CandidateIcon] | None:
    """Candidates from a ``{"icons": [...]}`` document, or None if it is not one."""
    for text in (raw_text, _strip_fences(raw_text)):
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError, ValueError):
            continue
        if isinstance(data, dict) and isinstance(data.get("icons"), list):
            return [CandidateIcon.model_validate(item) for item in data["icons"] if isinstance(item, dict)]
        logger.debug("Response is JSON but has no icons array")
        return None
    return None


def extract_svg_fragments(text: str, limit: int = MAX_FALLBACK_ICONS) -> list[str]:
    """All ``<svg ...>...</svg>`` fragments in document order, at most ``limit``."""
    return _SVG_FRAGMENT_RE.findall(text)[:limit]


def extract(raw_text: str) -> ExtractionResult:
    """Parse a model response into candidates, tagged with how they were recovered."""
    if not raw_text:
        return ExtractionResult(kind=ExtractionKind.EMPTY)

    candidates = _parse_strict(raw_text)
    if candidates is not None:
        if not candidates:
            return ExtractionResult(kind=ExtractionKind.EMPTY)
        return ExtractionResult(kind=ExtractionKind.STRICT, candidates=candidates)

    fragments = extract_svg_fragments(raw_text)
    if not fragments:
        logger.warning("Model response is neither JSON nor contains <svg> fragments")
        return ExtractionResult(kind=ExtractionKind.EMPTY)

    logger.warning(
        "Strict parse of model response failed, recovered %d icon(s) from raw text",
        len(fragments),
    )
    return ExtractionResult(
        kind=ExtractionKind.FALLBACK,
        candidates=[
            CandidateIcon(
                name=f"Icon {i}",
                description=f"AI generated icon {i}",
                svg=svg,
                category="ai-generated",
            )
            for i, svg in enumerate(fragments, start=1)
        ],
    )
