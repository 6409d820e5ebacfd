"""Ingestion-side validity gate: keep usable candidates, fill in defaults."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from iconfactory.errors import EmptyResultError
from iconfactory.models.icon import CandidateIcon, Icon, new_id
from iconfactory.svg.normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Untitled Icon"
DEFAULT_DESCRIPTION = "AI generated icon"
DEFAULT_CATEGORY = "ai-generated"


def _is_candidate_usable(candidate: CandidateIcon) -> bool:
    svg = candidate.svg
    return isinstance(svg, str) and bool(svg) and "<svg" in svg


def _text_or(value: object, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def sanitize(candidates: Iterable[CandidateIcon | dict]) -> list[Icon]:
    """Filter candidates down to icons with usable markup.

    Raises:
        EmptyResultError: when no candidate survives.
    """
    icons: list[Icon] = []
    dropped = 0
    for raw in candidates:
        candidate = raw if isinstance(raw, CandidateIcon) else CandidateIcon.model_validate(raw)
        if not _is_candidate_usable(candidate):
            dropped += 1
            continue
        icons.append(
            Icon(
                id=new_id(),
                name=_text_or(candidate.name, DEFAULT_NAME),
                description=_text_or(candidate.description, DEFAULT_DESCRIPTION),
                svg=normalize(candidate.svg),
                category=_text_or(candidate.category, DEFAULT_CATEGORY),
            )
        )

    if dropped:
        logger.info("Sanitizer dropped %d candidate(s) without usable markup", dropped)
    if not icons:
        raise EmptyResultError()
    return icons
