"""Ingestion entry points: raw text -> icons, and prompt -> model -> icons."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from iconfactory.ingest.extractor import ExtractionKind, extract
from iconfactory.ingest.sanitizer import sanitize
from iconfactory.models.icon import Icon

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    kind: ExtractionKind
    icons: list[Icon]


def ingest(raw_text: str, limit: int | None = None) -> IngestionResult:
    """Extract and sanitize icons from a raw model response.

    Raises:
        EmptyResultError: when nothing usable was found. No partial result is returned.
    """
    extraction = extract(raw_text)
    icons = sanitize(extraction.candidates)
    if limit is not None and len(icons) > limit:
        icons = icons[:limit]
    logger.info("Ingested %d icon(s) via %s extraction", len(icons), extraction.kind.value)
    return IngestionResult(kind=extraction.kind, icons=icons)


async def generate_icons(prompt: str, style: str, count: int) -> IngestionResult:
    """Ask the generative model for an icon set and ingest its answer."""
    from iconfactory.llm.client import get_icon_set_response

    raw_text = await get_icon_set_response(prompt=prompt, style=style, count=count)
    return ingest(raw_text, limit=count)
