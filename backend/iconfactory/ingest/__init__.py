"""Ingestion: model response text -> candidate records -> sanitized icons."""

from iconfactory.ingest.extractor import ExtractionKind, ExtractionResult, extract
from iconfactory.ingest.sanitizer import sanitize
from iconfactory.ingest.service import IngestionResult, ingest

__all__ = [
    "ExtractionKind",
    "ExtractionResult",
    "IngestionResult",
    "extract",
    "ingest",
    "sanitize",
]
