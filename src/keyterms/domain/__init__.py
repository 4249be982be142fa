"""Domain layer - core business logic."""

from .errors import ArchiveUnavailable, ContentUnreadable, KeytermsError
from .models import (
    Archive,
    ArchiveEntry,
    Document,
    DocumentOutcome,
    DocumentSource,
    ExtractionResult,
    ExtractionStatus,
    Failure,
    Success,
)

__all__ = [
    "Archive",
    "ArchiveEntry",
    "ArchiveUnavailable",
    "ContentUnreadable",
    "Document",
    "DocumentOutcome",
    "DocumentSource",
    "ExtractionResult",
    "ExtractionStatus",
    "Failure",
    "KeytermsError",
    "Success",
]
