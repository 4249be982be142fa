"""Domain models."""

from dataclasses import dataclass, field
from enum import Enum

SECTION_NOT_FOUND_TEXT = "IMPORTANT TERMS section not found."
NO_TERMS_FOUND_TEXT = "No terms found in the IMPORTANT TERMS section."


class ExtractionStatus(str, Enum):
    """How the terms section was resolved."""

    FOUND = "found"
    SECTION_NOT_FOUND = "section-not-found"
    NO_TERMS_FOUND = "no-terms-found"


@dataclass(frozen=True)
class DocumentSource:
    """A document name paired with an opaque handle for the content reader."""

    name: str
    source: object


@dataclass(frozen=True)
class Document:
    """A document whose content has been read."""

    name: str
    content: str


@dataclass(frozen=True)
class ExtractionResult:
    """Terms extracted from a single document."""

    terms: tuple[str, ...] = ()
    status: ExtractionStatus = ExtractionStatus.FOUND

    def __post_init__(self) -> None:
        if self.status != ExtractionStatus.FOUND and self.terms:
            raise ValueError(f"Terms given with status {self.status.value}")
        if any(not term.strip() for term in self.terms):
            raise ValueError("Terms must not be blank")
        if tuple(self.terms) != tuple(sorted(set(self.terms))):
            raise ValueError("Terms must be unique and sorted")

    @property
    def term_count(self) -> int:
        return len(self.terms)

    @property
    def text(self) -> str:
        """Newline-joined terms, or the placeholder when nothing was found."""
        if self.status == ExtractionStatus.SECTION_NOT_FOUND:
            return SECTION_NOT_FOUND_TEXT
        if self.status == ExtractionStatus.NO_TERMS_FOUND:
            return NO_TERMS_FOUND_TEXT
        return "\n".join(self.terms)


@dataclass(frozen=True)
class Success:
    """Outcome of a document that was read and extracted."""

    display_name: str
    extraction: ExtractionResult = field(default_factory=ExtractionResult)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Outcome of a document that could not be processed."""

    display_name: str
    error_message: str

    @property
    def ok(self) -> bool:
        return False


DocumentOutcome = Success | Failure


@dataclass(frozen=True)
class ArchiveEntry:
    """A named text file destined for the archive."""

    entry_name: str
    body: str


@dataclass(frozen=True)
class Archive:
    """A written archive ready to be saved or downloaded."""

    name: str
    data: bytes
