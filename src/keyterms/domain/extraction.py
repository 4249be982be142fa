"""Term extraction from the IMPORTANT TERMS section of a document."""

import logging
import re

from .models import ExtractionResult, ExtractionStatus

logger = logging.getLogger(__name__)

DEFAULT_HEADING = "IMPORTANT TERMS TO USE"

# Bullet, optional whitespace, then everything up to the first colon on the line
_ITEM_PATTERN = re.compile(r"\*\s*(.+?):")


def _section_pattern(heading: str) -> re.Pattern[str]:
    return re.compile(
        rf"##\s*{re.escape(heading)}(.+?)(?:##|\Z)",
        re.IGNORECASE | re.DOTALL,
    )


class TermExtractor:
    """Extracts a sorted, deduplicated list of terms from document text.

    The section runs from the ``## <heading>`` line up to the next ``##``
    heading or the end of the text. Each ``* term:`` line inside it yields
    one term.
    """

    def __init__(self, heading: str = DEFAULT_HEADING) -> None:
        self.heading = heading
        self._section = _section_pattern(heading)

    def find_section(self, text: str) -> str | None:
        """Return the body of the terms section, or None if it is missing."""
        match = self._section.search(text)
        if match is None:
            return None
        return match.group(1)

    def find_items(self, section: str) -> list[str]:
        """Return the trimmed term of every bullet item, in document order."""
        items = []
        for match in _ITEM_PATTERN.finditer(section):
            term = match.group(1).strip()
            if term:
                items.append(term)
        return items

    def extract(self, text: str) -> ExtractionResult:
        section = self.find_section(text)
        if section is None:
            logger.debug("Terms section not found")
            return ExtractionResult(status=ExtractionStatus.SECTION_NOT_FOUND)

        items = self.find_items(section)
        if not items:
            logger.debug("Terms section has no items")
            return ExtractionResult(status=ExtractionStatus.NO_TERMS_FOUND)

        terms = tuple(sorted(set(items)))
        logger.debug(f"Extracted {len(terms)} terms from {len(items)} items")
        return ExtractionResult(terms=terms)


def extract_terms(text: str) -> ExtractionResult:
    """Extract terms using the default heading."""
    return TermExtractor().extract(text)
