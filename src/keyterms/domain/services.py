"""Domain services - orchestrate business logic."""

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from ..ports.archive import ArchiveWriterPort
from ..ports.reader import ContentReaderPort
from .errors import ArchiveUnavailable, ContentUnreadable
from .extraction import TermExtractor
from .models import (
    Archive,
    ArchiveEntry,
    Document,
    DocumentOutcome,
    DocumentSource,
    Failure,
    Success,
)
from .naming import (
    DEFAULT_ARCHIVE_NAME,
    DEFAULT_BOILERPLATE,
    ENTRY_EXTENSION,
    archive_file_name,
    entry_stem,
    normalize_filename,
)

logger = logging.getLogger(__name__)


class BatchProcessor:
    """Reads and extracts terms from many documents, one outcome each."""

    def __init__(
        self,
        reader: ContentReaderPort,
        extractor: TermExtractor | None = None,
        max_workers: int = 1,
        boilerplate: str = DEFAULT_BOILERPLATE,
    ) -> None:
        self.reader = reader
        self.extractor = extractor or TermExtractor()
        self.max_workers = max_workers
        self.boilerplate = boilerplate

    def process(self, sources: Iterable[DocumentSource]) -> list[DocumentOutcome]:
        """Process every document, returning outcomes in input order."""
        outcomes = list(self.iter_process(sources))
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(
            f"Batch complete: {len(outcomes) - failed} succeeded, {failed} failed"
        )
        return outcomes

    def iter_process(self, sources: Iterable[DocumentSource]) -> Iterator[DocumentOutcome]:
        """Yield outcomes in input order.

        With ``max_workers > 1`` documents are read on a thread pool. Closing
        the iterator early cancels documents that have not started yet;
        outcomes already yielded are unaffected.
        """
        sources = list(sources)
        logger.info(f"Processing {len(sources)} documents")

        if self.max_workers <= 1 or len(sources) <= 1:
            for source in sources:
                yield self.process_one(source)
            return

        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(sources)))
        try:
            futures = [executor.submit(self.process_one, source) for source in sources]
            for future in futures:
                yield future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def process_one(self, source: DocumentSource) -> DocumentOutcome:
        """Read and extract a single document. Never raises."""
        display_name = normalize_filename(source.name, self.boilerplate)
        logger.debug(f"Processing: {source.name}")

        try:
            document = Document(name=source.name, content=self.reader.read_all(source.source))
        except ContentUnreadable as e:
            logger.warning(f"Failed to read {source.name}: {e}")
            return Failure(display_name=display_name, error_message=f"Failed to read file: {e}")
        except Exception as e:
            logger.exception(f"Failed to read {source.name}: {e}")
            return Failure(display_name=display_name, error_message=f"Failed to read file: {e}")

        try:
            extraction = self.extractor.extract(document.content)
        except Exception as e:
            logger.exception(f"Extraction failed for {source.name}: {e}")
            return Failure(display_name=display_name, error_message=f"Extraction failed: {e}")

        logger.info(f"Extracted {extraction.term_count} terms: {display_name}")
        return Success(display_name=display_name, extraction=extraction)


class ArchiveBuilder:
    """Turns successful outcomes into archive entries and writes the archive."""

    def __init__(
        self,
        writer: ArchiveWriterPort | None = None,
        entry_extension: str = ENTRY_EXTENSION,
        default_archive_name: str = DEFAULT_ARCHIVE_NAME,
    ) -> None:
        self.writer = writer
        self.entry_extension = entry_extension
        self.default_archive_name = default_archive_name

    def build(self, outcomes: Iterable[DocumentOutcome]) -> list[ArchiveEntry]:
        """Build one entry per Success outcome, in outcome order.

        Entries whose names collide get ``-1``, ``-2``, ... appended to the
        stem, so no entry ever replaces another, even on a case-insensitive
        filesystem.
        """
        entries = []
        taken: set[str] = set()

        for outcome in outcomes:
            if not isinstance(outcome, Success):
                continue

            stem = entry_stem(outcome.display_name)
            entry_name = f"{stem}{self.entry_extension}"
            counter = 1
            while entry_name.lower() in taken:
                entry_name = f"{stem}-{counter}{self.entry_extension}"
                counter += 1
            taken.add(entry_name.lower())

            body = f"{outcome.display_name}\n{outcome.extraction.text}"
            entries.append(ArchiveEntry(entry_name=entry_name, body=body))

        return entries

    def archive_name(self, name: str | None = None) -> str:
        return archive_file_name(name, default=self.default_archive_name)

    def write(self, outcomes: Iterable[DocumentOutcome], archive_name: str | None = None) -> Archive:
        """Build entries and hand them to the archive writer.

        Raises ArchiveUnavailable if there is no writer or it fails.
        """
        if self.writer is None:
            raise ArchiveUnavailable("No archive writer configured")

        entries = self.build(outcomes)
        name = self.archive_name(archive_name)

        try:
            data = self.writer.write(entries)
        except ArchiveUnavailable:
            raise
        except Exception as e:
            logger.exception(f"Archive writer failed: {e}")
            raise ArchiveUnavailable(f"Failed to create archive: {e}") from e

        logger.info(f"Created archive {name} with {len(entries)} entries")
        return Archive(name=name, data=data)
