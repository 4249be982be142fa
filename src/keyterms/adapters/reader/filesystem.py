"""Content reader using local filesystem."""

import logging
from pathlib import Path

from ...domain.errors import ContentUnreadable
from ...ports.reader import ContentReaderPort

logger = logging.getLogger(__name__)


class FilesystemReader(ContentReaderPort):
    """Reads documents from disk as text.

    Bytes that are not valid in ``encoding`` are replaced rather than
    rejected.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_all(self, source: object) -> str:
        path = Path(source)  # type: ignore[arg-type]
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ContentUnreadable(e.strerror or str(e)) from e

        logger.debug(f"Read {len(raw)} bytes from {path.name}")
        return raw.decode(self.encoding, errors="replace")
