"""Archive writer producing an in-memory ZIP file."""

import io
import logging
import zipfile

from ...domain.errors import ArchiveUnavailable
from ...domain.models import ArchiveEntry
from ...ports.archive import ArchiveWriterPort

logger = logging.getLogger(__name__)


class ZipArchiveWriter(ArchiveWriterPort):
    """Archive writer using the zipfile module."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def write(self, entries: list[ArchiveEntry]) -> bytes:
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", compression=self.compression) as zf:
                for entry in entries:
                    zf.writestr(entry.entry_name, entry.body.encode("utf-8"))
        except (OSError, RuntimeError, ValueError) as e:
            raise ArchiveUnavailable(f"Failed to write ZIP: {e}") from e

        data = buffer.getvalue()
        logger.debug(f"Wrote ZIP with {len(entries)} entries ({len(data)} bytes)")
        return data
