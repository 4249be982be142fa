"""Archive writer port - interface for bundling entries into one blob."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ArchiveEntry


class ArchiveWriterPort(ABC):
    """Interface for writing archive entries into a single binary blob."""

    @abstractmethod
    def write(self, entries: list["ArchiveEntry"]) -> bytes:
        """Write entries and return the archive bytes.

        Raises ArchiveUnavailable if the archive cannot be produced.
        """
        pass
