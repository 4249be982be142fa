"""Storage port - interface for saving a finished archive."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import Archive


class StoragePort(ABC):
    """Interface for archive storage."""

    @abstractmethod
    def store(self, archive: "Archive") -> Path:
        """Save an archive without overwriting existing files.

        Returns path to stored file.
        """
        pass
