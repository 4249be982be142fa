"""Content reader port - interface for acquiring document text."""

from abc import ABC, abstractmethod


class ContentReaderPort(ABC):
    """Interface for reading a document's full text."""

    @abstractmethod
    def read_all(self, source: object) -> str:
        """Read the whole content behind ``source`` as decoded text.

        Raises ContentUnreadable if no text can be produced.
        """
        pass
