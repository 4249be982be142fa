"""Domain errors."""


class KeytermsError(Exception):
    """Base class for keyterms errors."""


class ContentUnreadable(KeytermsError):
    """Raised when a document's content cannot be read as text."""


class ArchiveUnavailable(KeytermsError):
    """Raised when the archive writer is missing or fails."""
