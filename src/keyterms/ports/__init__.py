"""Ports - interfaces for external dependencies."""

from .archive import ArchiveWriterPort
from .reader import ContentReaderPort
from .storage import StoragePort

__all__ = ["ArchiveWriterPort", "ContentReaderPort", "StoragePort"]
