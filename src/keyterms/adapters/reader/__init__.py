"""Content reader adapters."""

from .filesystem import FilesystemReader

__all__ = ["FilesystemReader"]
