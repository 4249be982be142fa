"""Storage adapters."""

from .filesystem import FilesystemAdapter, sanitize_filename

__all__ = ["FilesystemAdapter", "sanitize_filename"]
