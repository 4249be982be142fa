"""Storage adapter using local filesystem."""

import logging
import re
from pathlib import Path

from ...domain.models import Archive
from ...ports.storage import StoragePort

logger = logging.getLogger(__name__)


def sanitize_filename(name: str, max_length: int = 180) -> str:
    """Remove/replace characters invalid in filenames."""
    # Remove null bytes
    name = name.replace("\x00", "")
    # Replace path traversal attempts
    name = name.replace("..", "_")
    # Replace problematic characters
    name = re.sub(r'[<>:"/\\|?*]', "_", name)
    # Remove leading/trailing dots, underscores and spaces
    name = name.strip("._ ")
    if len(name) > max_length:
        name = name[:max_length]
    return name or "Untitled"


class FilesystemAdapter(StoragePort):
    """Saves archives into a directory."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path

    def store(self, archive: Archive) -> Path:
        """Write archive bytes, adding " (n)" to the name on collision."""
        self.base_path.mkdir(parents=True, exist_ok=True)

        path = Path(archive.name)
        stem = sanitize_filename(path.stem)
        dest = self.base_path / f"{stem}{path.suffix}"

        # Handle collision
        if dest.exists():
            counter = 1
            while dest.exists():
                dest = self.base_path / f"{stem} ({counter}){path.suffix}"
                counter += 1

        dest.write_bytes(archive.data)
        logger.info(f"Saved archive: {dest}")

        return dest
