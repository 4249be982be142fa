"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from keyterms.ports.archive import ArchiveWriterPort
from keyterms.ports.reader import ContentReaderPort
from keyterms.ports.storage import StoragePort

GUIDELINES_TEXT = """\
# Content guidelines

## IMPORTANT TERMS TO USE
* search engine: use 3-5 times
* keyword density: 1-2 times
*   backlinks  : mention once
* search engine: repeated

## OTHER NOTES
* not a term: ignored
"""


@pytest.fixture
def guidelines_text() -> str:
    """Document with a terms section containing one duplicate."""
    return GUIDELINES_TEXT


@pytest.fixture
def mock_reader() -> MagicMock:
    """Mock content reader port."""
    mock = MagicMock(spec=ContentReaderPort)
    mock.read_all.return_value = GUIDELINES_TEXT
    return mock


@pytest.fixture
def mock_writer() -> MagicMock:
    """Mock archive writer port."""
    mock = MagicMock(spec=ArchiveWriterPort)
    mock.write.return_value = b"PK\x05\x06" + b"\x00" * 18
    return mock


@pytest.fixture
def mock_storage() -> MagicMock:
    """Mock storage port."""
    return MagicMock(spec=StoragePort)
