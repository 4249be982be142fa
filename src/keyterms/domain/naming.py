"""Display names for documents and names for archive files."""

import re

DEFAULT_BOILERPLATE = "surfer-guidelines-"
DEFAULT_ARCHIVE_NAME = "extracted_terms.zip"
ARCHIVE_EXTENSION = ".zip"
ENTRY_EXTENSION = ".txt"

_TXT_EXTENSION = re.compile(r"\.txt\Z", re.IGNORECASE)
_UNDERSCORE_NUMBER = re.compile(r"^(\d+)_")
_DASH_AFTER_NUMBER = re.compile(r"^(\d+)\.\s*-\s*")
_DATE_SUFFIX = re.compile(r"-\d{1,2}-\d{1,2}-\d{4}\Z")
_PATH_SEPARATORS = re.compile(r"[\\/]")
_WHITESPACE = re.compile(r"\s+")


def normalize_filename(raw_name: str, boilerplate: str = DEFAULT_BOILERPLATE) -> str:
    """Derive a clean display name from a document filename.

    Examples:
        "1_surfer-guidelines-report.txt" -> "1. report"
        "2.-Guidelines-12-08-2025.txt" -> "2. Guidelines"
    """
    name = _TXT_EXTENSION.sub("", raw_name)

    if boilerplate:
        prefix = re.compile(rf"^(\d+)[._]\s*{re.escape(boilerplate)}")
        name = prefix.sub(r"\1. ", name)

    name = _UNDERSCORE_NUMBER.sub(r"\1. ", name)
    name = _DASH_AFTER_NUMBER.sub(r"\1. ", name)
    return _DATE_SUFFIX.sub("", name)


def entry_stem(display_name: str) -> str:
    """Turn a display name into the stem of an archive entry name."""
    stem = _PATH_SEPARATORS.sub("_", display_name)
    stem = stem.replace("_", " ")
    stem = _WHITESPACE.sub(" ", stem).strip()
    return stem or "Untitled"


def _has_stem(name: str) -> bool:
    stem = name[: -len(ARCHIVE_EXTENSION)] if name.lower().endswith(ARCHIVE_EXTENSION) else name
    return bool(stem.strip(" ./\\"))


def archive_file_name(name: str | None = None, default: str = DEFAULT_ARCHIVE_NAME) -> str:
    """Resolve the archive file name, ensuring the .zip extension.

    Blank names, and names with nothing before the extension, fall back to
    ``default``; the default gets the same treatment.
    """
    name = (name or "").strip()
    if not _has_stem(name):
        name = default.strip()
        if not _has_stem(name):
            name = DEFAULT_ARCHIVE_NAME
    if not name.lower().endswith(ARCHIVE_EXTENSION):
        name += ARCHIVE_EXTENSION
    return name
