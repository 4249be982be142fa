"""Configuration management using pydantic-settings."""

import tomllib
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.extraction import DEFAULT_HEADING
from .domain.naming import DEFAULT_ARCHIVE_NAME, DEFAULT_BOILERPLATE, ENTRY_EXTENSION

DEFAULT_PATTERNS = ["*.txt"]
DEFAULT_MAX_WORKERS = 4
DEFAULT_OUTPUT = "."
CONFIG_PATH = Path("~/.config/keyterms/config.toml").expanduser()


class ExtractionConfig(BaseSettings):
    """Where terms are found and how names are cleaned."""

    model_config = SettingsConfigDict(env_prefix="KEYTERMS_EXTRACTION_")

    heading: str = DEFAULT_HEADING
    boilerplate: str = DEFAULT_BOILERPLATE


class BatchConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEYTERMS_BATCH_")

    patterns: list[str] = DEFAULT_PATTERNS
    max_workers: int = DEFAULT_MAX_WORKERS

    @field_validator("max_workers")
    @classmethod
    def check_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_workers must be at least 1")
        return v


class ArchiveConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEYTERMS_ARCHIVE_")

    default_name: str = DEFAULT_ARCHIVE_NAME
    entry_extension: str = ENTRY_EXTENSION
    output: Path = Path(DEFAULT_OUTPUT)

    @field_validator("output", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEYTERMS_")

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        extraction = ExtractionConfig(**data.get("extraction", {}))
        batch = BatchConfig(**data.get("batch", {}))
        archive = ArchiveConfig(**data.get("archive", {}))
        return Settings(extraction=extraction, batch=batch, archive=archive)

    return Settings()
