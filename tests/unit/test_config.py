"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from keyterms.config import BatchConfig, load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "missing.toml")

        assert settings.extraction.heading == "IMPORTANT TERMS TO USE"
        assert settings.extraction.boilerplate == "surfer-guidelines-"
        assert settings.batch.patterns == ["*.txt"]
        assert settings.batch.max_workers == 4
        assert settings.archive.default_name == "extracted_terms.zip"
        assert settings.archive.entry_extension == ".txt"

    def test_reads_toml(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text(
            '[extraction]\nheading = "KEY PHRASES"\n'
            '[batch]\npatterns = ["*.txt", "*.md"]\nmax_workers = 2\n'
            '[archive]\ndefault_name = "out.zip"\noutput = "~/exports"\n'
        )

        settings = load_settings(config)

        assert settings.extraction.heading == "KEY PHRASES"
        assert settings.extraction.boilerplate == "surfer-guidelines-"
        assert settings.batch.patterns == ["*.txt", "*.md"]
        assert settings.batch.max_workers == 2
        assert settings.archive.default_name == "out.zip"
        assert settings.archive.output == Path("~/exports").expanduser()

    def test_partial_toml(self, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text('[batch]\nmax_workers = 1\n')

        settings = load_settings(config)

        assert settings.batch.max_workers == 1
        assert settings.extraction.heading == "IMPORTANT TERMS TO USE"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KEYTERMS_BATCH_MAX_WORKERS", "8")
        assert load_settings(tmp_path / "missing.toml").batch.max_workers == 8


class TestBatchConfig:
    """Tests for BatchConfig validation."""

    def test_rejects_zero_workers(self) -> None:
        with pytest.raises(ValidationError, match="at least 1"):
            BatchConfig(max_workers=0)
