import pytest
from pydantic import ValidationError

from callsheet.config.settings import Settings
from callsheet.normalization.models import NormalizationConfig
from callsheet.pipeline.service import normalization_config_from


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_extraction_provider(self) -> None:
        s = Settings()
        assert s.extraction_provider == "openai"

    def test_default_retry_policy(self) -> None:
        s = Settings()
        assert s.extraction_max_retries == 3
        assert s.extraction_retry_base_delay_seconds == 1.0

    def test_default_openai_timeout(self) -> None:
        s = Settings()
        assert s.extraction_openai_timeout_seconds == 30

    def test_default_normalization_matches_engine_defaults(self) -> None:
        assert normalization_config_from(Settings()) == NormalizationConfig()


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_extraction_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_PROVIDER", "groq")
        s = Settings()
        assert s.extraction_provider == "groq"

    def test_loads_normalization_toggles(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NORMALIZATION_DEDUPLICATE", "false")
        monkeypatch.setenv("NORMALIZATION_DEFAULT_COUNTRY_CODE", "44")
        config = normalization_config_from(Settings())
        assert config.deduplicate is False
        assert config.default_country_code == "44"


class TestSettingsValidation:
    def test_invalid_max_retries_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_MAX_RETRIES", "abc")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_toggle_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NORMALIZATION_NORMALIZE_PHONES", "sometimes")
        with pytest.raises(ValidationError):
            Settings()
