from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    extraction_provider: str = "openai"
    extraction_max_retries: int = 3
    extraction_retry_base_delay_seconds: float = 1.0

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o"
    extraction_openai_timeout_seconds: int = 30
    extraction_openai_temperature: float = 0.1

    extraction_openai_compatible_base_url: str = ""
    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_timeout_seconds: int = 30

    extraction_openrouter_api_key: str = ""
    extraction_openrouter_model_name: str = ""
    extraction_groq_api_key: str = ""
    extraction_groq_model_name: str = ""
    extraction_together_api_key: str = ""
    extraction_together_model_name: str = ""
    extraction_ollama_api_key: str = "ollama"
    extraction_ollama_model_name: str = ""

    normalization_normalize_phones: bool = True
    normalization_normalize_names: bool = True
    normalization_normalize_roles: bool = True
    normalization_infer_departments: bool = True
    normalization_deduplicate: bool = True
    normalization_default_country_code: str = "1"
