"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Reference rate (BCB SGS series 4389, Selic target, annual %)
    reference_rate_url: str = "https://api.bcb.gov.br/dados/serie/bcdata.sgs.4389/dados/ultimos/1?formato=json"
    reference_rate_fallback: float = 14.90
    reference_rate_cache_ttl_seconds: float = 3600.0

    # Projection
    projection_max_months: int = 120

    # Service
    service_name: str = "wealth-engine"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
