"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="TENANT_LEDGER_", extra="ignore"
    )

    # Service
    service_name: str = "tenant-ledger"
    log_level: str = "INFO"

    # Label printed next to amounts; no conversion is ever applied
    currency: str = "AED"

    # Frequency used when a lease request does not name one
    default_frequency: str = "monthly"


settings = Settings()
