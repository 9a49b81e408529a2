"""Configuration management using Pydantic Settings"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "aagt-gateway"
    log_level: str = "INFO"

    # Validation bounds policy per endpoint ("strict" or "permissive")
    calculate_loan_policy: Literal["strict", "permissive"] = "permissive"
    quote_policy: Literal["strict", "permissive"] = "strict"

    # Rate card JSON file; built-in rates are used when unset
    rate_card_path: Optional[str] = None

    # Responses
    include_schedule_by_default: bool = False


settings = Settings()
