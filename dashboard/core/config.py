"""
Zentrale Konfiguration für das Data Summary Dashboard
Basiert auf Pydantic Settings mit Environment Variable Support
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_DATA_SOURCES: list[str] = [
    "https://jsonplaceholder.typicode.com/posts/1",
    "https://jsonplaceholder.typicode.com/posts/2",
    "https://jsonplaceholder.typicode.com/posts/3",
]


class Settings(BaseSettings):
    """Application Settings mit Environment Variable Support"""

    # Data Sources (DATA_SOURCES='["https://...", ...]')
    data_sources: list[str] = list(DEFAULT_DATA_SOURCES)
    fetch_timeout_seconds: float = 30.0

    # Database
    database_url: str = "sqlite:///./dashboard.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Monitoring
    log_level: str = "INFO"
    log_format: str = "console"  # console | json
    log_file_path: Optional[str] = None
    enable_metrics: bool = False
    metrics_port: int = 8008

    # Application
    environment: str = "development"  # Environment: development, staging, production
    cors_origins: list[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("data_sources")
    @classmethod
    def _strip_sources(cls, value: list[str]) -> list[str]:
        # blank entries are configuration noise, not sources
        return [s.strip() for s in value if s and s.strip()]

    @field_validator("fetch_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("fetch_timeout_seconds must be positive")
        return value
