from pydantic_settings import BaseSettings
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Centralized configuration for all components."""

    # Application
    app_name: str = "Epic Alignment Service"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 60.0
    analyze_temperature: float = 0.2
    suggest_temperature: float = 0.3
    suggest_max_tokens: int = 800

    # Retry policy for the upstream call
    upstream_max_attempts: int = 2
    upstream_backoff_seconds: float = 0.6

    # Prompt bounds
    analyze_max_tickets: int = 50
    suggest_max_tickets: int = 20
    max_existing_stories: int = 20
    ticket_subject_max_chars: int = 120
    ticket_description_max_chars: int = 240
    story_summary_max_chars: int = 200

    # KPI likelihood variant of the analyze operation
    kpi_likelihood_enabled: bool = True
    kpi_target: str = (
        "reduce monthly support tickets for the selected intents by at least 20% "
        "within two release cycles"
    )

    class Config:
        env_file = ".env"
        extra = "ignore"
        frozen = True


@lru_cache()
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
