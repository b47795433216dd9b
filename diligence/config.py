"""Configuration settings for the Diligence Script Engine."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Topic balancing bounds
    min_per_topic: int = 3
    min_total_questions: int = 15
    max_total_questions: int = 20

    # Logging
    log_level: str = "INFO"

    # API Settings
    api_title: str = "Diligence Script Engine"
    api_version: str = "0.1.0"
    cors_origins: list[str] = ["*"]

    class Config:
        env_prefix = "DILIGENCE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
