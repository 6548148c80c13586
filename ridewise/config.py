"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Strategies (looked up by name in the domain registries)
    matching_strategy: str = "nearest"
    fare_strategy: str = "default"
    peak_multiplier: float = 1.5

    # API
    rate_limit: str = "100/minute"
    seed_demo_data: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
