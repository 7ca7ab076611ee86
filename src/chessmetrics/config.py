"""Centralized configuration.

All settings are read from environment variables (or a .env.chessmetrics
file). Every field has a default, so an empty environment is valid.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env.chessmetrics", env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # FEN input checks
    strict_fen: bool = True          # require all six FEN fields
    validate_positions: bool = True  # reject positions python-chess calls illegal

    # API
    api_version: str = "1.0.0"
    error_message_max_length: int = 100
