"""
Pokemon API — Application Configuration
========================================

What:  Centralized configuration using Pydantic Settings.
How:   Values come from environment variables (or a `.env` file) and fall
       back to defaults that reproduce the classic fixed setup: port 3000,
       collection at `data/pokemons.json`, static files from the working
       directory, CORS open to every origin.
Who:   Built by `create_app()` and handed to the storage layer and server.

Design Decision:
    Settings are NOT a module-level singleton here. `create_app()` builds a
    `Settings()` when none is passed in, which lets tests point each app
    instance at its own temporary collection file.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default, so the service starts with no environment at all.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: JSON file holding the whole collection as one array
    # Relative paths resolve against the process working directory
    data_file: str = Field(
        default="data/pokemons.json",
        description="Path of the JSON file holding the Pokemon collection",
    )

    # What: Directory exposed as static files (mounted below the API routes)
    static_root: str = Field(default=".")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into the list CORSMiddleware expects."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATA_FILE and data_file both work
        "extra": "ignore",
    }
