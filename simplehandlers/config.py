"""
simplehandlers - Configuration
==============================

What:  Centralized configuration using Pydantic Settings.
How:   Pydantic Settings reads ``SIMPLEHANDLERS_*`` environment variables (or a
       ``.env`` file), validates them and exposes a singleton ``settings``.
Who:   Read by the middleware constructors when no explicit value is passed,
       and by ``setup_logging``.
When:  Loaded once at import time.

Every field has a default, so a host server needs no configuration at all.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Filter settings loaded from environment variables.

    Attributes are grouped by the filter that reads them.
    """

    # ── Logging ───────────────────────────────────────────────────────────
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

    # ── Extension filter ──────────────────────────────────────────────────
    # Name of the synthetic query parameter carrying the extracted extension.
    extension_param: str = Field(default=":extension", min_length=1)

    # Keep the "&" between the extension parameter and the original query
    # even when the original query is empty (legacy wire format).
    extension_keep_separator: bool = Field(default=True)

    model_config = {
        "env_prefix": "SIMPLEHANDLERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
