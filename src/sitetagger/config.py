"""Configuration loading and validation."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .models import (
    DEFAULT_MODEL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_TAGS,
    DEFAULT_REQUEST_DELAY,
    TaggerConfig,
)


@dataclass
class Config:
    """Application configuration."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    max_tags: int = DEFAULT_MAX_TAGS
    max_retries: int = DEFAULT_MAX_RETRIES
    request_delay: int = DEFAULT_REQUEST_DELAY
    verbose: bool = False

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.model:
            raise ConfigError("SITETAGGER_MODEL cannot be empty.")
        if self.max_tags < 1:
            raise ConfigError("max_tags must be at least 1.")
        if self.max_retries < 0:
            raise ConfigError("max_retries cannot be negative.")
        if self.request_delay < 0:
            raise ConfigError("request_delay cannot be negative.")

    def tagger_config(self) -> TaggerConfig:
        return TaggerConfig(
            max_tags=self.max_tags,
            max_retries=self.max_retries,
            request_delay=self.request_delay,
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from None


def load_config(
    max_tags: Optional[int] = None,
    max_retries: Optional[int] = None,
    request_delay: Optional[int] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    config = Config(
        api_key=os.getenv("SITETAGGER_API_KEY", ""),
        model=os.getenv("SITETAGGER_MODEL", DEFAULT_MODEL),
        max_tags=max_tags if max_tags is not None else _env_int(
            "SITETAGGER_MAX_TAGS", DEFAULT_MAX_TAGS
        ),
        max_retries=max_retries if max_retries is not None else _env_int(
            "SITETAGGER_MAX_RETRIES", DEFAULT_MAX_RETRIES
        ),
        request_delay=request_delay if request_delay is not None else _env_int(
            "SITETAGGER_REQUEST_DELAY", DEFAULT_REQUEST_DELAY
        ),
        verbose=verbose,
    )

    config.validate()
    return config
