"""Completion provider factory."""

from ..config import Config
from .base import CompletionProvider
from .openai import HackClubProvider


def get_llm_provider(config: Config) -> CompletionProvider:
    """Create and return the configured completion provider."""
    return HackClubProvider(api_key=config.api_key, model=config.model)
