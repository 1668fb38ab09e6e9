"""Hack Club AI provider (OpenAI-compatible chat completions)."""

import logging

import openai

from ..exceptions import ResponseError, TransportError
from ..models import DEFAULT_MODEL
from .base import CompletionProvider

logger = logging.getLogger(__name__)

API_BASE_URL = "https://ai.hackclub.com"
TEMPERATURE = 0.3
MAX_COMPLETION_TOKENS = 60

# The endpoint does not check keys, but the SDK refuses an empty one.
_PLACEHOLDER_API_KEY = "sitetagger"


class HackClubProvider(CompletionProvider):
    def __init__(self, api_key: str = "", model: str = DEFAULT_MODEL):
        # SDK retries are off: SiteTagger owns the retry policy.
        self._client = openai.OpenAI(
            api_key=api_key or _PLACEHOLDER_API_KEY,
            base_url=API_BASE_URL,
            max_retries=0,
        )
        self._model = model

    def complete(self, prompt: str) -> str:
        logger.debug("Requesting completion from %s (%s)", API_BASE_URL, self._model)
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=TEMPERATURE,
                max_completion_tokens=MAX_COMPLETION_TOKENS,
                reasoning_effort="none",
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.APIStatusError as e:
            raise ResponseError(
                f"API request failed: {e.status_code} {e.message}"
            ) from e
        except openai.APIConnectionError as e:
            raise TransportError(f"API request failed: {e}") from e

        content = None
        if response.choices:
            content = response.choices[0].message.content
        if not content:
            raise ResponseError("No content received from API")
        return content
