"""Bookmark tag generation via a hosted language model."""

import logging
import re
import time
from dataclasses import replace
from typing import Optional

from .exceptions import InputError
from .llm.base import CompletionProvider
from .llm.openai import HackClubProvider
from .models import BatchResult, SiteInput, TaggerConfig, TagMetadata, TagResult
from .prompts import build_tagging_prompt
from .utils import retry_with_backoff

logger = logging.getLogger(__name__)

MAX_TAG_LENGTH = 30
BACKOFF_BASE_DELAY = 1.0  # seconds

_EDGE_QUOTES = re.compile(r"^[\"']|[\"']$")
_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"--+")
_EDGE_HYPHENS = re.compile(r"^-|-$")


def normalize_tag(tag: str) -> str:
    """Normalize a raw tag to lower-case ``[a-z0-9_-]`` words joined by hyphens."""
    tag = tag.strip().lower()
    tag = _EDGE_QUOTES.sub("", tag)
    tag = _DISALLOWED.sub("", tag)
    tag = _WHITESPACE.sub("-", tag)
    tag = _HYPHEN_RUNS.sub("-", tag)
    return _EDGE_HYPHENS.sub("", tag)


def parse_tags(content: str, max_tags: int) -> list[str]:
    """Turn a comma-separated completion into a list of normalized tags.

    Tags are capped to ``max_tags`` before de-duplication, so a response
    with repeats can yield fewer than ``max_tags`` tags.
    """
    raw = [part.strip() for part in content.split(",")]
    normalized = [normalize_tag(part) for part in raw if part]
    kept = [tag for tag in normalized if 0 < len(tag) <= MAX_TAG_LENGTH]
    return list(dict.fromkeys(kept[:max_tags]))


class SiteTagger:
    """Generates tags for sites, one remote completion per site.

    Failures never escape as exceptions; they come back as a
    ``TagResult`` with ``success=False`` and an error message.
    """

    def __init__(
        self,
        config: Optional[TaggerConfig] = None,
        llm: Optional[CompletionProvider] = None,
    ):
        self.config = config or TaggerConfig()
        self._llm = llm or HackClubProvider()

    def generate_tags(self, site: SiteInput) -> TagResult:
        start = time.monotonic()
        retry_count = 0

        def count_retry(attempt: int, error: Exception) -> None:
            nonlocal retry_count
            retry_count += 1
            logger.warning(
                "Tagging attempt %d/%d failed: %s",
                attempt + 1, self.config.max_retries + 1, error,
            )

        try:
            if site.is_empty:
                raise InputError(
                    "At least one of url, headline, or description must be provided"
                )

            prompt = build_tagging_prompt(site, self.config.max_tags)
            logger.debug("Tagging prompt:\n%s", prompt)

            content = retry_with_backoff(
                lambda: self._llm.complete(prompt),
                max_retries=self.config.max_retries,
                base_delay=BACKOFF_BASE_DELAY,
                on_retry=count_retry,
            )
            tags = parse_tags(content, self.config.max_tags)
        except Exception as e:
            logger.warning("Tagging failed for %s: %s", _describe(site), e)
            return TagResult(
                tags=[],
                success=False,
                error=str(e) or "Unknown error",
                metadata=TagMetadata(_elapsed_ms(start), retry_count),
            )

        return TagResult(
            tags=tags,
            success=True,
            metadata=TagMetadata(_elapsed_ms(start), retry_count),
        )

    def generate_tags_batch(self, sites: list[SiteInput]) -> list[BatchResult]:
        """Tag each site in order, pausing ``request_delay`` ms between sites."""
        results = []
        for i, site in enumerate(sites):
            results.append(BatchResult(site=site, result=self.generate_tags(site)))
            if i < len(sites) - 1:
                time.sleep(self.config.request_delay / 1000)
        return results

    def get_tag_suggestions(self, site: SiteInput, count: int = 8) -> list[str]:
        """Return up to ``count`` tags for a site, or [] on failure.

        A ``count`` of 0 falls back to the default tag count.
        """
        if count < 0:
            return []
        config = replace(self.config, max_tags=count or None)
        tagger = SiteTagger(config, llm=self._llm)
        return tagger.generate_tags(site).tags


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _describe(site: SiteInput) -> str:
    return site.url or site.headline or site.description or "<empty site>"
