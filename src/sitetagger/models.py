"""Data models for sitetagger."""

from dataclasses import dataclass, field
from typing import Optional

from .exceptions import ConfigError
from .utils import first_candidate

DEFAULT_MAX_TAGS = 4
DEFAULT_MAX_RETRIES = 2
DEFAULT_REQUEST_DELAY = 1000  # ms
DEFAULT_MODEL = "qwen/qwen3-32b"


@dataclass
class SiteInput:
    """A bookmark to tag. At least one field must be set."""

    url: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.url or self.headline or self.description)


@dataclass(frozen=True)
class TaggerConfig:
    """Tagger options. ``None`` selects the default for a field."""

    max_tags: Optional[int] = None
    max_retries: Optional[int] = None
    request_delay: Optional[int] = None

    def __post_init__(self):
        # frozen dataclass: defaults have to go through object.__setattr__
        if self.max_tags is None:
            object.__setattr__(self, "max_tags", DEFAULT_MAX_TAGS)
        if self.max_retries is None:
            object.__setattr__(self, "max_retries", DEFAULT_MAX_RETRIES)
        if self.request_delay is None:
            object.__setattr__(self, "request_delay", DEFAULT_REQUEST_DELAY)

        if self.max_tags < 1:
            raise ConfigError("max_tags must be at least 1.")
        if self.max_retries < 0:
            raise ConfigError("max_retries cannot be negative.")
        if self.request_delay < 0:
            raise ConfigError("request_delay cannot be negative.")


@dataclass
class TagMetadata:
    processing_time: int  # ms
    retry_count: int


@dataclass
class TagResult:
    """Outcome of a single tagging call."""

    tags: list[str] = field(default_factory=list)
    success: bool = False
    error: Optional[str] = None
    metadata: Optional[TagMetadata] = None


@dataclass
class BatchResult:
    site: SiteInput
    result: TagResult


@dataclass
class WebDetailsResult:
    """Title/description candidates scraped from a page.

    Candidates are ordered by source priority and keep ``None`` for
    sources the page does not have.
    """

    url: str
    title: list[Optional[str]] = field(default_factory=list)
    description: list[Optional[str]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def best_title(self) -> Optional[str]:
        return first_candidate(self.title)

    @property
    def best_description(self) -> Optional[str]:
        return first_candidate(self.description)

