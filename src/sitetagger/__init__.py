"""Topical tag generation for bookmarked web pages."""

from .exceptions import (
    ConfigError,
    InputError,
    ResponseError,
    SiteTaggerError,
    TransportError,
)
from .models import (
    BatchResult,
    SiteInput,
    TaggerConfig,
    TagMetadata,
    TagResult,
    WebDetailsResult,
)
from .scraper import get_web_details
from .tagger import SiteTagger, normalize_tag, parse_tags

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "ConfigError",
    "InputError",
    "ResponseError",
    "SiteInput",
    "SiteTagger",
    "SiteTaggerError",
    "TagMetadata",
    "TagResult",
    "TaggerConfig",
    "TransportError",
    "WebDetailsResult",
    "get_web_details",
    "normalize_tag",
    "parse_tags",
]
