"""Utility functions for sitetagger."""

import time
from typing import Callable, Optional, TypeVar
from urllib.parse import urlparse

T = TypeVar("T")


def normalize_url(url: str) -> str:
    """Prefix ``https://`` when the URL carries no http(s) scheme."""
    return url if url.startswith("http") else "https://" + url


def extract_hostname(url: str) -> str:
    """Return the URL's hostname, or "" when the URL cannot be parsed."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return ""
    if not parsed.scheme or not hostname:
        return ""
    return hostname


def first_candidate(candidates: list[Optional[str]]) -> Optional[str]:
    """Pick the first non-blank candidate, stripped."""
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def retry_with_backoff(
    func: Callable[[], T],
    max_retries: int,
    base_delay: float = 1.0,
    on_retry: Optional[Callable[[int, Exception], None]] = None,
) -> T:
    """Call func, retrying up to max_retries times with exponential backoff.

    After failed attempt ``n`` (0-based) the delay is ``base_delay * 2**n``
    seconds. The last attempt's error is re-raised. ``on_retry`` is called
    with the attempt index and error before each retry sleep.
    """
    for attempt in range(max_retries + 1):
        try:
            return func()
        except Exception as e:
            if attempt == max_retries:
                raise
            if on_retry is not None:
                on_retry(attempt, e)
            time.sleep(base_delay * (2 ** attempt))
