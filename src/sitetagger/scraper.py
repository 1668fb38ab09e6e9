"""Page metadata scraping for bookmark enrichment."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout

import httpx
from bs4 import BeautifulSoup

from .models import WebDetailsResult
from .utils import normalize_url

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 1.2  # seconds
FETCH_ERROR = "Failed to fetch URL"
FALLBACK_TITLE = "New Destination"

USER_AGENT = "sitetagger/0.1 (bookmark metadata fetcher)"

# Candidate sources in priority order.
_TITLE_SOURCES = [
    ("title", None),
    ('meta[property="og:title"]', "content"),
    ('meta[name="twitter:title"]', "content"),
]
_DESCRIPTION_SOURCES = [
    ('meta[name="description"]', "content"),
    ('meta[property="og:description"]', "content"),
    ('meta[name="twitter:description"]', "content"),
]


def _read_body(url: str, deadline: float) -> str:
    with httpx.stream(
        "GET",
        url,
        timeout=max(deadline - time.monotonic(), 0.01),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    ) as response:
        chunks = []
        for chunk in response.iter_bytes():
            if time.monotonic() > deadline:
                raise httpx.ReadTimeout(
                    f"Page body not received before deadline: {url}",
                    request=response.request,
                )
            chunks.append(chunk)
        return b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")


def fetch_html(url: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Fetch a page body as text within ``timeout`` seconds overall.

    httpx timeouts apply per network operation, so a slowly trickling body
    could outlive them. The read runs on a worker thread that stops at the
    deadline, and the caller stops waiting for it at the same moment.

    Raises httpx.HTTPError (httpx.ReadTimeout past the deadline) on failure.
    """
    deadline = time.monotonic() + timeout
    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(_read_body, url, deadline)
    try:
        return future.result(timeout=timeout)
    except FutureTimeout:
        raise httpx.ReadTimeout(
            f"Page not fetched within {timeout}s: {url}"
        ) from None
    finally:
        executor.shutdown(wait=False)


def _extract(soup: BeautifulSoup, sources) -> list:
    values = []
    for selector, attribute in sources:
        element = soup.select_one(selector)
        if element is None:
            values.append(None)
        elif attribute is None:
            values.append(element.get_text())
        else:
            values.append(element.get(attribute))
    return values


def parse_web_details(url: str, html: str) -> WebDetailsResult:
    """Extract title and description candidates from an HTML document."""
    soup = BeautifulSoup(html, "html.parser")
    return WebDetailsResult(
        url=url,
        title=_extract(soup, _TITLE_SOURCES),
        description=_extract(soup, _DESCRIPTION_SOURCES),
    )


def get_web_details(url: str) -> WebDetailsResult:
    """Fetch a page and collect its title/description candidates.

    A failed fetch does not raise; it returns a placeholder title, an
    empty description and ``error`` set.
    """
    url = normalize_url(url)

    try:
        html = fetch_html(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Failed to fetch %s: %s", url, e)
        return WebDetailsResult(
            url=url,
            title=[FALLBACK_TITLE],
            description=[""],
            error=FETCH_ERROR,
        )

    return parse_web_details(url, html)
