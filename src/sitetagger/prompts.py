"""Prompt construction for the tagging call."""

from .models import SiteInput
from .utils import extract_hostname


def build_tagging_prompt(site: SiteInput, max_tags: int) -> str:
    """Render the instruction prompt asking for ``max_tags`` broad tags.

    Only the site fields that are present are included, in the order
    domain, title, description, URL. A URL that cannot be parsed just
    drops the domain line.
    """
    domain = extract_hostname(site.url) if site.url else ""

    parts = [
        "You are an expert at creating broad, general bookmark tags for "
        "organizing web content into major categories.",
        "",
        f"Generate exactly {max_tags} GENERAL category tags for this bookmark. "
        "Think broad topics that would be useful for filtering large bookmark "
        "collections.",
        "",
        "Focus on HIGH-LEVEL categories like:",
        "- Subject areas: javascript, python, politics, science, business, design",
        "- Content types: tutorial, documentation, news, tool, reference",
        "- Industries: finance, healthcare, education, entertainment",
        "",
    ]

    if domain:
        parts.append(f"Domain: {domain}")
    if site.headline:
        parts.append(f"Title: {site.headline}")
    if site.description:
        parts.append(f"Description: {site.description}")
    if site.url:
        parts.append(f"URL: {site.url}")

    parts.extend([
        "",
        "CRITICAL RULES:",
        "- Return ONLY a comma-separated list of tags",
        "- Use single words when possible (javascript, politics, tutorial)",
        "- Think BROAD categories, not specific details",
        "- Avoid technical jargon - use common terms",
        '- NO meta tags like "think-okay" or processing artifacts',
        "- Make tags useful for filtering hundreds of bookmarks",
        "",
        "Tags:",
    ])

    return "\n".join(parts)
