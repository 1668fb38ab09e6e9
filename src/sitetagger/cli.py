"""CLI entry point for sitetagger."""

import logging
import sys
from pathlib import Path

import click

from .config import load_config
from .exceptions import ConfigError
from .llm import get_llm_provider
from .models import SiteInput, TagResult
from .scraper import get_web_details
from .tagger import SiteTagger


def _build_tagger(ctx: click.Context, max_tags=None) -> SiteTagger:
    try:
        config = load_config(
            max_tags=max_tags,
            verbose=ctx.obj["verbose"],
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if config.verbose:
        click.echo(f"Model: {config.model} (max tags: {config.max_tags})")

    return SiteTagger(config.tagger_config(), llm=get_llm_provider(config))


def _echo_result(result: TagResult) -> None:
    if result.success:
        click.echo(", ".join(result.tags))
    else:
        click.echo(f"Tagging failed: {result.error}", err=True)


def _site_options(func):
    func = click.option("--description", default=None, help="Page description")(func)
    func = click.option("--headline", default=None, help="Page title")(func)
    func = click.option("--url", default=None, help="Page URL")(func)
    return func


@click.group()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.pass_context
def main(ctx, verbose):
    """Generate topical tags for bookmarked web pages.

    Example: sitetagger enrich https://docs.python.org/3/tutorial/
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@main.command()
@click.argument("url")
def details(url):
    """Print the title/description candidates scraped from URL."""
    result = get_web_details(url)
    click.echo(f"URL: {result.url}")
    for i, title in enumerate(result.title, 1):
        click.echo(f"  title[{i}]: {title if title is not None else '-'}")
    for i, description in enumerate(result.description, 1):
        click.echo(
            f"  description[{i}]: {description if description is not None else '-'}"
        )
    if result.error:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)


@main.command()
@_site_options
@click.option("--max-tags", type=int, default=None, help="Number of tags (default: 4)")
@click.pass_context
def tag(ctx, url, headline, description, max_tags):
    """Generate tags for a bookmark."""
    tagger = _build_tagger(ctx, max_tags=max_tags)
    result = tagger.generate_tags(
        SiteInput(url=url, headline=headline, description=description)
    )
    _echo_result(result)
    if ctx.obj["verbose"] and result.metadata:
        click.echo(
            f"  ({result.metadata.processing_time} ms, "
            f"{result.metadata.retry_count} retries)"
        )
    sys.exit(0 if result.success else 1)


@main.command()
@_site_options
@click.option("--count", type=int, default=8, help="Number of suggestions (default: 8)")
@click.pass_context
def suggest(ctx, url, headline, description, count):
    """Print tag suggestions for a bookmark, one per line."""
    tagger = _build_tagger(ctx)
    tags = tagger.get_tag_suggestions(
        SiteInput(url=url, headline=headline, description=description),
        count=count,
    )
    if not tags:
        click.echo("No suggestions.", err=True)
        sys.exit(1)
    for suggestion in tags:
        click.echo(suggestion)


@main.command()
@click.argument("url")
@click.pass_context
def enrich(ctx, url):
    """Scrape URL's metadata, then tag the enriched bookmark."""
    page = get_web_details(url)
    if page.error:
        click.echo(f"  Scraping failed: {page.error}", err=True)
    site = SiteInput(
        url=page.url,
        headline=None if page.error else page.best_title,
        description=None if page.error else page.best_description,
    )
    if ctx.obj["verbose"]:
        click.echo(f"  Title: {site.headline}")
        click.echo(f"  Description: {site.description}")

    result = _build_tagger(ctx).generate_tags(site)
    _echo_result(result)
    sys.exit(0 if result.success else 1)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def batch(ctx, file):
    """Tag every URL listed in FILE (one per line)."""
    urls = [
        line.strip()
        for line in file.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]
    if not urls:
        click.echo("No URLs found.", err=True)
        sys.exit(2)

    tagger = _build_tagger(ctx)
    results = tagger.generate_tags_batch([SiteInput(url=u) for u in urls])

    failures = 0
    for item in results:
        if item.result.success:
            click.echo(f"{item.site.url}: {', '.join(item.result.tags)}")
        else:
            failures += 1
            click.echo(f"{item.site.url}: FAILED ({item.result.error})", err=True)

    if failures == len(results):
        sys.exit(2)
    elif failures:
        sys.exit(1)
