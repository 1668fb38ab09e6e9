"""Tests for the sitetagger CLI."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from sitetagger.cli import main
from sitetagger.models import WebDetailsResult


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def provider(fake_provider, no_sleep):
    fake = fake_provider()
    with patch("sitetagger.cli.get_llm_provider", return_value=fake), \
            patch("sitetagger.config.load_dotenv"):
        yield fake


def test_tag(runner, provider):
    provider.responses = ["javascript, tutorial, Tutorial!, javascript"]

    result = runner.invoke(main, ["tag", "--headline", "Intro to JS"])

    assert result.exit_code == 0
    assert result.output.strip() == "javascript, tutorial"


def test_tag_without_fields_fails(runner, provider):
    result = runner.invoke(main, ["tag"])

    assert result.exit_code == 1
    assert "At least one of url, headline, or description" in result.output


def test_suggest(runner, provider):
    provider.responses = ["a, b, c"]

    result = runner.invoke(main, ["suggest", "--headline", "x", "--count", "2"])

    assert result.exit_code == 0
    assert result.output.split() == ["a", "b"]
    assert "exactly 2 GENERAL" in provider.prompts[0]


def test_details_failure(runner):
    fallback = WebDetailsResult(
        url="https://example.com",
        title=["New Destination"],
        description=[""],
        error="Failed to fetch URL",
    )
    with patch("sitetagger.cli.get_web_details", return_value=fallback):
        result = runner.invoke(main, ["details", "example.com"])

    assert result.exit_code == 1
    assert "URL: https://example.com" in result.output
    assert "title[1]: New Destination" in result.output


def test_enrich_uses_first_candidates(runner, provider):
    page = WebDetailsResult(
        url="https://example.com",
        title=[None, "OG Title", "Twitter Title"],
        description=["", "OG description", None],
    )
    provider.responses = ["news"]
    with patch("sitetagger.cli.get_web_details", return_value=page):
        result = runner.invoke(main, ["enrich", "example.com"])

    assert result.exit_code == 0
    assert result.output.strip() == "news"
    assert "Title: OG Title" in provider.prompts[0]
    assert "Description: OG description" in provider.prompts[0]


def test_batch(runner, provider, tmp_path):
    urls = tmp_path / "urls.txt"
    urls.write_text("# reading list\nhttps://a.com\n\nhttps://b.com\n", encoding="utf-8")
    provider.responses = ["one", "two"]

    result = runner.invoke(main, ["batch", str(urls)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["https://a.com: one", "https://b.com: two"]
