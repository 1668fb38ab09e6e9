"""Shared test fixtures."""

from unittest.mock import patch

import pytest

from sitetagger.llm.base import CompletionProvider


class FakeProvider(CompletionProvider):
    """Replays scripted responses; exceptions in the script are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def no_sleep():
    """Patch time.sleep and expose the mock to assert on delays."""
    with patch("time.sleep") as mock_sleep:
        yield mock_sleep
