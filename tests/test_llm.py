"""Tests for the Hack Club completion provider."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from sitetagger.config import Config
from sitetagger.exceptions import ResponseError, TransportError
from sitetagger.llm import get_llm_provider
from sitetagger.llm.openai import HackClubProvider

REQUEST = httpx.Request("POST", "https://ai.hackclub.com/chat/completions")


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def provider():
    p = HackClubProvider()
    p._client = MagicMock()
    return p


def test_client_points_at_hackclub():
    p = HackClubProvider()
    assert str(p._client.base_url).rstrip("/") == "https://ai.hackclub.com"
    assert p._client.max_retries == 0


def test_request_body(provider):
    provider._client.chat.completions.create.return_value = _completion("a, b")

    assert provider.complete("prompt text") == "a, b"

    provider._client.chat.completions.create.assert_called_once_with(
        model="qwen/qwen3-32b",
        temperature=0.3,
        max_completion_tokens=60,
        reasoning_effort="none",
        messages=[{"role": "user", "content": "prompt text"}],
    )


@pytest.mark.parametrize("completion", [_completion(None), _completion(""),
                                        SimpleNamespace(choices=[])])
def test_missing_content(provider, completion):
    provider._client.chat.completions.create.return_value = completion

    with pytest.raises(ResponseError, match="No content received from API"):
        provider.complete("p")


def test_error_status(provider):
    provider._client.chat.completions.create.side_effect = openai.InternalServerError(
        "Internal Server Error",
        response=httpx.Response(500, request=REQUEST),
        body=None,
    )

    with pytest.raises(ResponseError, match="API request failed: 500"):
        provider.complete("p")


def test_connection_error(provider):
    provider._client.chat.completions.create.side_effect = openai.APIConnectionError(
        request=REQUEST
    )

    with pytest.raises(TransportError):
        provider.complete("p")


def test_factory_uses_config():
    llm = get_llm_provider(Config(api_key="key-123", model="other/model"))
    assert isinstance(llm, HackClubProvider)
    assert llm._model == "other/model"
    assert llm._client.api_key == "key-123"
