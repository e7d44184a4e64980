"""Tests for the OpenAI chat provider over a mocked HTTP transport."""

import json

import httpx
import pytest

from uimarkup.providers import (
    ChatMessage,
    ProviderAPIError,
    ProviderAuthError,
    ProviderConfigError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from uimarkup.providers.openai_provider import OpenAIProvider

MESSAGES = [
    ChatMessage(role="system", content="You fix markup."),
    ChatMessage(role="user", content="Fix <Text>"),
]

COMPLETION = {
    "model": "gpt-5-mini",
    "choices": [{"message": {"role": "assistant", "content": "<Text>ok</Text>"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17},
}


def _provider(handler, model="gpt-5-mini", **config):
    settings = {"api_key": "sk-test"}
    settings.update(config)
    return OpenAIProvider("repair", model, settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_returns_text_and_usage():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=COMPLETION)

    async with _provider(handler) as provider:
        response = await provider.generate(MESSAGES, max_tokens=500)

    assert response.output_text == "<Text>ok</Text>"
    assert response.finish_reason == "stop"
    assert response.usage == {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17}

    request = requests[0]
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["messages"] == [message.to_dict() for message in MESSAGES]


@pytest.mark.asyncio
async def test_fixed_temperature_model_payload():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=COMPLETION)

    async with _provider(handler, model="gpt-5-nano") as provider:
        await provider.generate(MESSAGES, max_tokens=500, temperature=0.2)

    assert bodies[0]["max_completion_tokens"] == 500
    assert "max_tokens" not in bodies[0]
    assert "temperature" not in bodies[0]


@pytest.mark.asyncio
async def test_custom_base_url_and_organization():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=COMPLETION)

    async with _provider(handler, base_url="http://localhost:8080/v1/", organization="org-1") as provider:
        await provider.generate(MESSAGES)

    assert str(requests[0].url) == "http://localhost:8080/v1/chat/completions"
    assert requests[0].headers["OpenAI-Organization"] == "org-1"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, error_cls",
    [(401, ProviderAuthError), (403, ProviderAuthError), (429, ProviderRateLimitError), (500, ProviderAPIError)],
)
async def test_http_errors_are_mapped(status, error_cls):
    def handler(request):
        return httpx.Response(status, text="nope")

    async with _provider(handler) as provider:
        with pytest.raises(error_cls) as excinfo:
            await provider.generate(MESSAGES)

    assert excinfo.value.status_code == status
    assert excinfo.value.provider == "openai"


@pytest.mark.asyncio
async def test_rate_limit_retry_after():
    def handler(request):
        return httpx.Response(429, headers={"retry-after": "7"}, text="slow down")

    async with _provider(handler) as provider:
        with pytest.raises(ProviderRateLimitError) as excinfo:
            await provider.generate(MESSAGES)

    assert excinfo.value.retry_after == 7


@pytest.mark.asyncio
async def test_server_errors_are_retryable():
    def handler(request):
        return httpx.Response(503)

    async with _provider(handler) as provider:
        with pytest.raises(ProviderAPIError) as excinfo:
            await provider.generate(MESSAGES)

    assert excinfo.value.retryable is True


@pytest.mark.asyncio
async def test_empty_choices():
    def handler(request):
        return httpx.Response(200, json={"choices": []})

    async with _provider(handler) as provider:
        with pytest.raises(ProviderAPIError, match="no choices"):
            await provider.generate(MESSAGES)


@pytest.mark.asyncio
async def test_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with _provider(handler, timeout=5) as provider:
        with pytest.raises(ProviderTimeoutError) as excinfo:
            await provider.generate(MESSAGES)

    assert excinfo.value.timeout_seconds == 5.0


@pytest.mark.asyncio
async def test_connection_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with _provider(handler) as provider:
        with pytest.raises(ProviderAPIError) as excinfo:
            await provider.generate(MESSAGES)

    assert excinfo.value.retryable is True


def test_missing_api_key():
    with pytest.raises(ProviderConfigError, match="UIMARKUP_PROVIDER_OPENAI_API_KEY"):
        OpenAIProvider("repair", "gpt-5-mini", {})
