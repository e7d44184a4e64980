"""Tests for the Anthropic chat provider over a mocked HTTP transport."""

import json

import httpx
import pytest

from uimarkup.providers import ChatMessage, ProviderAPIError, ProviderAuthError
from uimarkup.providers.anthropic_provider import AnthropicProvider

MESSAGES = [
    ChatMessage(role="system", content="You fix markup."),
    ChatMessage(role="user", content="Fix <Text>"),
]

REPLY = {
    "model": "claude-haiku-4-5",
    "content": [{"type": "text", "text": "<Text>"}, {"type": "text", "text": "ok</Text>"}],
    "stop_reason": "end_turn",
    "usage": {"input_tokens": 20, "output_tokens": 6},
}


def _provider(handler, **config):
    settings = {"api_key": "ak-test"}
    settings.update(config)
    return AnthropicProvider("repair", "claude-haiku-4-5", settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_splits_system_prompt():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=REPLY)

    async with _provider(handler) as provider:
        response = await provider.generate(MESSAGES, max_tokens=500, temperature=0.2)

    request = requests[0]
    assert str(request.url) == "https://api.anthropic.com/v1/messages"
    assert request.headers["x-api-key"] == "ak-test"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body == {
        "model": "claude-haiku-4-5",
        "messages": [{"role": "user", "content": "Fix <Text>"}],
        "max_tokens": 500,
        "temperature": 0.2,
        "system": "You fix markup.",
    }

    assert response.output_text == "<Text>ok</Text>"
    assert response.finish_reason == "end_turn"
    assert response.usage == {"prompt_tokens": 20, "completion_tokens": 6, "total_tokens": 26}


@pytest.mark.asyncio
async def test_default_max_tokens_from_config():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=REPLY)

    async with _provider(handler, max_tokens="256") as provider:
        await provider.generate([ChatMessage(role="user", content="hi")])

    assert bodies[0]["max_tokens"] == 256
    assert "system" not in bodies[0]
    assert "temperature" not in bodies[0]


@pytest.mark.asyncio
async def test_auth_failure():
    def handler(request):
        return httpx.Response(403, text="forbidden")

    async with _provider(handler) as provider:
        with pytest.raises(ProviderAuthError):
            await provider.generate(MESSAGES)


@pytest.mark.asyncio
async def test_empty_content():
    def handler(request):
        return httpx.Response(200, json={"content": []})

    async with _provider(handler) as provider:
        with pytest.raises(ProviderAPIError, match="no content"):
            await provider.generate(MESSAGES)
