"""OpenAI chat-completions provider.

Configuration (``UIMARKUP_PROVIDER_OPENAI_*`` or explicit config):
    - api_key: OpenAI API key (or OPENAI_API_KEY)
    - base_url: API base URL (default: https://api.openai.com/v1)
    - organization: Optional organization ID
    - timeout: Request timeout in seconds (default: 60)
    - max_tokens: Maximum tokens to generate (default: 1024)

Reasoning models such as ``gpt-5-mini`` take ``max_completion_tokens`` and
reject a custom temperature; the payload builder follows the model catalogue.
"""

from typing import Any, Dict, List, Optional

import httpx

from .base import ChatMessage, ChatProvider, ProviderResponse
from .config import require_config_value
from .errors import ProviderAPIError, ProviderTimeoutError, error_from_status
from .factory import register_provider_class
from .models import supports_custom_temperature


class OpenAIProvider(ChatProvider):
    """OpenAI provider over ``httpx.AsyncClient``."""

    provider_type = "openai"

    def __init__(
        self,
        name: str,
        model: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(name, model, config)
        self.api_key = require_config_value(self.config, "api_key", "openai")
        self.base_url = str(self.config.get("base_url", "https://api.openai.com/v1")).rstrip("/")
        self.organization = self.config.get("organization")
        self.timeout = float(self.config.get("timeout", 60))
        self.max_tokens = int(self.config.get("max_tokens", 1024))
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                transport=self._transport,
            )
        return self._http_client

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers

    def _build_request_payload(self, messages: List[ChatMessage], **kwargs: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in messages],
        }
        max_tokens = kwargs.get("max_tokens", self.max_tokens)
        if supports_custom_temperature(self.model):
            payload["max_tokens"] = max_tokens
            if kwargs.get("temperature") is not None:
                payload["temperature"] = kwargs["temperature"]
        else:
            payload["max_completion_tokens"] = max_tokens
        return payload

    async def generate(self, messages: List[ChatMessage], **kwargs: Any) -> ProviderResponse:
        client = self._get_http_client()
        payload = self._build_request_payload(messages, **kwargs)
        url = f"{self.base_url}/chat/completions"

        try:
            response = await client.post(url, json=payload, headers=self._build_headers())
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"OpenAI API request timed out after {self.timeout}s",
                timeout_seconds=self.timeout,
                provider="openai",
                model=self.model,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderAPIError(
                f"OpenAI API request failed: {exc}",
                retryable=True,
                provider="openai",
                model=self.model,
            ) from exc

        if response.status_code >= 400:
            raise error_from_status(
                response.status_code,
                provider="openai",
                model=self.model,
                detail=response.text[:200],
                retry_after=response.headers.get("retry-after"),
            )

        data = response.json()
        choices = data.get("choices") or []
        if not choices:
            raise ProviderAPIError(
                f"OpenAI API returned no choices for provider '{self.name}'",
                provider="openai",
                model=self.model,
            )
        choice = choices[0]
        content = (choice.get("message") or {}).get("content") or ""
        return ProviderResponse(
            model=data.get("model", self.model),
            output_text=content,
            raw=data,
            usage=data.get("usage"),
            finish_reason=choice.get("finish_reason"),
        )

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


register_provider_class("openai", OpenAIProvider)


__all__ = ["OpenAIProvider"]
