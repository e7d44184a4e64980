"""Anthropic messages-API provider.

Configuration (``UIMARKUP_PROVIDER_ANTHROPIC_*`` or explicit config):
    - api_key: Anthropic API key (or ANTHROPIC_API_KEY)
    - base_url: API base URL (default: https://api.anthropic.com)
    - version: API version header (default: 2023-06-01)
    - timeout: Request timeout in seconds (default: 60)
    - max_tokens: Maximum tokens to generate (default: 1024)
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx

from .base import ChatMessage, ChatProvider, ProviderResponse
from .config import require_config_value
from .errors import ProviderAPIError, ProviderTimeoutError, error_from_status
from .factory import register_provider_class


class AnthropicProvider(ChatProvider):
    """Anthropic provider over ``httpx.AsyncClient``."""

    provider_type = "anthropic"

    def __init__(
        self,
        name: str,
        model: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(name, model, config)
        self.api_key = require_config_value(self.config, "api_key", "anthropic")
        self.base_url = str(self.config.get("base_url", "https://api.anthropic.com")).rstrip("/")
        self.version = self.config.get("version", "2023-06-01")
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
        return {
            "x-api-key": self.api_key,
            "anthropic-version": self.version,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _convert_messages(messages: List[ChatMessage]) -> Tuple[Optional[str], List[Dict[str, str]]]:
        """Split system messages out; the messages API takes them separately."""
        system_parts: List[str] = []
        converted: List[Dict[str, str]] = []
        for message in messages:
            if message.role == "system":
                system_parts.append(message.content)
            else:
                converted.append({"role": message.role, "content": message.content})
        system_prompt = "\n\n".join(system_parts) if system_parts else None
        return system_prompt, converted

    def _build_request_payload(self, messages: List[ChatMessage], **kwargs: Any) -> Dict[str, Any]:
        system_prompt, converted = self._convert_messages(messages)
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": converted,
            "max_tokens": kwargs.get("max_tokens", self.max_tokens),
        }
        if kwargs.get("temperature") is not None:
            payload["temperature"] = kwargs["temperature"]
        if system_prompt:
            payload["system"] = system_prompt
        return payload

    async def generate(self, messages: List[ChatMessage], **kwargs: Any) -> ProviderResponse:
        client = self._get_http_client()
        payload = self._build_request_payload(messages, **kwargs)
        url = f"{self.base_url}/v1/messages"

        try:
            response = await client.post(url, json=payload, headers=self._build_headers())
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"Anthropic API request timed out after {self.timeout}s",
                timeout_seconds=self.timeout,
                provider="anthropic",
                model=self.model,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderAPIError(
                f"Anthropic API request failed: {exc}",
                retryable=True,
                provider="anthropic",
                model=self.model,
            ) from exc

        if response.status_code >= 400:
            raise error_from_status(
                response.status_code,
                provider="anthropic",
                model=self.model,
                detail=response.text[:200],
                retry_after=response.headers.get("retry-after"),
            )

        data = response.json()
        blocks = data.get("content") or []
        if not blocks:
            raise ProviderAPIError(
                f"Anthropic API returned no content for provider '{self.name}'",
                provider="anthropic",
                model=self.model,
            )
        output_text = "".join(block.get("text", "") for block in blocks if block.get("type") == "text")

        usage = None
        if "usage" in data:
            input_tokens = data["usage"].get("input_tokens", 0)
            output_tokens = data["usage"].get("output_tokens", 0)
            usage = {
                "prompt_tokens": input_tokens,
                "completion_tokens": output_tokens,
                "total_tokens": input_tokens + output_tokens,
            }

        return ProviderResponse(
            model=data.get("model", self.model),
            output_text=output_text,
            raw=data,
            usage=usage,
            finish_reason=data.get("stop_reason"),
        )

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


register_provider_class("anthropic", AnthropicProvider)


__all__ = ["AnthropicProvider"]
