"""Chat provider interface and response types.

The repair loop only needs one capability from a language model: take an
ordered list of chat messages and return the reply text. Concrete providers
subclass :class:`ChatProvider` and implement :meth:`ChatProvider.generate`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ChatMessage:
    """A single message in a chat conversation."""

    role: str  # "system", "user", "assistant"
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class ProviderResponse:
    """Normalized response from any provider."""

    model: str
    """The model that generated the response."""

    output_text: str
    """Primary text output from the model."""

    raw: Any = None
    """Raw provider response object."""

    usage: Optional[Dict[str, Any]] = None
    """Token usage reported by the provider, when available."""

    finish_reason: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)


class ProviderError(Exception):
    """Base exception for provider-related errors."""

    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.model = model
        self.status_code = status_code


class ChatProvider(ABC):
    """Unified async interface for chat-completion backends."""

    provider_type: str = "base"

    def __init__(
        self,
        name: str,
        model: str,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            name: Logical provider instance name (e.g., "repair")
            model: Model identifier (e.g., "gpt-5-mini")
            config: Provider-specific configuration (api_key, base_url,
                timeout, temperature, max_tokens)
        """
        self.name = name
        self.model = model
        self.config = config or {}

    @abstractmethod
    async def generate(
        self,
        messages: List[ChatMessage],
        **kwargs: Any,
    ) -> ProviderResponse:
        """
        Single request/response chat-style generation.

        Args:
            messages: Ordered chat messages (system, user, assistant)
            **kwargs: ``max_tokens`` and ``temperature`` override the
                instance configuration for this call only.

        Raises:
            ProviderError: If generation fails
        """

    async def aclose(self) -> None:
        """Release network resources held by the provider."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', model='{self.model}')"


__all__ = ["ChatMessage", "ProviderResponse", "ProviderError", "ChatProvider"]
