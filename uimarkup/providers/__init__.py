"""Chat-completion providers used by the markup repair loop."""

from .base import ChatMessage, ChatProvider, ProviderError, ProviderResponse
from .config import load_provider_config, merge_configs
from .errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderConfigError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from .factory import (
    available_providers,
    create_default_provider,
    create_provider,
    get_provider_class,
    register_provider_class,
)
from .models import KNOWN_MODELS, ModelInfo, get_model_info, supports_custom_temperature

__all__ = [
    "ChatMessage",
    "ChatProvider",
    "ProviderError",
    "ProviderResponse",
    "ProviderAPIError",
    "ProviderAuthError",
    "ProviderConfigError",
    "ProviderRateLimitError",
    "ProviderTimeoutError",
    "available_providers",
    "create_default_provider",
    "create_provider",
    "get_provider_class",
    "register_provider_class",
    "load_provider_config",
    "merge_configs",
    "KNOWN_MODELS",
    "ModelInfo",
    "get_model_info",
    "supports_custom_temperature",
]
