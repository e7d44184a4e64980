"""Provider factory.

Provider modules register their class on import; :func:`create_provider`
instantiates one by type name with configuration merged from the
environment and explicit overrides.

Example:
    >>> provider = create_provider("openai", model="gpt-5-mini", config={"api_key": "sk-..."})
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from .base import ChatProvider, ProviderError
from .config import default_provider_selection, load_provider_config, merge_configs

_PROVIDER_CLASSES: Dict[str, Type[ChatProvider]] = {}


def register_provider_class(name: str, provider_class: Type[ChatProvider]) -> None:
    """Register a provider implementation class under ``name``."""
    _PROVIDER_CLASSES[name.lower()] = provider_class


def _load_provider_modules() -> None:
    from . import anthropic_provider, openai_provider  # noqa: F401


def available_providers() -> List[str]:
    _load_provider_modules()
    return sorted(_PROVIDER_CLASSES)


def get_provider_class(provider_type: str) -> Type[ChatProvider]:
    """
    Get a provider class by type name.

    Raises:
        ProviderError: If the provider type is not registered
    """
    _load_provider_modules()
    provider_key = provider_type.lower()
    if provider_key not in _PROVIDER_CLASSES:
        available = ", ".join(sorted(_PROVIDER_CLASSES)) or "none"
        raise ProviderError(
            f"Unknown provider type '{provider_type}'. Available providers: {available}",
            provider=provider_type,
        )
    return _PROVIDER_CLASSES[provider_key]


def create_provider(
    provider_type: str,
    *,
    model: str,
    name: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    **provider_kwargs: Any,
) -> ChatProvider:
    """Instantiate a provider; explicit ``config`` overrides environment values."""
    provider_class = get_provider_class(provider_type)
    merged = merge_configs(load_provider_config(provider_type, environ), config)
    return provider_class(name or f"{provider_type}_repair", model, merged, **provider_kwargs)


def create_default_provider(environ: Optional[Mapping[str, str]] = None, **provider_kwargs: Any) -> ChatProvider:
    """Create the provider chosen by ``UIMARKUP_PROVIDER`` and ``UIMARKUP_MODEL``."""
    selection = default_provider_selection(environ)
    return create_provider(
        selection["provider_type"],
        model=selection["model"],
        environ=environ,
        **provider_kwargs,
    )


__all__ = [
    "register_provider_class",
    "available_providers",
    "get_provider_class",
    "create_provider",
    "create_default_provider",
]
