"""Provider configuration management.

Configuration comes from ``UIMARKUP_PROVIDER_<TYPE>_<KEY>`` environment
variables, overridden by explicit config dictionaries.
"""

import os
from typing import Any, Dict, Mapping, Optional

from .errors import ProviderConfigError

ENV_PREFIX = "UIMARKUP_PROVIDER_"

DEFAULT_PROVIDER = "openai"
DEFAULT_MODEL = "gpt-5-mini"

# Conventional vendor variables consulted when no prefixed key is set.
_VENDOR_API_KEYS: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def load_provider_config(provider_type: str, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load configuration for ``provider_type`` from the environment.

    Examples:
        - UIMARKUP_PROVIDER_OPENAI_API_KEY -> {"api_key": ...}
        - UIMARKUP_PROVIDER_ANTHROPIC_BASE_URL -> {"base_url": ...}

    Returns:
        Configuration dictionary with keys normalized to lowercase
    """
    env = os.environ if environ is None else environ
    prefix = f"{ENV_PREFIX}{provider_type.upper()}_"

    config: Dict[str, Any] = {}
    for key, value in env.items():
        if key.startswith(prefix):
            config[key[len(prefix):].lower()] = value

    vendor_key = _VENDOR_API_KEYS.get(provider_type.lower())
    if "api_key" not in config and vendor_key and env.get(vendor_key):
        config["api_key"] = env[vendor_key]
    return config


def merge_configs(
    base_config: Dict[str, Any],
    override_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge base configuration with overrides; overrides win."""
    result = base_config.copy()
    if override_config:
        result.update(override_config)
    return result


def require_config_value(config: Mapping[str, Any], key: str, provider_type: str) -> Any:
    value = config.get(key)
    if value in (None, ""):
        env_key = f"{ENV_PREFIX}{provider_type.upper()}_{key.upper()}"
        raise ProviderConfigError(
            f"Required configuration '{key}' not found for provider '{provider_type}'. "
            f"Set {env_key} or provide '{key}' in config.",
            provider=provider_type,
        )
    return value


def default_provider_selection(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return the provider type and model chosen by ``UIMARKUP_PROVIDER`` / ``UIMARKUP_MODEL``."""
    env = os.environ if environ is None else environ
    return {
        "provider_type": env.get("UIMARKUP_PROVIDER", DEFAULT_PROVIDER).lower(),
        "model": env.get("UIMARKUP_MODEL", DEFAULT_MODEL),
    }


__all__ = [
    "ENV_PREFIX",
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL",
    "load_provider_config",
    "merge_configs",
    "require_config_value",
    "default_provider_selection",
]
