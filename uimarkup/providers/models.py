"""Known chat models: pricing and request-parameter capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from uimarkup.observability.logging import get_logger

logger = get_logger("uimarkup.providers.models")


@dataclass(frozen=True)
class ModelInfo:
    provider: str
    input_cost_per_1k: float
    output_cost_per_1k: float
    supports_custom_temperature: bool = True
    description: str = ""


# Prices are USD per 1K tokens.
KNOWN_MODELS: Dict[str, ModelInfo] = {
    "claude-sonnet-4-5": ModelInfo(
        provider="anthropic",
        input_cost_per_1k=0.003,
        output_cost_per_1k=0.015,
        description="Most capable, highest cost",
    ),
    "claude-haiku-4-5": ModelInfo(
        provider="anthropic",
        input_cost_per_1k=0.001,
        output_cost_per_1k=0.005,
        description="Fast and affordable",
    ),
    "gpt-5-mini": ModelInfo(
        provider="openai",
        input_cost_per_1k=0.0004,
        output_cost_per_1k=0.0016,
        supports_custom_temperature=False,
        description="Fast and very affordable",
    ),
    "gpt-5-nano": ModelInfo(
        provider="openai",
        input_cost_per_1k=0.0003,
        output_cost_per_1k=0.0012,
        supports_custom_temperature=False,
        description="Ultra-fast and cheapest",
    ),
}

# Used for cost estimates when the model is not in the table above.
FALLBACK_MODEL = ModelInfo(
    provider="unknown",
    input_cost_per_1k=0.00025,
    output_cost_per_1k=0.002,
)


def get_model_info(model: str) -> ModelInfo:
    info = KNOWN_MODELS.get(model)
    if info is None:
        logger.warning("Model %r not found in catalogue, using default capabilities", model)
        return FALLBACK_MODEL
    return info


def supports_custom_temperature(model: str) -> bool:
    return get_model_info(model).supports_custom_temperature


__all__ = ["ModelInfo", "KNOWN_MODELS", "FALLBACK_MODEL", "get_model_info", "supports_custom_temperature"]
