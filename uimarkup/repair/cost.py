"""Token and cost estimates for repair requests."""

from __future__ import annotations

import math

from uimarkup.config import RepairSettings


def estimate_tokens(text: str, chars_per_token: int = 4) -> int:
    """Roughly one token per ``chars_per_token`` characters, rounded up."""
    return math.ceil(len(text) / chars_per_token)


def estimate_cost(request_text: str, reply_text: str, settings: RepairSettings) -> float:
    input_tokens = estimate_tokens(request_text, settings.chars_per_token)
    output_tokens = estimate_tokens(reply_text, settings.chars_per_token)
    return (
        input_tokens / 1000 * settings.input_cost_per_1k
        + output_tokens / 1000 * settings.output_cost_per_1k
    )


__all__ = ["estimate_tokens", "estimate_cost"]
