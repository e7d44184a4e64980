"""Repair-loop configuration.

Settings are validated with pydantic and can be read from ``UIMARKUP_REPAIR_*``
environment variables:

    UIMARKUP_REPAIR_MAX_ATTEMPTS=3
    UIMARKUP_REPAIR_MAX_OUTPUT_TOKENS=500
    UIMARKUP_REPAIR_TEMPERATURE=0.2
    UIMARKUP_REPAIR_CONTEXT_RADIUS=2
    UIMARKUP_REPAIR_INPUT_COST_PER_1K=0.00025
    UIMARKUP_REPAIR_OUTPUT_COST_PER_1K=0.002
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from uimarkup.providers.models import get_model_info

ENV_PREFIX = "UIMARKUP_REPAIR_"


class RepairSettings(BaseModel):
    """Tunable parameters of the bounded repair loop."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_attempts: int = Field(3, ge=0, description="Repair requests sent before giving up")
    max_output_tokens: int = Field(500, gt=0, description="Reply budget per repair request")
    temperature: Optional[float] = Field(0.2, ge=0.0, le=2.0, description="Sampling temperature, if supported")
    context_radius: int = Field(2, ge=0, description="Lines kept on each side of the error line")
    chars_per_token: int = Field(4, gt=0, description="Characters per token for cost estimates")
    input_cost_per_1k: float = Field(0.00025, ge=0.0, description="USD per 1K request tokens")
    output_cost_per_1k: float = Field(0.002, ge=0.0, description="USD per 1K reply tokens")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "RepairSettings":
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw != "":
                values[field_name] = raw
        values.update(overrides)
        return cls.model_validate(values)

    def for_model(self, model: str) -> "RepairSettings":
        """Return a copy priced for ``model``; unknown models keep the current rates."""
        info = get_model_info(model)
        if info.provider == "unknown":
            return self
        return self.model_copy(
            update={
                "input_cost_per_1k": info.input_cost_per_1k,
                "output_cost_per_1k": info.output_cost_per_1k,
            }
        )


__all__ = ["RepairSettings", "ENV_PREFIX"]
