"""Bounded parse-repair-reparse controller."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from uimarkup.config import RepairSettings
from uimarkup.errors import ParseError
from uimarkup.nodes import TABLE_TYPE, ParseFailure, ParseResult, RepairResult
from uimarkup.observability.logging import get_logger, log_repair_event
from uimarkup.observability.metrics import REPAIR_ATTEMPT, REPAIR_COST, record_metric, record_repair_outcome
from uimarkup.parser import MarkupParser, precomposed_names
from uimarkup.providers.base import ChatProvider
from uimarkup.providers.factory import create_default_provider
from uimarkup.providers.models import supports_custom_temperature
from uimarkup.registry import ComponentRegistry

from .context import extract_error_context, failing_line
from .cost import estimate_cost
from .prompts import build_repair_messages, build_repair_prompt
from .splice import splice_fix

logger = get_logger("uimarkup.repair")


class MarkupRepairer:
    """Parse markup and, on failure, ask a chat model to fix the failing window.

    Attempts run strictly one after another: each request is awaited, its
    reply spliced and the result re-parsed before the next attempt starts.
    Attempt and cost counters are local to one :meth:`parse` call.
    """

    def __init__(
        self,
        provider: Optional[ChatProvider] = None,
        *,
        parser: Optional[MarkupParser] = None,
        registry: Optional[ComponentRegistry] = None,
        settings: Optional[RepairSettings] = None,
    ):
        self.parser = parser or MarkupParser(registry)
        self._provider = provider
        self._owns_provider = False
        self.settings = settings or RepairSettings()

    @property
    def provider(self) -> ChatProvider:
        if self._provider is None:
            self._provider = create_default_provider()
            self._owns_provider = True
        return self._provider

    async def aclose(self) -> None:
        """Close the provider if this repairer created it; injected providers stay open."""
        if self._owns_provider and self._provider is not None:
            provider, self._provider = self._provider, None
            self._owns_provider = False
            await provider.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def component_summary(self) -> str:
        return (
            f"{self.parser.registry.summary()}\n"
            f"Also allowed: {TABLE_TYPE}\n"
            f"Pre-composed (self-closing only): {', '.join(precomposed_names())}"
        )

    async def parse(self, source: str, max_attempts: Optional[int] = None) -> RepairResult:
        limit = self.settings.max_attempts if max_attempts is None else max_attempts
        if limit < 0:
            raise ValueError("max_attempts must be >= 0")

        current = source
        result: ParseResult = self.parser.parse(current)
        if result.success:
            return RepairResult(success=True, nodes=result.nodes, attempts=0, cost=0.0)

        attempts = 0
        total_cost = 0.0
        while attempts < limit and isinstance(result, ParseFailure):
            attempts += 1
            error = result.error
            log_repair_event(
                event="attempt",
                attempt=attempts,
                max_attempts=limit,
                message=error.message,
                extras={"line": error.line, "column": error.column},
            )
            record_metric(REPAIR_ATTEMPT, 1.0)

            try:
                reply, attempt_cost = await self._request_fix(current, error)
            except Exception as exc:
                log_repair_event(
                    event="request_failed",
                    attempt=attempts,
                    max_attempts=limit,
                    message=str(exc),
                    level=logging.WARNING,
                    extras={"exception": type(exc).__name__},
                )
                continue

            total_cost += attempt_cost
            record_metric(REPAIR_COST, attempt_cost)
            current = splice_fix(current, error, reply, self.settings.context_radius)
            result = self.parser.parse(current)

            if result.success:
                log_repair_event(event="succeeded", attempt=attempts, max_attempts=limit, cost=total_cost)
                record_repair_outcome(True, attempts, total_cost)
                return RepairResult(success=True, nodes=result.nodes, attempts=attempts, cost=total_cost)

        message = result.error.message if isinstance(result, ParseFailure) else None
        log_repair_event(
            event="exhausted",
            attempt=attempts,
            max_attempts=limit,
            message=message,
            cost=total_cost,
            level=logging.WARNING,
        )
        record_repair_outcome(False, attempts, total_cost)
        return RepairResult(
            success=False,
            error=message or "Failed to parse markup after all repair attempts",
            attempts=attempts,
            cost=total_cost,
        )

    async def _request_fix(self, source: str, error: ParseError) -> Tuple[str, float]:
        """Send one repair request; return the reply text and its estimated cost."""
        settings = self.settings
        context = extract_error_context(source, error, settings.context_radius)
        prompt = build_repair_prompt(context, error, failing_line(source, error), self.component_summary())
        messages = build_repair_messages(prompt)

        provider = self.provider
        kwargs = {"max_tokens": settings.max_output_tokens}
        if settings.temperature is not None and supports_custom_temperature(provider.model):
            kwargs["temperature"] = settings.temperature

        response = await provider.generate(messages, **kwargs)
        reply = response.output_text or ""
        request_text = "".join(message.content for message in messages)
        cost = estimate_cost(request_text, reply, settings)
        logger.debug("Received repair reply (%d chars, cost $%.6f)", len(reply), cost)
        return reply, cost


async def parse_markup_with_repair(
    source: str,
    max_attempts: int = 3,
    *,
    provider: Optional[ChatProvider] = None,
    registry: Optional[ComponentRegistry] = None,
    settings: Optional[RepairSettings] = None,
) -> RepairResult:
    """Parse ``source``, repairing it through ``provider`` for up to ``max_attempts`` rounds."""
    async with MarkupRepairer(provider, registry=registry, settings=settings) as repairer:
        return await repairer.parse(source, max_attempts)


__all__ = ["MarkupRepairer", "parse_markup_with_repair"]
