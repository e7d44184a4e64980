"""LLM-assisted self-repair for malformed markup."""

from .context import error_window, extract_error_context, failing_line
from .cost import estimate_cost, estimate_tokens
from .loop import MarkupRepairer, parse_markup_with_repair
from .prompts import REPAIR_SYSTEM_PROMPT, build_repair_messages, build_repair_prompt
from .splice import splice_fix, strip_code_fences

__all__ = [
    "MarkupRepairer",
    "parse_markup_with_repair",
    "error_window",
    "extract_error_context",
    "failing_line",
    "estimate_cost",
    "estimate_tokens",
    "REPAIR_SYSTEM_PROMPT",
    "build_repair_messages",
    "build_repair_prompt",
    "splice_fix",
    "strip_code_fences",
]
