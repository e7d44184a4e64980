"""Implementations of the ``parse``, ``repair`` and ``components`` subcommands."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from uimarkup.config import RepairSettings
from uimarkup.ids import sequential_ids
from uimarkup.nodes import TABLE_TYPE, RepairResult
from uimarkup.observability.logging import get_logger
from uimarkup.parser import MarkupParser, precomposed_names
from uimarkup.providers import ChatProvider, ProviderError, create_provider
from uimarkup.providers.config import default_provider_selection
from uimarkup.registry import default_registry
from uimarkup.repair import parse_markup_with_repair

from .output import print_component_groups, print_json, print_parse_error

logger = get_logger("uimarkup.cli")


class CLIInputError(Exception):
    """Raised when the markup source cannot be read."""


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source_path = Path(path)
    try:
        return source_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CLIInputError(f"File not found: {path}") from exc
    except OSError as exc:
        raise CLIInputError(f"Could not read {path}: {exc}") from exc


def cmd_parse(args: argparse.Namespace) -> int:
    try:
        source = read_source(args.file)
    except CLIInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    id_factory = sequential_ids() if getattr(args, "deterministic_ids", False) else None
    result = MarkupParser(id_factory=id_factory).parse(source)
    if not result.success:
        print_parse_error(result.error)
        return 1
    print_json(result.to_dict(), indent=args.indent)
    return 0


def _build_provider(args: argparse.Namespace) -> ChatProvider:
    selection = default_provider_selection()
    provider_type = args.provider or selection["provider_type"]
    model = args.model or selection["model"]
    return create_provider(provider_type, model=model)


async def _run_repair(source: str, provider: ChatProvider, attempts: Optional[int]) -> RepairResult:
    settings = RepairSettings.from_env().for_model(provider.model)
    limit = settings.max_attempts if attempts is None else attempts
    async with provider:
        return await parse_markup_with_repair(source, limit, provider=provider, settings=settings)


def cmd_repair(args: argparse.Namespace) -> int:
    try:
        source = read_source(args.file)
    except CLIInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.attempts is not None and args.attempts < 0:
        print("Error: --attempts must be >= 0", file=sys.stderr)
        return 2

    try:
        provider = _build_provider(args)
    except ProviderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Repairing %s with %r", args.file, provider)
    result = asyncio.run(_run_repair(source, provider, args.attempts))
    print_json(result.to_dict(), indent=args.indent)
    return 0 if result.success else 1


def cmd_components(args: argparse.Namespace) -> int:
    registry = default_registry()
    print_component_groups(
        registry.groups(),
        {
            "Tables": [TABLE_TYPE],
            "Pre-composed (self-closing only)": precomposed_names(),
        },
    )
    return 0


__all__ = ["cmd_parse", "cmd_repair", "cmd_components", "read_source", "CLIInputError"]
