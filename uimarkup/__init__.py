"""
uimarkup: compile compact UI markup into component trees.

An agent describes a nested component tree as tag-based markup such as::

    <VStack spacing={4}>
      <Heading level={2}>Welcome</Heading>
      <Button variant="primary">Get Started</Button>
    </VStack>

The package is organised into:

* ``parser`` – hand written recursive-descent parser producing
  :class:`~uimarkup.nodes.ComponentNode` trees, with design-token checks and
  shorthand card expansion.
* ``repair`` – bounded loop that sends the failing window to a chat model and
  splices the corrected lines back in.
* ``providers`` – async chat-completion clients (OpenAI, Anthropic).
* ``registry`` – the component catalog adapter the parser consumes.
* ``cli`` – ``uimarkup parse`` / ``uimarkup repair`` commands.
"""

from .config import RepairSettings
from .errors import DesignTokenError, MarkupError, MarkupSemanticError, MarkupSyntaxError, ParseError
from .ids import IdGenerator, sequential_ids
from .nodes import ComponentNode, ParseFailure, ParseResult, ParseSuccess, RepairResult
from .parser import MarkupParser, parse_markup
from .registry import ComponentDefinition, ComponentRegistry, StaticComponentRegistry, default_registry
from .repair import MarkupRepairer, parse_markup_with_repair

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "RepairSettings",
    "DesignTokenError",
    "MarkupError",
    "MarkupSemanticError",
    "MarkupSyntaxError",
    "ParseError",
    "IdGenerator",
    "sequential_ids",
    "ComponentNode",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "RepairResult",
    "MarkupParser",
    "parse_markup",
    "ComponentDefinition",
    "ComponentRegistry",
    "StaticComponentRegistry",
    "default_registry",
    "MarkupRepairer",
    "parse_markup_with_repair",
]
