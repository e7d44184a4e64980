"""Prompt text for repair requests.

The request carries only the error, its location, the surrounding window,
the failing line and the valid component names; the rest of the document is
never sent.
"""

from __future__ import annotations

from typing import List

from uimarkup.errors import ParseError
from uimarkup.providers.base import ChatMessage

REPAIR_SYSTEM_PROMPT = (
    "You are a markup repair assistant. Fix only the specific error mentioned. "
    "Return ONLY the corrected markup, no explanations."
)


def build_repair_prompt(context: str, error: ParseError, error_line: str, components: str) -> str:
    return f"""Fix this JSX markup error:

Error: {error.message}
At line {error.line}, column {error.column}

Context:
```jsx
{context}
```

The error is on this line:
```
{error_line}
```

{components}

Return ONLY the corrected markup for the error context above. No explanations."""


def build_repair_messages(prompt: str) -> List[ChatMessage]:
    return [
        ChatMessage(role="system", content=REPAIR_SYSTEM_PROMPT),
        ChatMessage(role="user", content=prompt),
    ]


__all__ = ["REPAIR_SYSTEM_PROMPT", "build_repair_prompt", "build_repair_messages"]
