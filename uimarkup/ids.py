"""Node id generation owned by a single parse call."""

from __future__ import annotations

import random
import string
from typing import Callable, Optional

_ALPHABET = string.ascii_lowercase + string.digits

IdFactory = Callable[[], Callable[[], str]]


class IdGenerator:
    """Monotonic counter plus a random suffix.

    One instance belongs to one parse call, so parallel parses never contend
    on shared state. With ``random_suffix=False`` ids are fully deterministic
    (``node-1``, ``node-2``, ...).
    """

    def __init__(
        self,
        prefix: str = "node",
        *,
        random_suffix: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.prefix = prefix
        self.random_suffix = random_suffix
        self._rng = rng or random.Random()
        self._counter = 0

    def __call__(self) -> str:
        self._counter += 1
        if not self.random_suffix:
            return f"{self.prefix}-{self._counter}"
        suffix = "".join(self._rng.choice(_ALPHABET) for _ in range(9))
        return f"{self.prefix}-{self._counter}-{suffix}"

    @property
    def issued(self) -> int:
        return self._counter


def sequential_ids(prefix: str = "node") -> IdFactory:
    """Return a factory producing deterministic generators, one per parse."""

    def _factory() -> Callable[[], str]:
        return IdGenerator(prefix, random_suffix=False)

    return _factory


__all__ = ["IdGenerator", "IdFactory", "sequential_ids"]
