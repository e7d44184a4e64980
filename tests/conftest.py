"""Shared pytest fixtures for the uimarkup test-suite."""

import logging

import pytest

from uimarkup.ids import sequential_ids
from uimarkup.parser import MarkupParser
from uimarkup.providers.base import ChatProvider, ProviderResponse
from uimarkup.registry import StaticComponentRegistry


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "asyncio: mark async tests")


@pytest.fixture(autouse=True)
def _reset_package_log_level():
    """Undo log-level changes made by configure_logging during a test."""
    logger = logging.getLogger("uimarkup")
    level = logger.level
    yield
    logger.setLevel(level)


MOCK_COMPONENTS = {
    "VStack": {"acceptsChildren": True, "defaultProps": {"spacing": 2}},
    "HStack": {"acceptsChildren": True, "defaultProps": {"spacing": 2}},
    "Grid": {"acceptsChildren": True, "defaultProps": {"columns": 12, "gap": 4}},
    "Card": {"acceptsChildren": True},
    "CardBody": {"acceptsChildren": True},
    "CardHeader": {"acceptsChildren": True},
    "CardFooter": {"acceptsChildren": True},
    "Heading": {"defaultProps": {"level": 2}},
    "Text": {},
    "Button": {"defaultProps": {"variant": "secondary"}},
    "Badge": {},
    "Icon": {},
    "Spacer": {},
    "DataViews": {},
}


@pytest.fixture
def registry():
    return StaticComponentRegistry.from_mapping(MOCK_COMPONENTS)


@pytest.fixture
def parser(registry):
    return MarkupParser(registry, id_factory=sequential_ids())


class ScriptedProvider(ChatProvider):
    """Provider replaying canned replies; records every request it sees."""

    def __init__(self, replies, model="gpt-5-mini", config=None):
        super().__init__("scripted", model, config)
        self.replies = list(replies)
        self.calls = []

    async def generate(self, messages, **kwargs):
        self.calls.append((messages, kwargs))
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return ProviderResponse(model=self.model, output_text=reply)


@pytest.fixture
def scripted_provider():
    return ScriptedProvider
