"""Shared fixtures for the unit and API tests."""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from repositories.memory_store import MemoryStore
from services.notifier import ConnectionNotifier
from tests.stubs import StubLLM


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def stub_llm():
    return StubLLM()


@pytest.fixture
def notifier():
    return ConnectionNotifier()
