"""
Shared fixtures.
"""

import litellm
import pytest

from tests.fakes import FakeConnection, FakeLLM


@pytest.fixture
def fake_llm(monkeypatch) -> FakeLLM:
    """Patch litellm.completion with a FakeLLM."""
    llm = FakeLLM()
    monkeypatch.setattr(litellm, "completion", llm)
    return llm


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()
