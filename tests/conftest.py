from types import SimpleNamespace

import pytest

from tests.helpers import SAMPLE_RESUME


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


class _FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeLLMClient:
    """Stands in for AsyncOpenAI: only chat.completions.create is used."""

    def __init__(self, content=None, error=None):
        self.completions = _FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def fake_llm_client():
    return FakeLLMClient
