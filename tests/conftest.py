from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace
from typing import Any, Optional

import pytest

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45)


def make_reply(text: Optional[str], usage: Optional[tuple[int, int]] = (100, 50)) -> SimpleNamespace:
    """Object shaped like an OpenAI ChatCompletion. text=None means no choices."""
    choices = [] if text is None else [SimpleNamespace(message=SimpleNamespace(content=text))]
    usage_obj = None
    if usage is not None:
        usage_obj = SimpleNamespace(prompt_tokens=usage[0], completion_tokens=usage[1], total_tokens=usage[0] + usage[1])
    return SimpleNamespace(choices=choices, usage=usage_obj)


class FakeCompletions:
    def __init__(self, replies: list[Any]) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        return self.replies.pop(0)


class FakeClient:
    """Stands in for openai.OpenAI and records every request."""

    def __init__(self, *replies: Any) -> None:
        self.completions = FakeCompletions(list(replies))
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.completions.calls

    def prompts(self) -> list[str]:
        return [c["messages"][0]["content"] for c in self.calls]


@pytest.fixture
def reply():
    return make_reply


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
