from __future__ import annotations

import pytest

from openai_scientist.config import ScientistConfig
from openai_scientist.errors import (
    AuthenticationError,
    CredentialMissingError,
    EmptyCompletionError,
    ServiceError,
)
from openai_scientist.models import TokenUsage
from openai_scientist.synth.llm_client import LLMClient


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_missing_credential_fails_before_any_request(api_key, fake_client, reply) -> None:
    client = fake_client(reply("unused"))
    llm = LLMClient(api_key=api_key, client=client)
    with pytest.raises(CredentialMissingError):
        llm.complete("hello")
    assert len(client.calls) == 0


def test_missing_credential_without_injected_client() -> None:
    with pytest.raises(AuthenticationError):
        LLMClient(api_key="").complete("hello")


def test_request_shape_and_result(fake_client, reply) -> None:
    client = fake_client(reply("generated", usage=(12, 30)))
    llm = LLMClient(api_key="sk-test", model="gpt-4o", client=client)

    result = llm.complete("hello")

    assert client.calls == [{"model": "gpt-4o", "messages": [{"role": "user", "content": "hello"}]}]
    assert result.text == "generated"
    assert result.usage == TokenUsage(prompt_tokens=12, completion_tokens=30, total_tokens=42)


def test_no_choices_is_a_service_error(fake_client, reply) -> None:
    client = fake_client(reply(None))
    with pytest.raises(ServiceError):
        LLMClient(api_key="sk-test", client=client).complete("hello")
    assert len(client.calls) == 1


def test_empty_content_is_a_service_error(fake_client, reply) -> None:
    client = fake_client(reply(""))
    with pytest.raises(EmptyCompletionError):
        LLMClient(api_key="sk-test", client=client).complete("hello")


def test_absent_usage_is_not_an_error(fake_client, reply) -> None:
    client = fake_client(reply("ok", usage=None))
    result = LLMClient(api_key="sk-test", client=client).complete("hello")
    assert result.text == "ok"
    assert result.usage is None


def test_from_config_uses_model(fake_client, reply) -> None:
    client = fake_client(reply("ok"))
    config = ScientistConfig(api_key="sk-test", model="gpt-4o-mini")
    LLMClient.from_config(config, client=client).complete("hi")
    assert client.calls[0]["model"] == "gpt-4o-mini"
