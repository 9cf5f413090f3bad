from __future__ import annotations

import pytest

from openai_scientist.ask import EXPLAIN_LEAD, SUGGEST_LEAD, explain_results, generate_report, suggest_further_analysis
from openai_scientist.config import ScientistConfig
from openai_scientist.errors import CredentialMissingError


def test_explain_results(fake_client, reply) -> None:
    client = fake_client(reply("It means X goes up with Y."))
    res = explain_results("strong correlation between X and Y", ScientistConfig(api_key="sk-test"), client=client)
    assert res is not None
    assert res.text == "It means X goes up with Y."
    assert res.usage is not None and res.usage.total_tokens == 150
    assert client.prompts() == [EXPLAIN_LEAD + "strong correlation between X and Y"]


def test_suggest_further_analysis_empty_reply(fake_client, reply) -> None:
    client = fake_client(reply(None))
    res = suggest_further_analysis("plant measurements", ScientistConfig(api_key="sk-test"), client=client)
    assert res is None
    assert client.prompts() == [SUGGEST_LEAD + "plant measurements"]


def test_generate_report_requires_credentials(fake_client, reply) -> None:
    client = fake_client(reply("unused"))
    with pytest.raises(CredentialMissingError):
        generate_report("summary", ScientistConfig(api_key=""), client=client)
    assert client.calls == []
