from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .config import ScientistConfig
from .errors import EmptyCompletionError
from .models import TokenUsage
from .synth.costs import report_usage
from .synth.llm_client import LLMClient

logger = logging.getLogger(__name__)

REPORT_LEAD = "Generate a detailed scientific report for the following data summary:\n"
EXPLAIN_LEAD = "Explain the following data analysis results in simple terms:\n"
SUGGEST_LEAD = "Suggest further analyses for the following data:\n"


@dataclass(frozen=True)
class AskResult:
    text: str
    usage: Optional[TokenUsage] = None


def _ask(lead: str, body: str, config: ScientistConfig, client: Any, label: str) -> AskResult | None:
    """One text-only completion. Returns None when the reply is empty.

    A missing credential raises CredentialMissingError; nothing is written
    to disk either way.
    """
    llm = LLMClient.from_config(config, client=client)
    try:
        result = llm.complete(lead + body)
    except EmptyCompletionError:
        logger.error("Failed to %s. No content returned from OpenAI API.", label)
        return None
    report_usage(label.capitalize(), result.usage, config.pricing)
    return AskResult(text=result.text, usage=result.usage)


def generate_report(summary: str, config: ScientistConfig, client: Any = None) -> AskResult | None:
    return _ask(REPORT_LEAD, summary, config, client, "generate report")


def explain_results(analysis: str, config: ScientistConfig, client: Any = None) -> AskResult | None:
    return _ask(EXPLAIN_LEAD, analysis, config, client, "explain results")


def suggest_further_analysis(description: str, config: ScientistConfig, client: Any = None) -> AskResult | None:
    return _ask(SUGGEST_LEAD, description, config, client, "suggest further analysis")
