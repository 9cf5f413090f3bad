"""Synthesis layer: prompt construction, the chat-completion client,
cost accounting and clean-up of the returned text.
"""

from .costs import estimate_cost, report_usage
from .llm_client import LLMClient
from .prompts import build_analysis_prompt, build_validation_prompt, build_visualization_prompt, strip_markup
from .sanitize import drop_degenerate_rows, sanitize_markdown, to_rmarkdown_chunks

__all__ = [
    "LLMClient",
    "build_analysis_prompt",
    "build_validation_prompt",
    "build_visualization_prompt",
    "drop_degenerate_rows",
    "estimate_cost",
    "report_usage",
    "sanitize_markdown",
    "strip_markup",
    "to_rmarkdown_chunks",
]
