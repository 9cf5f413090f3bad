from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..config import TokenPricing
from ..models import CostEstimate, TokenUsage

logger = logging.getLogger(__name__)


def estimate_cost(usage: TokenUsage, pricing: Optional[TokenPricing] = None) -> CostEstimate:
    """USD cost of one completion at fixed per-token prices."""
    pricing = pricing or TokenPricing()
    input_cost = usage.prompt_tokens * pricing.per_input_token
    output_cost = usage.completion_tokens * pricing.per_output_token
    return CostEstimate(
        prompt_tokens=usage.prompt_tokens,
        completion_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
        input_cost=input_cost,
        output_cost=output_cost,
        total_cost=input_cost + output_cost,
    )


def format_cost(label: str, estimate: CostEstimate) -> list[str]:
    return [
        f"{label} - Total tokens used: {estimate.total_tokens}",
        f"{label} - Total cost (USD): {estimate.total_cost:.6f}",
    ]


def report_usage(label: str, usage: Optional[TokenUsage], pricing: Optional[TokenPricing] = None) -> Optional[CostEstimate]:
    """Log the cost of one call. Missing usage is reported, never raised."""
    if usage is None:
        logger.info("%s - Token usage information not available.", label)
        return None
    estimate = estimate_cost(usage, pricing)
    for line in format_cost(label, estimate):
        logger.info(line)
    return estimate


def total_cost(estimates: Iterable[CostEstimate]) -> float:
    return sum(e.total_cost for e in estimates)
