from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class OutcomeStatus(str, Enum):
    """
    Discriminated result of a pipeline run.

    - OK: an artifact was written and its content is available
    - EMPTY: the remote model returned no usable content; nothing was written
    - AUTH_ERROR: no credential was configured; no request was sent
    """
    OK = "ok"
    EMPTY = "empty"
    AUTH_ERROR = "auth_error"


class PipelineState(str, Enum):
    """
    States of a report or visualization run.

    The visualization pipeline skips AWAITING_VALIDATION.
    ABORTED is terminal and reachable from every non-terminal state.
    """
    BUILDING_SUMMARY = "building_summary"
    AWAITING_GENERATION = "awaiting_generation"
    AWAITING_VALIDATION = "awaiting_validation"
    SANITIZING = "sanitizing"
    PERSISTED = "persisted"
    ABORTED = "aborted"


class TokenUsage(BaseModel):
    """
    Token counts reported by the chat-completion endpoint for one call.
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class CompletionResult(BaseModel):
    """
    One request/response exchange with the remote model.

    usage is service-dependent and may be absent; that is not an error.
    """
    text: str
    usage: Optional[TokenUsage] = None


class CostEstimate(BaseModel):
    """
    USD cost of a single completion, derived from its token usage.
    """
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    input_cost: float
    output_cost: float
    total_cost: float


class PipelineOutcome(BaseModel):
    """
    What a pipeline hands back to its caller.

    content and path are only set when status is OK; callers must check
    `ok` (or status) before using them.
    """
    status: OutcomeStatus
    state: PipelineState
    content: Optional[str] = None
    path: Optional[Path] = None
    costs: list[CostEstimate] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK

    @property
    def total_cost(self) -> float:
        return sum(c.total_cost for c in self.costs)
