from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from ..config import ScientistConfig
from ..models import CompletionResult, CostEstimate, OutcomeStatus, PipelineOutcome, PipelineState
from ..synth.costs import report_usage, total_cost
from ..synth.llm_client import LLMClient
from .context import RunContext

logger = logging.getLogger(__name__)

ATTRIBUTION_FOOTER = (
    "\n\n\n---\n\n\n\n\n"
    "This analysis was created with [openAIScientist](https://github.com/noluyorAbi/openaAIScientist).\n\n"
    " Made with ♥ by [noluyorAbi](https://github.com/noluyorAbi) for FortStaSoft @ LMU Munich"
)


class BasePipeline:
    """State bookkeeping shared by the report and visualization pipelines.

    A pipeline instance runs one invocation at a time; `history` lists the
    states visited by the most recent run.
    """

    extension: str = ""

    def __init__(
        self,
        config: ScientistConfig,
        client: Any = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self.llm = LLMClient.from_config(config, client=client)
        self.clock = clock or datetime.now
        self.state = PipelineState.BUILDING_SUMMARY
        self.history: list[PipelineState] = [self.state]
        self.costs: list[CostEstimate] = []

    def _reset(self) -> None:
        self.state = PipelineState.BUILDING_SUMMARY
        self.history = [self.state]
        self.costs = []

    def _transition(self, state: PipelineState) -> None:
        self.state = state
        self.history.append(state)

    def _complete(self, prompt: str, label: str) -> CompletionResult:
        result = self.llm.complete(prompt)
        estimate = report_usage(label, result.usage, self.config.pricing)
        if estimate is not None:
            self.costs.append(estimate)
        return result

    def _abort(self, status: OutcomeStatus, message: str) -> PipelineOutcome:
        logger.error(message)
        self._transition(PipelineState.ABORTED)
        return PipelineOutcome(status=status, state=self.state, costs=list(self.costs))

    def _persist(self, output_name: str, document: str) -> Path:
        ctx = RunContext.create(
            output_root=self.config.output_root,
            output_name=output_name,
            extension=self.extension,
            now=self.clock(),
        )
        path = ctx.write(document)
        self._transition(PipelineState.PERSISTED)
        return path

    def _finish(self, content: str, path: Path) -> PipelineOutcome:
        if len(self.costs) > 1:
            logger.info("Total cost (USD) for all calls: %.6f", total_cost(self.costs))
        return PipelineOutcome(
            status=OutcomeStatus.OK,
            state=self.state,
            content=content,
            path=path,
            costs=list(self.costs),
        )
