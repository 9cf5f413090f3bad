from __future__ import annotations

import logging

import pandas as pd

from ..errors import CredentialMissingError, EmptyCompletionError
from ..models import OutcomeStatus, PipelineOutcome, PipelineState
from ..paths import MARKDOWN_EXT
from ..profile import summarize_dataframe
from ..synth.prompts import build_analysis_prompt, build_validation_prompt
from ..synth.sanitize import drop_degenerate_rows, sanitize_markdown
from .base import ATTRIBUTION_FOOTER, BasePipeline

logger = logging.getLogger(__name__)


class ReportPipeline(BasePipeline):
    """Markdown scientific analysis: generate, validate, sanitize, persist.

    States: BUILDING_SUMMARY -> AWAITING_GENERATION -> AWAITING_VALIDATION
    -> SANITIZING -> PERSISTED, or ABORTED on a missing credential or an
    empty reply at either call. An aborted run writes nothing, and a
    failed validation call abandons the first-pass text.
    """

    extension = MARKDOWN_EXT

    def run(self, data: pd.DataFrame, output_name: str = "Analysis", additional_prompt: str = "") -> PipelineOutcome:
        logger.info("Generating data summary...")
        summary = summarize_dataframe(data)
        return self.run_summary(summary, output_name=output_name, additional_prompt=additional_prompt)

    def run_summary(self, summary: str, output_name: str = "Analysis", additional_prompt: str = "") -> PipelineOutcome:
        self._reset()
        prompt = build_analysis_prompt(summary, additional_prompt)

        self._transition(PipelineState.AWAITING_GENERATION)
        logger.info("Sending request to OpenAI API (this might take a while)...")
        try:
            generated = self._complete(prompt, "Initial call")
        except CredentialMissingError as exc:
            return self._abort(OutcomeStatus.AUTH_ERROR, str(exc))
        except EmptyCompletionError:
            return self._abort(OutcomeStatus.EMPTY, "Failed to generate analysis. No content returned from OpenAI API.")

        self._transition(PipelineState.AWAITING_VALIDATION)
        logger.info("Validating and formatting markdown...")
        try:
            validated = self._complete(build_validation_prompt(generated.text), "Validation call")
        except CredentialMissingError as exc:
            return self._abort(OutcomeStatus.AUTH_ERROR, str(exc))
        except EmptyCompletionError:
            return self._abort(OutcomeStatus.EMPTY, "Failed to validate the analysis. No content returned from OpenAI API.")

        self._transition(PipelineState.SANITIZING)
        cleaned = drop_degenerate_rows(sanitize_markdown(validated.text))

        logger.info("Creating markdown file...")
        path = self._persist(output_name, cleaned + ATTRIBUTION_FOOTER)
        logger.info('Analysis generation complete. Markdown file "%s" created and validated.', path)
        return self._finish(cleaned, path)
