from __future__ import annotations

import logging

import pandas as pd

from ..errors import CredentialMissingError, EmptyCompletionError
from ..models import OutcomeStatus, PipelineOutcome, PipelineState
from ..paths import RMARKDOWN_EXT
from ..profile import dataframe_to_r_literal, summarize_dataframe
from ..synth.prompts import DATASET_VARIABLE, build_visualization_prompt
from ..synth.sanitize import RMD_CHUNK_HEADER, to_rmarkdown_chunks
from .base import ATTRIBUTION_FOOTER, BasePipeline

logger = logging.getLogger(__name__)


def rmd_header(data: pd.DataFrame) -> list[str]:
    """Front matter plus a chunk that defines `dataset` for the generated code."""
    return [
        "---",
        "output:",
        "  html_document:",
        "    code_folding: hide",
        "---",
        "",
        "# Dataset",
        RMD_CHUNK_HEADER,
        f"{DATASET_VARIABLE} <- {dataframe_to_r_literal(data)}",
        "```",
        "",
    ]


def build_rmd_document(data: pd.DataFrame, rmd_code: str) -> str:
    return "\n".join(rmd_header(data) + [rmd_code]) + "\n"


class VisualizationPipeline(BasePipeline):
    """ggplot2 walkthrough as an Rmarkdown file.

    One completion, no validation round-trip. R fences in the reply become
    `{r, message=FALSE}` chunks and the caller's data is embedded as an R
    literal ahead of them.
    """

    extension = RMARKDOWN_EXT

    def run(self, data: pd.DataFrame, output_name: str = "Visualization", additional_prompt: str = "") -> PipelineOutcome:
        self._reset()
        logger.info("Generating data summary...")
        prompt = build_visualization_prompt(summarize_dataframe(data), additional_prompt)

        self._transition(PipelineState.AWAITING_GENERATION)
        logger.info("Sending request to OpenAI API (this might take a while)...")
        try:
            result = self._complete(prompt, "Initial call")
        except CredentialMissingError as exc:
            return self._abort(OutcomeStatus.AUTH_ERROR, str(exc))
        except EmptyCompletionError:
            return self._abort(OutcomeStatus.EMPTY, "Failed to generate visualization. No content returned from OpenAI API.")

        self._transition(PipelineState.SANITIZING)
        rmd_code = to_rmarkdown_chunks(result.text)

        path = self._persist(output_name, build_rmd_document(data, rmd_code) + ATTRIBUTION_FOOTER)
        logger.info("RMarkdown file for visualization saved in: %s", path)
        return self._finish(rmd_code, path)
