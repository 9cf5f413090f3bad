"""Dataset profiling stage.

Turns a DataFrame into the two textual forms the pipelines need: a
summary table for prompts, and an R literal for Rmarkdown embedding.
"""

from .summarize import PLACEHOLDER, dataframe_to_r_literal, summarize_dataframe

__all__ = ["PLACEHOLDER", "dataframe_to_r_literal", "summarize_dataframe"]
