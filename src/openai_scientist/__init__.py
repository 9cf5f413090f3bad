"""openai_scientist package root.

Sends a summary of a tabular dataset to a chat-completion model and writes
the reply to disk, either as a cleaned-up markdown analysis or as an
Rmarkdown file of ggplot2 visualizations.
"""

from .config import ScientistConfig, TokenPricing
from .errors import AuthenticationError, CredentialMissingError, EmptyCompletionError, ServiceError
from .models import OutcomeStatus, PipelineOutcome, PipelineState
from .pipeline import ReportPipeline, VisualizationPipeline

__all__ = [
    "AuthenticationError",
    "CredentialMissingError",
    "EmptyCompletionError",
    "OutcomeStatus",
    "PipelineOutcome",
    "PipelineState",
    "ReportPipeline",
    "ScientistConfig",
    "ServiceError",
    "TokenPricing",
    "VisualizationPipeline",
]
