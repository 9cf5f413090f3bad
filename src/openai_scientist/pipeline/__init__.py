"""Pipeline orchestration layer.

Each pipeline is a small state machine over one or two completions,
ending in a single artifact written to a timestamped folder.
"""

from .base import ATTRIBUTION_FOOTER
from .context import RunContext
from .report import ReportPipeline
from .visualization import VisualizationPipeline

__all__ = ["ATTRIBUTION_FOOTER", "ReportPipeline", "RunContext", "VisualizationPipeline"]
