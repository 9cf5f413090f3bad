from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..paths import artifact_path, run_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunContext:
    """Output location of a single pipeline run.

    The directory name carries a one-second timestamp; nothing else makes
    it unique.
    """

    run_dir: Path
    artifact_path: Path
    output_name: str

    @classmethod
    def create(
        cls,
        *,
        output_root: Path,
        output_name: str,
        extension: str,
        now: datetime,
    ) -> "RunContext":
        directory = run_dir(output_root, output_name, now)
        return cls(
            run_dir=directory,
            artifact_path=artifact_path(directory, output_name, extension),
            output_name=output_name,
        )

    def materialize(self) -> Path:
        """Create the run directory and return the artifact path."""
        if self.run_dir.exists():
            logger.warning("Output folder %s already exists; its %s will be overwritten.", self.run_dir, self.artifact_path.name)
        self.run_dir.mkdir(parents=True, exist_ok=True)
        return self.artifact_path

    def write(self, text: str) -> Path:
        path = self.materialize()
        path.write_text(text, encoding="utf-8")
        return path
