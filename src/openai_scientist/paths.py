from __future__ import annotations

from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

MARKDOWN_EXT = ".md"
RMARKDOWN_EXT = ".Rmd"


def timestamped_dir_name(output_name: str, now: datetime) -> str:
    """
    Folder name for one run: <output_name>_<YYYY-MM-DD_HH-MM-SS>.

    Granularity is one second, so two runs with the same name inside the
    same second share a folder.
    """
    return f"{output_name}_{now.strftime(TIMESTAMP_FORMAT)}"


def run_dir(output_root: Path, output_name: str, now: datetime) -> Path:
    return Path(output_root) / timestamped_dir_name(output_name, now)


def artifact_path(run_directory: Path, output_name: str, extension: str) -> Path:
    return run_directory / f"{output_name}{extension}"
