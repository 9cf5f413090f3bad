from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from .ask import explain_results, suggest_further_analysis
from .config import ScientistConfig
from .errors import CredentialMissingError
from .models import OutcomeStatus, PipelineOutcome
from .pipeline import ReportPipeline, VisualizationPipeline
from .profile import summarize_dataframe

app = typer.Typer(add_completion=False, help="openAIScientist: LLM-written analyses and visualizations for tabular data")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    # The SDK's HTTP client logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load_csv(path: Path) -> pd.DataFrame:
    try:
        return pd.read_csv(path)
    except Exception as e:
        typer.echo(f"ERROR: could not read {path}: {e}", err=True)
        raise typer.Exit(code=1)


def _config(output_dir: Optional[Path], model: Optional[str]) -> ScientistConfig:
    config = ScientistConfig.from_env(output_root=output_dir, model=model)
    if not config.has_credentials:
        typer.echo("ERROR: API key not found. Please set the OPENAI_API_KEY environment variable.", err=True)
        raise typer.Exit(code=2)
    return config


def _report_outcome(outcome: PipelineOutcome) -> None:
    if outcome.status == OutcomeStatus.AUTH_ERROR:
        raise typer.Exit(code=2)
    if not outcome.ok:
        typer.echo("No file was written.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Written: {outcome.path}")
    if outcome.costs:
        typer.echo(f"Total cost (USD): {outcome.total_cost:.6f}")


@app.command()
def analyze(
    data: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file to analyze"),
    output_name: str = typer.Option("Analysis", "--output-name", help="Name of the output folder and .md file"),
    prompt: str = typer.Option("", "--prompt", help="Additional instructions for the model"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Where to create the output folder"),
    model: Optional[str] = typer.Option(None, "--model", help="Chat-completion model (default: gpt-4o)"),
) -> None:
    """
    Write a markdown scientific analysis of a CSV dataset.

    Creates ./<output-name>_<timestamp>/<output-name>.md
    """
    config = _config(output_dir, model)
    outcome = ReportPipeline(config).run(_load_csv(data), output_name=output_name, additional_prompt=prompt)
    _report_outcome(outcome)


@app.command()
def visualize(
    data: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file to visualize"),
    output_name: str = typer.Option("Visualization", "--output-name", help="Name of the output folder and .Rmd file"),
    prompt: str = typer.Option("", "--prompt", help="Additional instructions for the model"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Where to create the output folder"),
    model: Optional[str] = typer.Option(None, "--model", help="Chat-completion model (default: gpt-4o)"),
) -> None:
    """
    Write an Rmarkdown file with ggplot2 visualizations of a CSV dataset.

    Creates ./<output-name>_<timestamp>/<output-name>.Rmd
    """
    config = _config(output_dir, model)
    outcome = VisualizationPipeline(config).run(_load_csv(data), output_name=output_name, additional_prompt=prompt)
    _report_outcome(outcome)


@app.command()
def summary(data: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV file to summarize")) -> None:
    """Print the dataset summary that would be sent to the model."""
    typer.echo(summarize_dataframe(_load_csv(data)))


@app.command()
def explain(
    analysis: str = typer.Argument(..., help="Analysis results to explain"),
    model: Optional[str] = typer.Option(None, "--model", help="Chat-completion model (default: gpt-4o)"),
) -> None:
    """Explain data analysis results in simple terms."""
    _ask_command(explain_results, analysis, model)


@app.command()
def suggest(
    description: str = typer.Argument(..., help="Short description of the data"),
    model: Optional[str] = typer.Option(None, "--model", help="Chat-completion model (default: gpt-4o)"),
) -> None:
    """Suggest further analyses for a dataset."""
    _ask_command(suggest_further_analysis, description, model)


def _ask_command(fn, text: str, model: Optional[str]) -> None:
    config = _config(None, model)
    try:
        res = fn(text, config)
    except CredentialMissingError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    if res is None:
        raise typer.Exit(code=1)
    typer.echo(res.text.rstrip())
