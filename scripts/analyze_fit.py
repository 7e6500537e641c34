#!/usr/bin/env python3
"""
Analyze how well a résumé fits a job description.

Usage:
    python scripts/analyze_fit.py resume.pdf --job-file data/jobs/MLEng_AcmeCorp.md
    python scripts/analyze_fit.py resume.pdf --job-url https://company.com/job-posting
    python scripts/analyze_fit.py resume.pdf --job-text "Senior Engineer..." --delay 0 --seed 7
    python scripts/analyze_fit.py resume.txt --job-file job.md --backend llm --json
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from autoapply.contexts.intake import ResumeFile, ValidationError
from autoapply.contexts.presentation import build_view, format_result_markdown, validation_message
from autoapply.contexts.workflow import FitWorkflow, load_workflow_config, run_analysis
from autoapply.contexts.workflow.logger import setup_workflow_logger

load_dotenv()

app = typer.Typer(add_completion=False, help="Score a résumé against a job description.")


@app.command()
def main(
    resume: Path = typer.Argument(..., exists=True, dir_okay=False, help="Résumé file (PDF, DOC, DOCX)"),
    job_file: Optional[Path] = typer.Option(
        None, "--job-file", "-f", exists=True, dir_okay=False, help="File containing the job description"
    ),
    job_text: str = typer.Option("", "--job-text", "-t", help="Job description text"),
    job_url: str = typer.Option("", "--job-url", "-u", help="Job posting URL"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Scoring backend: simulated or llm"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the simulated scorer"),
    delay: Optional[float] = typer.Option(None, "--delay", help="Simulated scoring delay in seconds"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, help="Workflow config YAML"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Write a DEBUG log file here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Run one fit analysis and print the result."""
    overrides: List[str] = []
    if backend is not None:
        overrides.append(f"scoring.backend={backend}")
    if seed is not None:
        overrides.append(f"scoring.seed={seed}")
    if delay is not None:
        overrides.append(f"scoring.delay_seconds={delay}")

    try:
        workflow_config = load_workflow_config(config, overrides)
        setup_workflow_logger(log_dir, scorer_name=workflow_config.scoring.backend, verbose=verbose)
        workflow = FitWorkflow(config=workflow_config)
    except (ValueError, ImportError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if job_file is not None:
        job_text = job_file.read_text(encoding="utf-8")
    workflow.set_job_description(job_text)
    workflow.set_job_url(job_url)
    workflow.set_resume_file(ResumeFile.from_path(resume))

    view = build_view(workflow)
    if view.file_type_warning:
        typer.secho(f"Warning: {view.file_type_warning}", fg=typer.colors.YELLOW, err=True)

    try:
        result = asyncio.run(run_analysis(workflow))
    except ValidationError as e:
        typer.secho(validation_message(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if result is None:
        typer.secho(build_view(workflow).error_message, fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    typer.echo(format_result_markdown(result, resume_name=resume.name))
    typer.secho(
        f"\n{result.fit_score}/100 - {result.tier.value}",
        fg=result.tier.color,
        bold=True,
    )


if __name__ == "__main__":
    app()
