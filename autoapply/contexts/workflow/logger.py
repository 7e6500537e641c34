"""
Workflow context logger.

Provides logging interface for the workflow context with automatic [workflow] prefix.
All workflow modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from autoapply.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[workflow]"


def setup_workflow_logger(
    log_dir: Optional[Path] = None, scorer_name: str = "", verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for a workflow session.

    Args:
        log_dir: Directory for this session's log file (console only if None)
        scorer_name: Scoring backend, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file, or None

    Example:
        from autoapply.contexts.workflow.logger import setup_workflow_logger

        log_file = setup_workflow_logger(Path("outs/logs/analyze"), scorer_name="simulated")
    """
    return _setup_logger(
        context_name="workflow",
        log_dir=log_dir,
        extra_provenance={"Scorer": scorer_name} if scorer_name else None,
        console_level="DEBUG" if verbose else "INFO",
    )


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level workflow logging helpers


def log_phase_change(change) -> None:
    """Log a PhaseChange at debug level."""
    _log_debug(f"Phase: {change.old_phase.value} -> {change.new_phase.value}")


def log_analysis_start(intake, scorer_name: str) -> None:
    """Log the intake an analysis was started with."""
    _log_info(f"Analyzing {intake.resume_file.name} with {scorer_name}")
    if intake.job_url:
        _log_debug(f"  Job URL: {intake.job_url}")
    _log_debug(f"  Job description: {len(intake.job_description_text)} chars")
    _log_debug(f"  Resume: {intake.resume_file.size} bytes")


def log_analysis_result(result, elapsed_time: float) -> None:
    """Log a successful analysis."""
    _log_success(f"Fit score {result.fit_score}/100 ({result.tier.value}) in {elapsed_time:.2f}s")


def log_analysis_failure(error, elapsed_time: float) -> None:
    """Log a failed analysis."""
    _log_error(f"Analysis failed after {elapsed_time:.2f}s: {error.message}")
    if error.original_error is not None:
        _log_debug(f"  Original error: {error.original_error!r}")


def log_ignored_trigger() -> None:
    _log_warning("Analysis already in progress; ignoring trigger")


def log_listener_error(change) -> None:
    """Log a phase listener's exception with traceback. Call from an except block."""
    logger.exception(
        f"{CONTEXT_PREFIX} Phase listener raised on {change.old_phase.value} -> {change.new_phase.value}"
    )
