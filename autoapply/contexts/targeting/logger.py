"""
Targeting context logger.

Provides logging helpers with an automatic [target] prefix.
Targeting modules should import from here, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_scoring_start(scorer_name: str, resume_name: str) -> None:
    _log_debug(f"{scorer_name}: scoring {resume_name}")


def log_scoring_result(scorer_name: str, fit_score: int, elapsed_time: float) -> None:
    _log_info(f"{scorer_name}: fit score {fit_score} ({elapsed_time:.2f}s)")


def log_unparseable_response(scorer_name: str, content: str) -> None:
    """Log a model response that did not contain a usable fit object."""
    _log_error(f"{scorer_name}: could not parse fit result from response")
    logger.opt(raw=True).debug(f"\n{'=' * 80}\nRAW RESPONSE:\n{'=' * 80}\n{content}\n")
