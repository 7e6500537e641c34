"""Build the configured scoring backend."""

from typing import Any, Mapping

from autoapply.contexts.targeting.llm_scorer import LLMScorer
from autoapply.contexts.targeting.scorers import FitScorer, SimulatedScorer
from autoapply.utils.llm import get_provider

SCORER_BACKENDS = ("simulated", "llm")


def get_scorer(config: Mapping[str, Any]) -> FitScorer:
    """
    Get the scorer named by config.scoring.backend.

    Args:
        config: Workflow config with `scoring` and `llm` sections

    Raises:
        ValueError: If the backend is unknown
    """
    backend = config["scoring"]["backend"]

    if backend == "simulated":
        return SimulatedScorer.from_config(config["scoring"])
    elif backend == "llm":
        llm = config["llm"]
        return LLMScorer(get_provider(llm.get("provider"), llm.get("model")))
    else:
        raise ValueError(f"Unknown scoring backend: {backend}. Use one of {SCORER_BACKENDS}")
