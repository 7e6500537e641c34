"""
Default values for the fit workflow configuration.

Merged under any YAML file named by AUTOAPPLY_CONFIG and any dotlist
overrides, so every key below is always present in a loaded config.
"""

from typing import Any, Dict

from autoapply.contexts.targeting.scorers import DEFAULT_TAILORED_SUMMARY

DEFAULT_SCORING = {
    "backend": "simulated",
    "delay_seconds": 3.0,
    "timeout_seconds": 30.0,
    # Inclusive bounds of the simulated fit score
    "min_score": 70,
    "max_score": 100,
    "seed": None,
    "tailored_summary": DEFAULT_TAILORED_SUMMARY,
}

DEFAULT_LLM = {
    "provider": None,  # falls back to LLM_PROVIDER env var
    "model": None,
}


def get_default_config() -> Dict[str, Any]:
    """Get a fresh copy of the complete default config."""
    return {
        "scoring": DEFAULT_SCORING.copy(),
        "llm": DEFAULT_LLM.copy(),
    }
