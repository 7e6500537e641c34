"""
Workflow configuration loading.

Layers, later overriding earlier:
1. Code defaults (defaults.py)
2. YAML file at config_path, or AUTOAPPLY_CONFIG from the environment / .env
3. Dotlist overrides (e.g., ["scoring.delay_seconds=0", "scoring.seed=7"])

Examples:
    >>> config = load_workflow_config()
    >>> config.scoring.delay_seconds
    3.0

    >>> config = load_workflow_config(overrides=["scoring.backend=llm", "llm.provider=anthropic"])
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from autoapply.contexts.targeting.factory import SCORER_BACKENDS
from autoapply.contexts.targeting.fit_result import MAX_FIT_SCORE, MIN_FIT_SCORE
from autoapply.contexts.workflow.defaults import get_default_config

load_dotenv()
CONFIG_ENV_VAR = "AUTOAPPLY_CONFIG"


def load_workflow_config(
    config_path: Optional[Path] = None,
    overrides: Optional[List[str]] = None,
) -> DictConfig:
    """
    Load the workflow config.

    Args:
        config_path: Optional YAML file (defaults to AUTOAPPLY_CONFIG env variable, if set)
        overrides: Optional dotlist overrides applied last

    Returns:
        Validated DictConfig with `scoring` and `llm` sections

    Raises:
        ValueError: If any value is out of range
    """
    config = OmegaConf.create(get_default_config())

    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.getenv(CONFIG_ENV_VAR))

    if config_path is not None:
        config = OmegaConf.merge(config, OmegaConf.load(config_path))

    if overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(list(overrides)))

    validate_workflow_config(config)
    return config


def validate_workflow_config(config: DictConfig) -> None:
    """Raise ValueError on out-of-range config values."""
    scoring = config.scoring

    if scoring.backend not in SCORER_BACKENDS:
        raise ValueError(f"scoring.backend must be one of {SCORER_BACKENDS}, got: {scoring.backend}")

    if not MIN_FIT_SCORE <= scoring.min_score <= scoring.max_score <= MAX_FIT_SCORE:
        raise ValueError(
            f"scoring.min_score/max_score must satisfy "
            f"{MIN_FIT_SCORE} <= min <= max <= {MAX_FIT_SCORE}, "
            f"got [{scoring.min_score}, {scoring.max_score}]"
        )

    if scoring.delay_seconds < 0:
        raise ValueError(f"scoring.delay_seconds must be >= 0, got: {scoring.delay_seconds}")

    if scoring.timeout_seconds is not None and scoring.timeout_seconds <= 0:
        raise ValueError(
            f"scoring.timeout_seconds must be positive or null, got: {scoring.timeout_seconds}"
        )
