"""
Workflow Context

Responsibilities:
- Runs the Idle -> Processing -> Scored/Failed lifecycle of a fit analysis
- Guards intake against edits while an analysis is in flight
- Loads workflow configuration

Owns: FitWorkflow, WorkflowPhase, workflow config
Never: Computes fit scores itself or renders results
"""

from autoapply.contexts.workflow.config import load_workflow_config
from autoapply.contexts.workflow.exceptions import InvalidTransitionError, WorkflowBusyError
from autoapply.contexts.workflow.fit_workflow import (
    FitWorkflow,
    PhaseChange,
    WorkflowPhase,
    run_analysis,
)

__all__ = [
    "FitWorkflow",
    "InvalidTransitionError",
    "PhaseChange",
    "WorkflowBusyError",
    "WorkflowPhase",
    "load_workflow_config",
    "run_analysis",
]
