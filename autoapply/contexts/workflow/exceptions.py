"""Custom exceptions for the workflow context."""


class WorkflowBusyError(RuntimeError):
    """Raised when intake is edited or the workflow reset while an analysis is in flight."""


class InvalidTransitionError(RuntimeError):
    """
    Raised on a phase change the state machine does not allow.

    Attributes:
        old_phase: Phase the workflow was in
        new_phase: Phase that was requested
    """

    def __init__(self, old_phase, new_phase):
        self.old_phase = old_phase
        self.new_phase = new_phase
        super().__init__(f"Invalid phase transition: {old_phase.value} -> {new_phase.value}")
