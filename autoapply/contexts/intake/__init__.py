"""
Intake Context

Responsibilities:
- Holds the user-supplied job description text, job URL and résumé file
- Decides whether intake is complete enough to run an analysis
- Extracts résumé text for scorers that need it

Owns: IntakeState, ResumeFile, readiness validation
Never: Scores a résumé or changes workflow phase
"""

from autoapply.contexts.intake.exceptions import UnsupportedResumeFormatError, ValidationError
from autoapply.contexts.intake.intake_state import (
    ACCEPTED_RESUME_EXTENSIONS,
    IntakeState,
    ResumeFile,
)

__all__ = [
    "ACCEPTED_RESUME_EXTENSIONS",
    "IntakeState",
    "ResumeFile",
    "UnsupportedResumeFormatError",
    "ValidationError",
]
