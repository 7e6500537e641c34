"""
View model for the fit workflow.

build_view() reads a FitWorkflow and returns everything a page or CLI needs
to render it: whether the trigger is enabled, button and drop-zone labels,
the score and its tier, and any error. It never mutates the workflow.
"""

from dataclasses import dataclass, field
from typing import Optional

from autoapply.contexts.intake.exceptions import MISSING_JOB_INPUT, MISSING_RESUME, ValidationError
from autoapply.contexts.intake.intake_state import ACCEPTED_RESUME_EXTENSIONS
from autoapply.contexts.presentation.markdown_formatter import TAILORING_HIGHLIGHTS
from autoapply.contexts.workflow.fit_workflow import FitWorkflow, WorkflowPhase

ANALYZE_LABEL = "Analyze & Tailor"
PROCESSING_LABEL = "Analyzing..."
EMPTY_DROP_ZONE_LABEL = "Drop your résumé here"
EMPTY_DROP_ZONE_HINT = "or click to browse (PDF, DOC, DOCX)"
UPLOADED_HINT = "File uploaded successfully"

VALIDATION_MESSAGES = {
    MISSING_JOB_INPUT: "Please provide either a job description or job URL",
    MISSING_RESUME: "Please upload your résumé",
}


def validation_message(error: ValidationError) -> str:
    """User-facing blocking message for a validation failure."""
    return VALIDATION_MESSAGES.get(error.reason, str(error))


@dataclass(frozen=True)
class WorkflowView:
    """Snapshot of what to render for a workflow."""

    phase: WorkflowPhase
    job_description_text: str
    job_url: str
    can_analyze: bool
    analyze_label: str
    resume_label: str
    resume_hint: str
    file_type_warning: Optional[str] = None
    fit_score: Optional[int] = None
    tier: Optional[str] = None
    tier_message: Optional[str] = None
    tier_color: Optional[str] = None
    tailored_summary: Optional[str] = None
    highlights: tuple = field(default_factory=tuple)
    error_message: Optional[str] = None

    @property
    def has_result(self) -> bool:
        return self.fit_score is not None


def build_view(workflow: FitWorkflow) -> WorkflowView:
    """Build the view model for the workflow's current state."""
    intake = workflow.intake
    resume = intake.resume_file

    if resume is not None:
        resume_label, resume_hint = resume.name, UPLOADED_HINT
    else:
        resume_label, resume_hint = EMPTY_DROP_ZONE_LABEL, EMPTY_DROP_ZONE_HINT

    file_type_warning = None
    if resume is not None and not resume.has_accepted_extension:
        accepted = ", ".join(ext.lstrip(".").upper() for ext in ACCEPTED_RESUME_EXTENSIONS)
        file_type_warning = f"{resume.name} is not a {accepted} file"

    score_fields = {}
    if workflow.phase is WorkflowPhase.SCORED and workflow.result is not None:
        result = workflow.result
        score_fields = dict(
            fit_score=result.fit_score,
            tier=result.tier.value,
            tier_message=result.tier.message,
            tier_color=result.tier.color,
            tailored_summary=result.tailored_summary,
            highlights=TAILORING_HIGHLIGHTS,
        )

    error_message = None
    if workflow.phase is WorkflowPhase.FAILED and workflow.error is not None:
        error_message = f"Analysis failed: {workflow.error.message}. Please try again."

    return WorkflowView(
        phase=workflow.phase,
        job_description_text=intake.job_description_text,
        job_url=intake.job_url,
        can_analyze=workflow.can_analyze,
        analyze_label=PROCESSING_LABEL if workflow.is_processing else ANALYZE_LABEL,
        resume_label=resume_label,
        resume_hint=resume_hint,
        file_type_warning=file_type_warning,
        error_message=error_message,
        **score_fields,
    )
