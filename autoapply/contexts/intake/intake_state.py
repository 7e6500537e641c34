"""
Intake data structures.

IntakeState is the set of user-supplied inputs an analysis needs: a job
description (pasted text and/or a URL) and a résumé file. The résumé is an
opaque blob; nothing here looks inside it.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from autoapply.contexts.intake.exceptions import (
    MISSING_JOB_INPUT,
    MISSING_RESUME,
    ValidationError,
)

# What the file picker offers. Advisory only: ResumeFile accepts anything.
ACCEPTED_RESUME_EXTENSIONS = (".pdf", ".doc", ".docx")


@dataclass(frozen=True)
class ResumeFile:
    """Uploaded résumé: a display name plus the raw bytes."""

    name: str
    content: bytes = b""
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, file_path: Path, content_type: Optional[str] = None) -> "ResumeFile":
        """Read a résumé from disk, using the file name as display name."""
        file_path = Path(file_path)
        return cls(name=file_path.name, content=file_path.read_bytes(), content_type=content_type)

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def has_accepted_extension(self) -> bool:
        return self.extension in ACCEPTED_RESUME_EXTENSIONS

    def __repr__(self) -> str:
        return f"ResumeFile(name={self.name!r}, size={self.size})"


@dataclass
class IntakeState:
    """
    User-supplied analysis inputs.

    Emptiness is literal: a whitespace-only job description still counts as
    job input.
    """

    job_description_text: str = ""
    job_url: str = ""
    resume_file: Optional[ResumeFile] = field(default=None)

    @property
    def has_job_input(self) -> bool:
        return bool(self.job_description_text) or bool(self.job_url)

    @property
    def has_resume(self) -> bool:
        return self.resume_file is not None

    @property
    def is_complete(self) -> bool:
        return self.has_job_input and self.has_resume

    def validate(self) -> None:
        """
        Check readiness for analysis.

        Job input is checked before the résumé, so intake missing both reports
        the job input.

        Raises:
            ValidationError: "missing job input" or "missing resume"
        """
        if not self.has_job_input:
            raise ValidationError(MISSING_JOB_INPUT)
        if not self.has_resume:
            raise ValidationError(MISSING_RESUME)

    def snapshot(self) -> "IntakeState":
        """Shallow copy handed to scorers (ResumeFile is immutable)."""
        return replace(self)
