"""Custom exceptions for the intake context."""

MISSING_JOB_INPUT = "missing job input"
MISSING_RESUME = "missing resume"


class ValidationError(ValueError):
    """
    Raised when intake is not complete enough to start an analysis.

    Attributes:
        reason: Machine-readable reason ("missing job input" or "missing resume")
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnsupportedResumeFormatError(ValueError):
    """Raised when no text extractor exists for a résumé file's extension."""

    def __init__(self, file_name: str, extension: str):
        self.file_name = file_name
        self.extension = extension
        super().__init__(f"Cannot extract text from {file_name} (unsupported format: {extension or 'none'})")
