"""Custom exceptions for the targeting context."""

from typing import Optional


class ScoringError(Exception):
    """
    Raised when a scoring backend cannot produce a fit result.

    Attributes:
        message: Error description
        scorer: Name of the scorer that failed (if known)
        original_error: The underlying exception (if any)
    """

    def __init__(
        self,
        message: str,
        scorer: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        self.message = message
        self.scorer = scorer
        self.original_error = original_error

        parts = [message]
        if scorer:
            parts.append(f"Scorer: {scorer}")
        if original_error:
            parts.append(f"Original error: {original_error!r}")

        super().__init__("\n".join(parts))
