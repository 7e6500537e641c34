"""
Presentation Context

Responsibilities:
- Derives what a UI or CLI should show for the current workflow state
- Turns validation errors into user-facing messages
- Formats fit results as markdown reports

Owns: WorkflowView, result report formatting
Never: Mutates the workflow
"""

from autoapply.contexts.presentation.markdown_formatter import format_result_markdown
from autoapply.contexts.presentation.view import WorkflowView, build_view, validation_message

__all__ = ["WorkflowView", "build_view", "format_result_markdown", "validation_message"]
