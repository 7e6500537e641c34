"""
Markdown formatting for fit results.
"""

from autoapply.contexts.targeting.fit_result import FitResult
from autoapply.utils.timestamp import format_timestamp

TAILORING_HIGHLIGHTS = (
    "Keywords optimized for ATS systems",
    "Skills section enhanced with job-relevant terms",
    "Experience descriptions tailored to match requirements",
)


def format_result_markdown(result: FitResult, resume_name: str = "") -> str:
    """
    Format a fit result as a markdown report.

    Args:
        result: Completed FitResult
        resume_name: Optional résumé file name for the heading

    Returns:
        Markdown report with score, tier message, summary and highlights
    """
    title = f"# Fit Report: {resume_name}" if resume_name else "# Fit Report"
    parts = [
        title,
        "",
        f"**Compatibility Score:** {result.fit_score}/100 ({result.tier.value})",
        "",
        result.tier.message,
        "",
        "## Tailored Résumé Preview",
        "",
        result.tailored_summary,
        "",
    ]
    parts.extend(f"- ✓ {highlight}" for highlight in TAILORING_HIGHLIGHTS)

    footer = []
    if result.scorer:
        footer.append(f"scorer: {result.scorer}")
    if result.scored_at:
        footer.append(f"scored: {format_timestamp(result.scored_at)}")
    if footer:
        parts.extend(["", f"*{' | '.join(footer)}*"])

    return "\n".join(parts)
