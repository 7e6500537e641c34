"""
Shared utilities for AutoApply.

Common functionality used across contexts:
- Logger setup
- Timestamps
- LLM provider access
"""

from autoapply.utils.timestamp import format_timestamp, now_exact

__all__ = ["format_timestamp", "now_exact"]
