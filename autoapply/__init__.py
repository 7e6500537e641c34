"""
AutoApply - headless job-application fit workflow

Drives the intake -> validation -> scoring -> result flow behind the AutoApply
résumé-tailoring page, with a replaceable scoring backend.

Architecture:
- Intake Context: Job description, job URL and résumé file intake
- Targeting Context: Fit scoring backends and score tiers
- Workflow Context: Idle -> Processing -> Scored/Failed state machine
- Presentation Context: View model and result reports for a UI or CLI
"""

__version__ = "0.1.0"
