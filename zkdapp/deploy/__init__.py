"""
Deployment Readiness Module

Checks build artifacts against the zkWasm hub before deployment.
"""

from .models import CheckOutcome, CheckReport, TOTAL_CHECKS
from .checker import DOCS_URL, FAILURE_HINT, NEXT_STEPS, ReadinessChecker

__all__ = [
    "ReadinessChecker",
    "CheckOutcome",
    "CheckReport",
    "TOTAL_CHECKS",
    "DOCS_URL",
    "FAILURE_HINT",
    "NEXT_STEPS",
]
