"""
Project Check Module

Validates project structure and the local toolchain.
"""

from .models import CheckResult, CheckSeverity
from .checker import ProjectChecker, ValidationResult

__all__ = [
    "ProjectChecker",
    "ValidationResult",
    "CheckResult",
    "CheckSeverity",
]
