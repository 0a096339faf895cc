"""
Project Check Models

Shared data types for project validation and toolchain checks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class CheckSeverity(str, Enum):
    """Severity levels for check results."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class CheckResult:
    """Result of a single project check."""
    name: str
    passed: bool
    severity: CheckSeverity
    message: str
    details: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        """Display status: PASS, WARN or FAIL."""
        if self.passed:
            return "PASS"
        if self.severity == CheckSeverity.ERROR:
            return "FAIL"
        return "WARN"

    def __str__(self) -> str:
        return f"[{self.status}] {self.name}: {self.message}"


def passed(name: str, message: str) -> CheckResult:
    """Shorthand for a passing check."""
    return CheckResult(name=name, passed=True, severity=CheckSeverity.INFO, message=message)


def failed(name: str, message: str, details: List[str] = None) -> CheckResult:
    """Shorthand for an error-level failure."""
    return CheckResult(
        name=name,
        passed=False,
        severity=CheckSeverity.ERROR,
        message=message,
        details=details or [],
    )


def warned(name: str, message: str, details: List[str] = None) -> CheckResult:
    """Shorthand for a warning-level issue."""
    return CheckResult(
        name=name,
        passed=False,
        severity=CheckSeverity.WARNING,
        message=message,
        details=details or [],
    )
