"""
Deployment Check Models

Outcome of individual readiness checks and the report they fold into.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


TOTAL_CHECKS = 3


@dataclass(frozen=True)
class CheckOutcome:
    """Result of a single readiness check."""
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    info: Dict[str, Any] = field(default_factory=dict)
    details: List[str] = field(default_factory=list)  # verbose display lines

    @property
    def passed(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class CheckReport:
    """
    Aggregate result of a readiness run.

    Reports are immutable; ``fold`` returns a new report with the
    outcome's warnings, errors and details appended and its info merged.
    """
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    info: Dict[str, Any] = field(default_factory=dict)
    details: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True iff no check recorded an error."""
        return not self.errors

    @property
    def passed_count(self) -> int:
        """Number of checks considered passed."""
        return max(0, TOTAL_CHECKS - len(self.errors))

    def fold(self, outcome: CheckOutcome) -> "CheckReport":
        """Return a new report including the given outcome."""
        return CheckReport(
            warnings=[*self.warnings, *outcome.warnings],
            errors=[*self.errors, *outcome.errors],
            info={**self.info, **outcome.info},
            details=[*self.details, *outcome.details],
        )

    def summary(self) -> str:
        """Get summary string."""
        status = "PASSED" if self.success else "FAILED"
        return (
            f"{status}: {self.passed_count}/{TOTAL_CHECKS} checks passed "
            f"({len(self.errors)} errors, {len(self.warnings)} warnings)"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "info": dict(self.info),
        }
