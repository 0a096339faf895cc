"""
Project Checker

Main orchestrator for project validation and toolchain checks.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .models import CheckResult, CheckSeverity
from .checks.structure import validate_structure
from .checks.project_files import validate_project_files
from .checks.dependencies import validate_dependencies, validate_typescript
from .checks.toolchain import validate_toolchain


@dataclass
class ValidationResult:
    """Complete validation results."""
    checks: List[CheckResult]
    project_root: Optional[Path] = None

    @property
    def passed(self) -> bool:
        """Check if all critical checks passed."""
        return not self.errors

    @property
    def errors(self) -> List[CheckResult]:
        """Get all error-level failures."""
        return [c for c in self.checks if not c.passed and c.severity == CheckSeverity.ERROR]

    @property
    def warnings(self) -> List[CheckResult]:
        """Get all warning-level issues."""
        return [c for c in self.checks if not c.passed and c.severity == CheckSeverity.WARNING]

    def summary(self) -> str:
        """Get summary string."""
        total = len(self.checks)
        passed = len([c for c in self.checks if c.passed])
        errors = len(self.errors)
        warnings = len(self.warnings)

        if errors > 0:
            status = "FAILED"
        elif warnings > 0:
            status = "PASSED with warnings"
        else:
            status = "PASSED"

        return f"{status}: {passed}/{total} checks passed ({errors} errors, {warnings} warnings)"


class ProjectChecker:
    """
    Orchestrates project validation checks.

    Validates that:
    - Required directories and files exist
    - Cargo.toml, package.json, tsconfig.json and zkwasm.config.json are sane
    - TypeScript dependencies are installed
    - TypeScript sources compile (npx tsc --noEmit)
    """

    def __init__(self, project_root: Optional[Path] = None, typecheck: bool = True):
        """
        Initialize the checker.

        Args:
            project_root: Project directory (defaults to the current directory)
            typecheck: Run the TypeScript compilation check
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.typecheck = typecheck

    def run_all(self) -> ValidationResult:
        """
        Run all project validation checks.

        Returns:
            ValidationResult with all check results
        """
        checks = []
        checks.extend(validate_structure(self.project_root))
        checks.extend(validate_project_files(self.project_root))
        checks.extend(validate_dependencies(self.project_root))
        if self.typecheck:
            checks.extend(validate_typescript(self.project_root))
        return ValidationResult(checks=checks, project_root=self.project_root)

    def run_toolchain(self) -> ValidationResult:
        """
        Check required command-line tools.

        Returns:
            ValidationResult with one result per tool
        """
        return ValidationResult(checks=validate_toolchain())

    def run_check(self, check_name: str) -> Optional[List[CheckResult]]:
        """
        Run a specific check group by name.

        Args:
            check_name: structure, files, dependencies or toolchain

        Returns:
            List of results or None if check not found
        """
        check_map: Dict[str, Callable[[], List[CheckResult]]] = {
            "structure": lambda: validate_structure(self.project_root),
            "files": lambda: validate_project_files(self.project_root),
            "dependencies": lambda: validate_dependencies(self.project_root),
            "typescript": lambda: validate_typescript(self.project_root),
            "toolchain": validate_toolchain,
        }

        if check_name in check_map:
            return check_map[check_name]()
        return None
