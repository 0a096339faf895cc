"""
Dependency Validation

Checks that the TypeScript side of the project has its packages installed
and compiles.
"""

import subprocess
from pathlib import Path
from typing import List

from ..models import CheckResult, failed, passed, warned


TSC_COMMAND = ["npx", "tsc", "--noEmit"]
TSC_TIMEOUT = 120


def validate_dependencies(project_root: Path) -> List[CheckResult]:
    """
    Validate installed dependencies.

    Args:
        project_root: Project directory

    Returns:
        List of check results
    """
    node_modules = project_root / "ts" / "node_modules"

    if not node_modules.is_dir():
        return [failed(
            "TypeScript Dependencies",
            "TypeScript dependencies not installed",
            details=["Run: cd ts && npm install"],
        )]

    return [passed("TypeScript Dependencies", "TypeScript dependencies installed")]


def validate_typescript(project_root: Path) -> List[CheckResult]:
    """
    Type-check the TypeScript sources with ``npx tsc --noEmit``.

    Args:
        project_root: Project directory

    Returns:
        List of check results
    """
    name = "TypeScript Compilation"
    ts_dir = project_root / "ts"

    if not ts_dir.is_dir():
        return [warned(name, "Could not check TypeScript compilation", details=["ts/ directory missing"])]

    try:
        result = subprocess.run(
            TSC_COMMAND,
            cwd=ts_dir,
            capture_output=True,
            text=True,
            timeout=TSC_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        return [warned(name, "Could not check TypeScript compilation", details=["tsc timed out"])]
    except OSError as e:
        return [warned(name, "Could not check TypeScript compilation", details=[str(e)])]

    if result.returncode != 0:
        output = (result.stdout or result.stderr or "").strip().splitlines()
        return [failed(name, "TypeScript compilation errors detected", details=output[:5])]

    return [passed(name, "TypeScript compilation check passed")]
