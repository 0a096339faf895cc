"""
Project Structure Validation

Checks the directories and files every zkWasm project carries.
"""

from pathlib import Path
from typing import List

from ..models import CheckResult, failed, passed


REQUIRED_DIRS = [
    "src",
    "ts",
    "ts/src",
]

REQUIRED_FILES = [
    "Cargo.toml",
    "Makefile",
    "ts/package.json",
    "ts/tsconfig.json",
]


def validate_structure(project_root: Path) -> List[CheckResult]:
    """
    Validate the project layout.

    Args:
        project_root: Project directory

    Returns:
        One check result per required path
    """
    results = []

    for rel in REQUIRED_DIRS:
        if (project_root / rel).is_dir():
            results.append(passed(f"{rel}/", "Directory present"))
        else:
            results.append(failed(f"{rel}/", f"Missing directory: {rel}"))

    for rel in REQUIRED_FILES:
        if (project_root / rel).is_file():
            results.append(passed(rel, "File present"))
        else:
            results.append(failed(rel, f"Missing file: {rel}"))

    return results
