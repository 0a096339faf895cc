"""
Build Artifact Presence Check

Confirms the compiled WASM image and its type declarations exist.
"""

from pathlib import Path
from typing import List

from ..models import CheckOutcome


APPLICATION_DIR = "application"
WASM_FILENAME = "application_bg.wasm"
REQUIRED_FILES = [
    WASM_FILENAME,
    f"{WASM_FILENAME}.d.ts",
]


def wasm_path(output_dir: Path) -> Path:
    """Location of the WASM image inside a build output directory."""
    return Path(output_dir) / APPLICATION_DIR / WASM_FILENAME


def check_build_artifacts(output_dir: Path) -> CheckOutcome:
    """
    Check that required build artifacts exist.

    Args:
        output_dir: Build output directory (e.g. ./build-artifacts)

    Returns:
        Outcome with one error per missing path
    """
    output_dir = Path(output_dir)
    application_dir = output_dir / APPLICATION_DIR

    if not output_dir.is_dir():
        return CheckOutcome(errors=[f"{output_dir} directory not found"])

    if not application_dir.is_dir():
        return CheckOutcome(errors=[f"{application_dir} directory not found"])

    errors: List[str] = []
    details: List[str] = []

    for filename in REQUIRED_FILES:
        file_path = application_dir / filename
        if not file_path.is_file():
            errors.append(f"Required file missing: {file_path}")
        else:
            size_kb = file_path.stat().st_size / 1024
            details.append(f"{filename} ({size_kb:.2f} KB)")

    return CheckOutcome(errors=errors, details=details)
