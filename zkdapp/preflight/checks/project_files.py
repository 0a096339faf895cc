"""
Project File Validation

Validates Cargo.toml, the TypeScript package manifests and the optional
zkwasm.config.json.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List

from ...config import CONFIG_FILENAME
from ..models import CheckResult, failed, passed, warned


CDYLIB_PATTERN = re.compile(r'crate-type\s*=\s*\[[^\]]*"cdylib"')
RECOMMENDED_TS_TARGETS = {"ES2020", "ES2021", "ES2022", "ESNEXT"}


def validate_project_files(project_root: Path) -> List[CheckResult]:
    """
    Validate project configuration files.

    Args:
        project_root: Project directory

    Returns:
        List of check results
    """
    results = []
    results.extend(_check_cargo_toml(project_root / "Cargo.toml"))
    results.extend(_check_package_json(project_root / "ts" / "package.json"))
    results.extend(_check_tsconfig(project_root / "ts" / "tsconfig.json"))
    results.extend(_check_zkwasm_config(project_root / CONFIG_FILENAME))
    return results


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _check_cargo_toml(path: Path) -> List[CheckResult]:
    """Check Cargo.toml declares a package built as cdylib."""
    name = "Cargo.toml"

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        return [failed(name, f"Failed to read Cargo.toml: {e}")]

    results = []
    if "[package]" not in content:
        results.append(failed(name, "Cargo.toml missing [package] section"))
    if not CDYLIB_PATTERN.search(content):
        results.append(warned(
            name,
            'Cargo.toml should include crate-type = ["cdylib"] for WASM',
            details=["Add under [lib]: crate-type = [\"cdylib\"]"],
        ))

    return results or [passed(name, "Cargo.toml is valid")]


def _check_package_json(path: Path) -> List[CheckResult]:
    """Check ts/package.json has a name and scripts."""
    name = "ts/package.json"

    try:
        package = _read_json(path)
    except (OSError, ValueError) as e:
        return [failed(name, f"Failed to read package.json: {e}")]

    results = []
    if not package.get("name"):
        results.append(failed(name, "package.json missing name field"))
    if not package.get("scripts"):
        results.append(warned(name, "package.json missing scripts section"))

    return results or [passed(name, "package.json is valid")]


def _check_tsconfig(path: Path) -> List[CheckResult]:
    """Check ts/tsconfig.json compiler options."""
    name = "ts/tsconfig.json"

    try:
        tsconfig = _read_json(path)
    except (OSError, ValueError) as e:
        return [failed(name, f"Failed to read tsconfig.json: {e}")]

    compiler_options = tsconfig.get("compilerOptions")
    if not isinstance(compiler_options, dict):
        return [failed(name, "tsconfig.json missing compilerOptions")]

    target = compiler_options.get("target")
    if target and str(target).upper() not in RECOMMENDED_TS_TARGETS:
        return [warned(
            name,
            f'tsconfig.json target "{target}" may not be optimal for zkWasm',
            details=["Recommended targets: ES2020, ES2021, ES2022, ESNext"],
        )]

    return [passed(name, "tsconfig.json is valid")]


def _check_zkwasm_config(path: Path) -> List[CheckResult]:
    """Check the optional zkwasm.config.json."""
    name = CONFIG_FILENAME

    if not path.exists():
        return [warned(name, f"{CONFIG_FILENAME} not found (optional)")]

    try:
        config = _read_json(path)
    except (OSError, ValueError) as e:
        return [failed(name, f"Failed to read {CONFIG_FILENAME}: {e}")]

    if not config.get("build"):
        return [warned(name, f"{CONFIG_FILENAME} missing build section")]

    return [passed(name, f"{CONFIG_FILENAME} is valid")]
