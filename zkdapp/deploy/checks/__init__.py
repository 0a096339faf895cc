"""
Deployment Check Implementations

Individual readiness checks, run in order by the ReadinessChecker.
"""

from .artifacts import check_build_artifacts, wasm_path
from .integrity import check_wasm_integrity, wasm_md5
from .catalog import check_hub_image

__all__ = [
    "check_build_artifacts",
    "check_wasm_integrity",
    "check_hub_image",
    "wasm_md5",
    "wasm_path",
]
