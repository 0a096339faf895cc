"""
Project Check Implementations

Individual check modules for different validation areas.
"""

from .structure import validate_structure
from .project_files import validate_project_files
from .dependencies import validate_dependencies, validate_typescript
from .toolchain import validate_toolchain

__all__ = [
    "validate_structure",
    "validate_project_files",
    "validate_dependencies",
    "validate_typescript",
    "validate_toolchain",
]
