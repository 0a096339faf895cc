"""
WASM Integrity Check

Computes the MD5 digest the zkWasm hub uses to identify images.
"""

import hashlib
import logging
from pathlib import Path

from ..models import CheckOutcome
from .artifacts import wasm_path


logger = logging.getLogger(__name__)


def wasm_md5(data: bytes) -> str:
    """Uppercase hex MD5 of a WASM image, as the hub expects it."""
    # MD5 matches the hub's image identifiers; not a security boundary.
    return hashlib.md5(data, usedforsecurity=False).hexdigest().upper()


def check_wasm_integrity(output_dir: Path) -> CheckOutcome:
    """
    Hash the WASM image.

    Args:
        output_dir: Build output directory

    Returns:
        Outcome carrying ``md5_hash`` and ``wasm_size`` in info on success
    """
    path = wasm_path(output_dir)

    if not path.is_file():
        return CheckOutcome(errors=["WASM file not found for integrity check"])

    try:
        data = path.read_bytes()
    except OSError as e:
        return CheckOutcome(errors=[f"Failed to calculate WASM hash: {e}"])

    md5_hash = wasm_md5(data)
    logger.debug("MD5 of %s is %s (%d bytes)", path, md5_hash, len(data))

    return CheckOutcome(
        info={"md5_hash": md5_hash, "wasm_size": len(data)},
        details=[
            f"WASM MD5: {md5_hash}",
            f"WASM Size: {len(data) / 1024:.2f} KB",
        ],
    )
