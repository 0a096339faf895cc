"""
zkdapp - command-line companion for zkWasm application projects.

Checks deployment readiness of build artifacts against the zkWasm hub,
validates project structure and verifies the local toolchain.
"""

__version__ = "1.0.18"
