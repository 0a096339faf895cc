"""
Toolchain Validation

Checks the Rust/WASM and Node.js tools needed to build a zkWasm project.
"""

import subprocess
from dataclasses import dataclass
from typing import Dict, List

from ..models import CheckResult, failed, passed


@dataclass(frozen=True)
class Tool:
    """A command-line tool and how to ask it for its version."""
    name: str
    cmd: str
    args: tuple = ("--version",)


REQUIRED_TOOLS = [
    Tool("rust", "rustc"),
    Tool("wasm-pack", "wasm-pack"),
    Tool("wasm-opt", "wasm-opt"),
    Tool("node", "node"),
    Tool("npm", "npm"),
]

INSTALL_INSTRUCTIONS: Dict[str, List[str]] = {
    "rust": [
        "curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh",
        "rustup target add wasm32-unknown-unknown",
    ],
    "wasm-pack": [
        "curl https://rustwasm.github.io/wasm-pack/installer/init.sh -sSf | sh",
    ],
    "wasm-opt": [
        "Install the binaryen toolkit",
        "On macOS: brew install binaryen",
        "On Ubuntu: sudo apt install binaryen",
    ],
    "node": [
        "Install Node.js from https://nodejs.org/",
        "Or use a version manager like nvm",
    ],
    "npm": [
        "npm comes with Node.js installation",
    ],
}

TOOL_TIMEOUT = 10


def validate_toolchain(tools: List[Tool] = None) -> List[CheckResult]:
    """
    Check that each required tool is installed.

    Args:
        tools: Tools to check (defaults to REQUIRED_TOOLS)

    Returns:
        One check result per tool
    """
    return [_check_tool(tool) for tool in (tools or REQUIRED_TOOLS)]


def _check_tool(tool: Tool) -> CheckResult:
    """Run ``<cmd> --version`` and report the first line of output."""
    details = INSTALL_INSTRUCTIONS.get(tool.name, [f"Please install {tool.name} manually"])

    try:
        result = subprocess.run(
            [tool.cmd, *tool.args],
            capture_output=True,
            text=True,
            timeout=TOOL_TIMEOUT,
        )
    except FileNotFoundError:
        return failed(tool.name, "not found", details=details)
    except OSError as e:
        return failed(tool.name, f"'{tool.cmd}' could not be run: {e}", details=details)
    except subprocess.TimeoutExpired:
        return failed(tool.name, f"'{tool.cmd}' timed out", details=details)

    if result.returncode != 0:
        return failed(tool.name, "not found", details=details)

    output = (result.stdout or result.stderr or "").strip()
    version = output.splitlines()[0] if output else "unknown version"
    return passed(tool.name, version)
