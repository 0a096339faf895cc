"""
Deployment Readiness Checker

Runs the artifact, integrity and hub checks in order and folds their
outcomes into a single report.
"""

import logging
from pathlib import Path
from typing import Optional

from ..hub import HubClient
from .models import CheckReport
from .checks.artifacts import check_build_artifacts
from .checks.integrity import check_wasm_integrity
from .checks.catalog import check_hub_image


logger = logging.getLogger(__name__)

DOCS_URL = "https://development-recipe.zkwasm.ai/"

NEXT_STEPS = [
    "Switch to deployment branch: git checkout -b zkwasm-deploy",
    "Enable GitHub Actions in repository settings",
    "Configure GitHub Container Registry (GCR) access",
    "Set up package settings for container images",
    "Push to deploy: git push origin zkwasm-deploy",
]

FAILURE_HINT = "Please fix the errors above before deploying."


class ReadinessChecker:
    """
    Orchestrates deployment readiness checks.

    Checks run strictly in sequence:
    - Build artifacts exist
    - WASM image hashes cleanly (MD5)
    - Image is registered on the zkWasm hub
    """

    def __init__(
        self,
        output_dir: Path,
        client: Optional[HubClient] = None,
        project_root: Optional[Path] = None,
    ):
        """
        Initialize the checker.

        Args:
            output_dir: Build output directory holding ``application/``,
                relative paths resolve against the project root
            client: Hub client for the image lookup
            project_root: Project directory (defaults to the current directory)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        output_dir = Path(output_dir)
        if not output_dir.is_absolute():
            output_dir = self.project_root / output_dir
        self.output_dir = output_dir
        self.client = client or HubClient()

    def run_all(self) -> CheckReport:
        """
        Run all readiness checks.

        Returns:
            CheckReport folded from every check outcome
        """
        report = CheckReport()

        logger.debug("Checking build artifacts in %s", self.output_dir)
        report = report.fold(check_build_artifacts(self.output_dir))

        logger.debug("Checking WASM integrity")
        report = report.fold(check_wasm_integrity(self.output_dir))

        logger.debug("Checking zkWasm hub image availability")
        report = report.fold(check_hub_image(report.info, self.client))

        logger.debug(report.summary())
        return report
