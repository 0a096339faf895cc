import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from conftest import write_artifacts

from zkdapp import cli as cli_module
from zkdapp.cli import cli
from zkdapp.hub import HubClient, ImageRecord


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def hub(monkeypatch):
    """Patch HubClient.query_image with a canned record."""
    state = {"record": None, "calls": [], "client": None}

    def fake_query(self, md5):
        state["calls"].append(md5)
        state["client"] = self
        return state["record"]

    monkeypatch.setattr(HubClient, "query_image", fake_query)
    return state


def test_check_passes_when_image_registered(runner, hub, tmp_path: Path) -> None:
    write_artifacts(tmp_path / "build-artifacts")
    hub["record"] = ImageRecord(checksum="abc")

    result = runner.invoke(cli, ["check", "--project", str(tmp_path), "-v"])

    assert result.exit_code == 0, result.output
    assert "All deployment checks passed!" in result.output
    assert "git checkout -b zkwasm-deploy" in result.output


def test_check_fails_when_artifacts_missing(runner, hub, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["check", "--project", str(tmp_path)])

    assert result.exit_code == 1
    assert "Deployment readiness check failed!" in result.output
    assert hub["calls"] == []


def test_check_honours_configured_output_dir(runner, hub, tmp_path: Path) -> None:
    write_artifacts(tmp_path / "out")
    (tmp_path / "zkwasm.config.json").write_text(json.dumps({"build": {"outputDir": "out"}}))
    hub["record"] = ImageRecord(checksum="abc")

    result = runner.invoke(cli, ["check", "--project", str(tmp_path)])

    assert result.exit_code == 0, result.output


def test_check_json_output(runner, hub, tmp_path: Path) -> None:
    write_artifacts(tmp_path / "build-artifacts")

    result = runner.invoke(cli, ["check", "--project", str(tmp_path), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["success"] is False
    assert len(payload["errors"]) == 1
    assert "not found" in payload["errors"][0]
    assert payload["info"]["wasm_size"] == 3


def test_check_endpoint_from_env(runner, hub, tmp_path: Path) -> None:
    write_artifacts(tmp_path / "build-artifacts")

    runner.invoke(
        cli,
        ["check", "--project", str(tmp_path)],
        env={"ZKWASM_HUB_ENDPOINT": "http://localhost:9000/", "ZKWASM_HUB_TIMEOUT": "3"},
    )

    assert hub["client"].endpoint == "http://localhost:9000"
    assert hub["client"].timeout == 3


def test_check_invalid_config_exits(runner, hub, tmp_path: Path) -> None:
    (tmp_path / "zkwasm.config.json").write_text("{broken")

    result = runner.invoke(cli, ["check", "--project", str(tmp_path)])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_validate_empty_project_fails(runner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["validate", "--project", str(tmp_path)])

    assert result.exit_code == 1
    assert "FAILED" in result.output


def test_doctor_reports_missing_tools(runner, monkeypatch) -> None:
    from zkdapp.preflight.checker import ValidationResult
    from zkdapp.preflight.models import failed, passed

    def fake_toolchain(self):
        return ValidationResult(checks=[passed("rust", "rustc 1.80.0"), failed("wasm-opt", "not found")])

    monkeypatch.setattr(cli_module.ProjectChecker, "run_toolchain", fake_toolchain)

    result = runner.invoke(cli, ["doctor"])

    assert result.exit_code == 1
    assert "Missing tools: wasm-opt" in result.output


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "zkdapp" in result.output


def test_check_json_reports_config_error(runner, hub, tmp_path: Path) -> None:
    (tmp_path / "zkwasm.config.json").write_text("{broken")

    result = runner.invoke(cli, ["check", "--project", str(tmp_path), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["success"] is False
    assert len(payload["errors"]) == 1
    assert "Invalid JSON" in payload["errors"][0]
    assert hub["calls"] == []


def test_validate_skip_typecheck(runner, monkeypatch, tmp_path: Path) -> None:
    import subprocess

    def fake_run(cmd, **kwargs):
        raise AssertionError("tsc should not run")

    monkeypatch.setattr(subprocess, "run", fake_run)
    (tmp_path / "ts").mkdir()

    result = runner.invoke(cli, ["validate", "--project", str(tmp_path), "--skip-typecheck"])

    assert result.exit_code == 1
    assert "TypeScript Compilation" not in result.output
