import io
import json
from pathlib import Path
from typing import List, Optional

import pytest

from zkdapp.hub import HubError, ImageRecord


WASM_BYTES = bytes([0x00, 0x01, 0x02])


class FakeHubClient:
    """Hub client double that records lookups."""

    def __init__(self, record: Optional[ImageRecord] = None, error: Optional[str] = None):
        self.record = record
        self.error = error
        self.calls: List[str] = []

    def query_image(self, md5: str) -> Optional[ImageRecord]:
        self.calls.append(md5)
        if self.error:
            raise HubError(self.error)
        return self.record


class FakeResponse(io.BytesIO):
    """Context-managed response object compatible with urlopen results."""

    def __init__(self, payload, status: int = 200, reason: str = "OK"):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        super().__init__(body)
        self.status = status
        self.reason = reason


def write_artifacts(output_dir: Path, wasm: bytes = WASM_BYTES, dts: bool = True) -> Path:
    application = output_dir / "application"
    application.mkdir(parents=True, exist_ok=True)
    (application / "application_bg.wasm").write_bytes(wasm)
    if dts:
        (application / "application_bg.wasm.d.ts").write_text("export const memory: WebAssembly.Memory;\n")
    return application


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "build-artifacts"


@pytest.fixture
def built(output_dir: Path) -> Path:
    write_artifacts(output_dir)
    return output_dir
