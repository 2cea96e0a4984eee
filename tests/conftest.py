import sys
from pathlib import Path

# Add project root to Python path FIRST
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

# Now import after path is set
import pytest
from loguru import logger


class FakeExecutor:
    """Stands in for HandBrakeCLI: records calls and optionally writes the output file."""

    def __init__(self, produce_output: bool = True, return_code: int = 0):
        self.produce_output = produce_output
        self.return_code = return_code
        self.calls = []

    def transcode(self, source_path: Path, dest_path: Path):
        self.calls.append((source_path, dest_path))
        if self.produce_output:
            dest_path.write_bytes(b"converted")
        return self.return_code


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def failing_executor():
    return FakeExecutor(produce_output=False, return_code=3)


@pytest.fixture
def roots(tmp_path):
    """Source, log and archive roots, as three sibling directories."""
    source = tmp_path / "recordings"
    log = tmp_path / "markers"
    archive = tmp_path / "archive"
    source.mkdir()
    return source.resolve(), log.resolve(), archive.resolve()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="TRACE")
    yield messages
    logger.remove(handler_id)


def make_recording(directory: Path, name: str, sidecar: bool = False) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(b"\x47" * 188)
    if sidecar:
        (directory / f"{path.stem}.log").write_text("recorder log\n", encoding="utf-8")
    return path
