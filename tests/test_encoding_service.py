import sys
from pathlib import Path

from batch_transcoder.config import encoder as encoder_config
from batch_transcoder.config.encoder import (
    HANDBRAKE_CLI_UNIX,
    HANDBRAKE_CLI_WINDOWS,
    ExecutorConfig,
    default_binary_path,
    resolve_executor_config,
)
from batch_transcoder.services.encoding_service import TranscodeExecutor
from batch_transcoder.utils.module_updater import Modules


def test_build_command_fills_in_paths():
    config = ExecutorConfig(binary_path=Path("/opt/HandBrakeCLI"))

    cmd = config.build_command(Path("/rec/A.ts"), Path("/rec/A.m4v"))

    assert cmd == [
        "/opt/HandBrakeCLI",
        "-i", "/rec/A.ts",
        "-o", "/rec/A.m4v",
        "-f", "av_mp4",
        "-e", "x265",
        "--all-subtitles",
        "--optimize",
    ]


def test_default_binary_path_per_platform():
    assert default_binary_path("linux") == HANDBRAKE_CLI_UNIX
    assert default_binary_path("darwin") == HANDBRAKE_CLI_UNIX
    assert default_binary_path("win32") == HANDBRAKE_CLI_WINDOWS


def test_resolve_prefers_command_line(monkeypatch):
    monkeypatch.setattr(encoder_config, "ENCODER_PATH", Path("/from/yaml/HandBrakeCLI"))

    config = resolve_executor_config(cli_encoder_path="/from/cli/HandBrakeCLI", show_output=True)

    assert config.binary_path == Path("/from/cli/HandBrakeCLI")
    assert config.show_output is True


def test_resolve_falls_back_to_user_config_then_platform(monkeypatch):
    monkeypatch.setattr(encoder_config, "ENCODER_PATH", Path("/from/yaml/HandBrakeCLI"))
    assert resolve_executor_config().binary_path == Path("/from/yaml/HandBrakeCLI")

    monkeypatch.setattr(encoder_config, "ENCODER_PATH", None)
    assert resolve_executor_config(platform="win32").binary_path == HANDBRAKE_CLI_WINDOWS


def python_encoder(script: str) -> ExecutorConfig:
    """An 'encoder' that is really the running interpreter executing `script` with the destination as argv[1]."""
    return ExecutorConfig(
        binary_path=Path(sys.executable),
        argument_template=["-c", script, "{dest}"],
    )


def test_transcode_runs_the_encoder(tmp_path):
    dest = tmp_path / "A.m4v"
    executor = TranscodeExecutor(python_encoder("import sys; open(sys.argv[1], 'w').write('x')"))

    return_code = executor.transcode(tmp_path / "A.ts", dest)

    assert return_code == 0
    assert dest.read_text() == "x"


def test_transcode_returns_the_exit_code_without_judging_it(tmp_path):
    executor = TranscodeExecutor(python_encoder("import sys; sys.exit(4)"))

    assert executor.transcode(tmp_path / "A.ts", tmp_path / "A.m4v") == 4


def test_transcode_with_missing_binary_returns_none(tmp_path):
    executor = TranscodeExecutor(ExecutorConfig(binary_path=tmp_path / "no-such-encoder"))

    assert executor.transcode(tmp_path / "A.ts", tmp_path / "A.m4v") is None


def test_verify_encoder(tmp_path):
    assert Modules.verify_encoder(ExecutorConfig(binary_path=Path(sys.executable))) is True
    assert Modules.verify_encoder(ExecutorConfig(binary_path=tmp_path / "missing")) is False
