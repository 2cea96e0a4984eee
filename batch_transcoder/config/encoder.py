"""
Configuration settings for the external encoder (HandBrakeCLI).

The executable lives in a different place on each host platform. The choice is
made once, at startup, by `resolve_executor_config`, which produces a single
`ExecutorConfig` consumed by the transcode service.
"""
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .common import ENCODER_PATH

# --- Encoder Locations ---
HANDBRAKE_CLI_UNIX = Path("/usr/bin/HandBrakeCLI")
HANDBRAKE_CLI_WINDOWS = Path(r"C:\Program Files\HandBrake\HandBrakeCLI.exe")

# --- Encoder Arguments ---
# `{source}` and `{dest}` are substituted per candidate.
OUTPUT_FORMAT = "av_mp4"
VIDEO_ENCODER = "x265"
ARGUMENT_TEMPLATE = (
    "-i", "{source}",
    "-o", "{dest}",
    "-f", OUTPUT_FORMAT,
    "-e", VIDEO_ENCODER,
    "--all-subtitles",
    "--optimize",
)


@dataclass(frozen=True)
class ExecutorConfig:
    """
    Everything the transcode service needs to launch the encoder.

    Attributes:
        binary_path: Absolute path (or bare command name) of the encoder.
        argument_template: Arguments with `{source}` / `{dest}` placeholders.
        show_output: If True, the encoder's stdout/stderr go to the terminal.
    """

    binary_path: Path
    argument_template: List[str] = field(default_factory=lambda: list(ARGUMENT_TEMPLATE))
    show_output: bool = False

    def build_command(self, source: Path, dest: Path) -> List[str]:
        return [str(self.binary_path)] + [
            arg.format(source=str(source), dest=str(dest))
            for arg in self.argument_template
        ]


def default_binary_path(platform: Optional[str] = None) -> Path:
    platform = platform or sys.platform
    if platform == "win32":
        return HANDBRAKE_CLI_WINDOWS
    return HANDBRAKE_CLI_UNIX


def resolve_executor_config(
    cli_encoder_path: Optional[str] = None,
    show_output: bool = False,
    platform: Optional[str] = None,
) -> ExecutorConfig:
    """
    Resolves the encoder binary and arguments for this host.

    Precedence: the `--encoder-path` option, then `paths.handbrake_cli` from
    `config.user.yaml`, then the platform default.
    """
    if cli_encoder_path:
        binary_path = Path(cli_encoder_path)
        source = "command line"
    elif ENCODER_PATH:
        binary_path = ENCODER_PATH
        source = "user config"
    else:
        binary_path = default_binary_path(platform)
        source = f"platform default ({platform or sys.platform})"
    logger.debug(f"Using encoder '{binary_path}' from {source}.")
    return ExecutorConfig(
        binary_path=binary_path,
        argument_template=list(ARGUMENT_TEMPLATE),
        show_output=show_output,
    )
