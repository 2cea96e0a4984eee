"""
Provides the service that runs the external encoder (HandBrakeCLI).

The encoder is treated as an opaque subprocess. It is run synchronously with no
timeout, and its exit code is returned for logging only: whether a conversion
succeeded is decided afterwards by looking for the output file.
"""

import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config.encoder import ExecutorConfig


def display_command(cmd_list: List[str]) -> str:
    """Quotes a command list for logging, the way the host shell would."""
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)


class TranscodeExecutor:
    """
    Launches the encoder for one recording at a time.

    Attributes:
        config (ExecutorConfig): The encoder binary and argument template resolved at startup.
    """

    def __init__(self, config: ExecutorConfig):
        self.config = config

    def transcode(self, source_path: Path, dest_path: Path) -> Optional[int]:
        """
        Runs the encoder from `source_path` to `dest_path`.

        Returns:
            The encoder's exit code, or `None` if it could not be started (for
            example, the binary is missing). Neither value is a success signal.
        """
        cmd_list = self.config.build_command(source_path, dest_path)
        display_cmd_str = display_command(cmd_list)
        logger.debug(f"Executing encoder: {display_cmd_str}")

        output = None if self.config.show_output else subprocess.DEVNULL
        try:
            result = subprocess.run(
                cmd_list,
                stdout=output,
                stderr=output,
                shell=False,
            )
        except FileNotFoundError:
            logger.error(
                f"Encoder not found at '{cmd_list[0]}'. Install HandBrakeCLI or pass --encoder-path."
            )
            return None
        except PermissionError:
            logger.error(f"Encoder at '{cmd_list[0]}' is not executable.")
            return None
        except OSError as e:
            logger.error(f"Could not start encoder for {source_path.name}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"Encoder exited with rc={result.returncode} for {source_path.name}.")
        else:
            logger.trace(f"Encoder exited cleanly for {source_path.name}.")
        return result.returncode
