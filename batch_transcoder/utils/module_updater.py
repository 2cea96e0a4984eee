"""
This module provides the Modules class to verify the external encoder
(HandBrakeCLI) before a run starts.
"""
import subprocess

from loguru import logger

from ..config.encoder import ExecutorConfig


class Modules:
    """
    A utility class for startup checks on external tools.

    A missing encoder is not fatal: every claimed recording would then end as
    `TranscodeFailed`, which the operator sees in the summary. The check only
    makes the cause obvious before the first claim.
    """

    @staticmethod
    def verify_encoder(config: ExecutorConfig) -> bool:
        """
        Runs `<encoder> --version` and logs the first line of its output.

        Returns:
            True if the encoder could be executed and exited with code 0.
        """
        encoder_cmd = str(config.binary_path)
        try:
            result = subprocess.run(
                [encoder_cmd, "--version"],
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"Encoder version command failed (return code {e.returncode}):\n{e.stderr}")
            return False
        except FileNotFoundError:
            logger.error(
                f"Encoder not found at '{encoder_cmd}'.\n"
                "Install HandBrakeCLI, pass --encoder-path, or set 'paths.handbrake_cli' in 'config.user.yaml'."
            )
            return False
        except OSError as e:
            logger.error(f"Could not execute encoder '{encoder_cmd}': {e}")
            return False

        version_output_lines = (result.stdout or result.stderr).splitlines()
        first_line = version_output_lines[0] if version_output_lines else "(no output)"
        logger.info(f"Encoder version check successful: {first_line}")
        return True
