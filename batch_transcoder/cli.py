"""
Command-Line Interface (CLI) setup for the Batch Transcoder.

This module uses Python's `argparse` to define and parse the command-line
arguments: the three shared roots and the verbosity and diagnostic toggles.
"""
import argparse
from typing import List, Optional

from .config.common import LOG_LEVELS


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the Batch Transcoder.

    Args:
        argv: Arguments to parse; defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: An object containing the parsed command-line
                            arguments as attributes.
    """
    parser = argparse.ArgumentParser(
        description="Convert .ts recordings to H.265 .m4v with HandBrakeCLI. "
        "Safe to run from several machines against the same shared folders."
    )
    parser.add_argument(
        "source_dir", help="Root of the recordings to convert (scanned recursively)."
    )
    parser.add_argument(
        "log_dir", help="Shared directory for claim markers and the failure log."
    )
    parser.add_argument(
        "archive_dir", help="Where originals and their sidecar logs go after conversion."
    )
    parser.add_argument(
        "--log-level", type=str.upper, default="INFO", choices=LOG_LEVELS,
        help="Set the logging level."
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Shortcut for --log-level DEBUG --show-encoder-output."
    )
    parser.add_argument(
        "--show-encoder-output", action="store_true",
        help="Let HandBrakeCLI write its progress and log output to the terminal."
    )
    parser.add_argument(
        "--encoder-path", type=str, default=None,
        help="Path to the HandBrakeCLI executable (overrides config.user.yaml and the platform default)."
    )
    parser.add_argument(
        "--worker-id", type=str, default=None,
        help="Identity written into claim markers (default: hostname:pid)."
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Also write the log to this file."
    )
    parser.add_argument(
        "--skip-encoder-check", action="store_true",
        help="Do not run '<encoder> --version' before starting."
    )

    args = parser.parse_args(argv)

    if args.debug:
        args.log_level = "DEBUG"
        args.show_encoder_output = True

    return args
