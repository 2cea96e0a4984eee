"""
Entry point for the Batch Transcoder (`python -m batch_transcoder` or `ts-transcode`).

This module parses command-line arguments, configures logging, resolves the
encoder for this host, runs the transcoding pipeline over the shared roots and
emits the run summary. Several copies may run at once, on one machine or many,
against the same roots.
"""

import sys
from typing import List, Optional

from loguru import logger

from .cli import get_args
from .config.common import LOGGER_FORMAT
from .config.encoder import resolve_executor_config
from .domain.exceptions import DiscoveryError
from .pipeline.transcode_pipeline import TranscodePipeline
from .services.encoding_service import TranscodeExecutor
from .services.logging_service import RunReporter
from .utils.module_updater import Modules


# Configure the logger for initial setup.
# The level is overridden once the command-line arguments are parsed.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)


def configure_logging(log_level: str, log_file: Optional[str] = None):
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=LOGGER_FORMAT)
    if log_file:
        logger.add(log_file, level=log_level, format=LOGGER_FORMAT, encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs one worker over the shared roots.

    Returns:
        0 after a completed run (individual recordings may still have failed),
        1 if the source root could not be scanned, 130 if interrupted.
    """
    args = get_args(argv)
    configure_logging(args.log_level, args.log_file)
    logger.debug(f"Parsed arguments: {args}")

    executor_config = resolve_executor_config(
        cli_encoder_path=args.encoder_path,
        show_output=args.show_encoder_output,
    )
    if not args.skip_encoder_check and not Modules.verify_encoder(executor_config):
        logger.warning(
            "Encoder check failed; continuing anyway. Every recording this worker claims "
            "will end as TranscodeFailed until the encoder is available."
        )

    pipeline = TranscodePipeline(
        args.source_dir,
        args.log_dir,
        args.archive_dir,
        executor=TranscodeExecutor(executor_config),
        worker_id=args.worker_id,
    )
    try:
        summary = pipeline.run()
    except DiscoveryError as e:
        logger.critical(f"Cannot scan source root: {e}")
        return 1

    RunReporter().report(summary)
    if summary.interrupted:
        return 130
    logger.success("Batch Transcoder run finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
