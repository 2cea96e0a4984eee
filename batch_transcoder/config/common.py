"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the Batch Transcoder: logging format, file suffixes, the marker
namespace layout and the framing of the run summary. It also handles the loading
of user-specific configuration from an external YAML file, allowing a worker to
be customized without modifying the source code.
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Configuration ---
# This block loads user-specific settings from a 'config.user.yaml' file located
# at the project root. Every worker sharing the same roots may carry its own copy.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# Location of the HandBrakeCLI executable. If None, the platform default from
# `config.encoder` is used.
ENCODER_PATH: Path | None = None

# The identity this worker writes into the markers it creates. If None, it is
# derived from the hostname and process id.
WORKER_ID: str | None = None

if USER_CONFIG_PATH.is_file():
    try:
        with USER_CONFIG_PATH.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
        if user_config:
            paths_config = user_config.get("paths") or {}
            worker_config = user_config.get("worker") or {}
            encoder_path_str = paths_config.get("handbrake_cli")
            worker_id_str = worker_config.get("id")

            if encoder_path_str:
                ENCODER_PATH = Path(encoder_path_str)
            if worker_id_str:
                WORKER_ID = str(worker_id_str)
    except (OSError, yaml.YAMLError, AttributeError) as e:
        logger.warning(f"Could not load or parse '{USER_CONFIG_PATH}': {e}")
else:
    logger.debug(f"User config '{USER_CONFIG_PATH}' not found. Using built-in defaults.")


# --- Logging Configuration ---

# The format string for the Loguru logger. The process id is included because
# several workers commonly write to the same terminal multiplexer or log file.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{process} - <level>{message}</level>"
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


# --- File Layout ---

# Recordings to convert. Matched case-insensitively.
SOURCE_SUFFIX = ".ts"

# The converted file, written next to the source.
OUTPUT_SUFFIX = ".m4v"

# Sidecar log written by the recording software next to each recording.
SIDECAR_SUFFIX = ".log"

# Markers live in the log root as `<stem><MARKER_SUFFIX>`.
MARKER_SUFFIX = ".log"

# Plain text record of per-candidate failures, kept in the log root.
FAILURE_LOG_FILE_NAME = "error.txt"


# --- Run Summary ---

SUMMARY_HEADER = "=" * 20 + " RUN SUMMARY " + "=" * 20
SUMMARY_FOOTER = "=" * len(SUMMARY_HEADER)
SUMMARY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


# --- Outcome Constants ---
# Per-candidate decisions recorded in the run summary.

OUTCOME_PROCESSED = "Processed"  # Transcoded and archived.
OUTCOME_SKIPPED_OUTPUT_EXISTS = "SkippedOutputExists"  # Claimed, but the output was already there.
OUTCOME_SKIPPED_ALREADY_CLAIMED = "SkippedAlreadyClaimed"  # Another worker holds the marker.
OUTCOME_TRANSCODE_FAILED = "TranscodeFailed"  # Encoder ran, no output appeared.
OUTCOME_ARCHIVE_FAILED = "ArchiveFailed"  # Output exists but the original could not be moved.
OUTCOME_CLAIM_FAILED = "ClaimFailed"  # The marker could not be created; nothing was touched.
OUTCOME_FAILED = "Failed"  # Claimed, then an unexpected error stopped processing.
