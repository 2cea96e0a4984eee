"""
Provides the service that decides what happens to a claimed recording.

For a recording this worker has just claimed, `OutcomeResolver.resolve`:
1. Skips it if the converted file is already there (an earlier run did the work,
   even if its marker was lost).
2. Otherwise runs the encoder and checks whether the converted file appeared.
3. On success, moves the original and its sidecar log into the archive root.
4. On failure, leaves every file where it is and raises `TranscodeFailedError`.
"""

import shutil
from datetime import datetime
from pathlib import Path

from loguru import logger

from ..config.common import OUTCOME_PROCESSED, OUTCOME_SKIPPED_OUTPUT_EXISTS
from ..domain.candidate import Candidate
from ..domain.exceptions import ArchiveError, TranscodeFailedError
from ..utils.format_utils import format_timedelta, formatted_size


def free_archive_path(archive_dir: Path, filename: str) -> Path:
    """
    Returns where `filename` can be stored in `archive_dir` without overwriting anything.

    The plain name is used when it is free; otherwise the first free
    `<stem> (N)<suffix>`.
    """
    target = archive_dir / filename
    if not target.exists():
        return target
    stem, suffix = Path(filename).stem, Path(filename).suffix
    counter = 1
    while True:
        target = archive_dir / f"{stem} ({counter}){suffix}"
        if not target.exists():
            return target
        counter += 1


class OutcomeResolver:
    """
    Runs a claimed recording through check, transcode, verify and archive.

    Attributes:
        executor: Any object with a `transcode(source_path, dest_path)` method.
        archive_dir (Path): Where originals (and sidecar logs) go after a successful conversion.
    """

    def __init__(self, executor, archive_dir: Path):
        self.executor = executor
        self.archive_dir: Path = Path(archive_dir).resolve()

    def resolve(self, candidate: Candidate) -> str:
        """
        Processes a recording this worker has claimed.

        Returns:
            `OUTCOME_PROCESSED` or `OUTCOME_SKIPPED_OUTPUT_EXISTS`.

        Raises:
            TranscodeFailedError: The encoder produced no output file.
            ArchiveError: The output exists, but the original could not be archived.
        """
        output_path = candidate.output_path
        if candidate.output_exists():
            logger.info(f"Output {output_path.name} already exists. Skipping transcode of {candidate.filename}.")
            return OUTCOME_SKIPPED_OUTPUT_EXISTS

        logger.info(f"Transcoding {candidate.path} -> {output_path}")
        started = datetime.now()
        return_code = self.executor.transcode(candidate.path, output_path)
        elapsed = datetime.now() - started

        if not candidate.output_exists():
            raise TranscodeFailedError(
                f"Encoder produced no output for {candidate.filename} "
                f"(rc={return_code}, elapsed {format_timedelta(elapsed)}). "
                f"Delete the marker to retry.",
                source_path=candidate.path,
            )

        logger.info(
            f"Transcoded {candidate.filename} in {format_timedelta(elapsed)} "
            f"({formatted_size(candidate.path.stat().st_size)} -> {formatted_size(output_path.stat().st_size)})."
        )
        self.archive(candidate)
        return OUTCOME_PROCESSED

    def archive(self, candidate: Candidate):
        """
        Moves a converted recording and its sidecar log into the archive root.

        A missing sidecar log is normal and only noted at info level.
        """
        self._move_to_archive(candidate.path, candidate)

        sidecar = candidate.sidecar_path
        if sidecar.is_file():
            self._move_to_archive(sidecar, candidate)
        else:
            logger.info(f"No sidecar log {sidecar.name} next to {candidate.filename}; nothing else to archive.")

    def _move_to_archive(self, path: Path, candidate: Candidate):
        try:
            self.archive_dir.mkdir(parents=True, exist_ok=True)
            target = free_archive_path(self.archive_dir, path.name)
            if target.name != path.name:
                logger.warning(f"{path.name} already exists in the archive. Storing as {target.name}.")
            shutil.move(str(path), str(target))
        except (OSError, shutil.Error) as e:
            raise ArchiveError(
                f"Could not move {path} to archive {self.archive_dir}: {e}",
                source_path=candidate.path,
            ) from e
        logger.debug(f"Archived {path} -> {target}")
