import traceback
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.common import (
    OUTCOME_ARCHIVE_FAILED,
    OUTCOME_CLAIM_FAILED,
    OUTCOME_FAILED,
    OUTCOME_SKIPPED_ALREADY_CLAIMED,
    OUTCOME_TRANSCODE_FAILED,
)
from ..domain.candidate import Candidate
from ..domain.exceptions import ArchiveError, TranscodeFailedError
from ..domain.run_summary import RunSummary
from ..services.claim_service import ClaimCoordinator, ClaimResult
from ..services.file_processing_service import ProcessFiles
from ..services.logging_service import ErrorLog
from ..services.outcome_service import OutcomeResolver


class TranscodePipeline:
    """
    Runs discovery, claim and resolve for every recording under a source root.

    Candidates are handled one after the other in path order. The only
    coordination with other workers is the marker namespace in `log_dir`.
    `run` returns the `RunSummary`; a `DiscoveryError` propagates and ends the
    run, any per-candidate failure is recorded and the loop moves on.
    """

    def __init__(
        self,
        source_dir: Path,
        log_dir: Path,
        archive_dir: Path,
        executor,
        worker_id: Optional[str] = None,
    ):
        self.source_dir = Path(source_dir).resolve()
        self.log_dir = Path(log_dir).resolve()
        self.archive_dir = Path(archive_dir).resolve()

        self.discovery = ProcessFiles(
            self.source_dir, excluded_dirs=(self.log_dir, self.archive_dir)
        )
        self.coordinator = ClaimCoordinator(self.log_dir, worker_id=worker_id)
        self.resolver = OutcomeResolver(executor, self.archive_dir)
        self.error_log = ErrorLog(self.log_dir)

    def process_single_file(self, candidate: Candidate, summary: RunSummary):
        try:
            claim = self.coordinator.try_claim(candidate)
        except OSError as e:
            self._report_failure(
                candidate, OUTCOME_CLAIM_FAILED, e,
                marker_note="not created; the recording was not touched",
            )
            summary.record(candidate.path, OUTCOME_CLAIM_FAILED, detail=str(e))
            return

        if claim is ClaimResult.ALREADY_CLAIMED:
            logger.info(f"{candidate.filename} is already claimed. Skipping.")
            summary.record(candidate.path, OUTCOME_SKIPPED_ALREADY_CLAIMED)
            return

        logger.debug(f"Claimed {candidate.filename} as '{self.coordinator.worker_id}'.")
        try:
            outcome = self.resolver.resolve(candidate)
        except (TranscodeFailedError, ArchiveError) as e:
            failed_outcome = (
                OUTCOME_TRANSCODE_FAILED
                if isinstance(e, TranscodeFailedError)
                else OUTCOME_ARCHIVE_FAILED
            )
            self._report_failure(candidate, failed_outcome, e)
            summary.record(candidate.path, failed_outcome, detail=str(e))
            return
        except Exception as e:
            tb_str = traceback.format_exception(type(e), e, e.__traceback__)
            self._report_failure(
                candidate, OUTCOME_FAILED, e, traceback_text="".join(tb_str)
            )
            summary.record(candidate.path, OUTCOME_FAILED, detail=f"{type(e).__name__}: {e}")
            return
        summary.record(candidate.path, outcome)

    def _report_failure(
        self,
        candidate: Candidate,
        outcome: str,
        error: Exception,
        marker_note: str = "delete it to retry",
        traceback_text: Optional[str] = None,
    ):
        marker = self.coordinator.marker_path(candidate)
        logger.error(f"{outcome}: {candidate.filename}: {type(error).__name__}: {error}")
        lines = [
            f"{outcome}: {candidate.path}",
            f"Worker: {self.coordinator.worker_id}",
            f"Error: {type(error).__name__}: {error}",
            f"Marker: {marker} ({marker_note})",
        ]
        if traceback_text:
            logger.debug(f"Traceback for {candidate.filename}:\n{traceback_text}")
            lines.append(f"Traceback:\n{traceback_text.rstrip()}")
        self.error_log.write(*lines)

    def run(self) -> RunSummary:
        summary = RunSummary()
        logger.info(
            f"TranscodePipeline: Scanning {self.source_dir} (markers in {self.log_dir}, archive in {self.archive_dir})."
        )
        candidates = self.discovery.scan()
        logger.info(f"TranscodePipeline: {len(candidates)} candidate(s) found.")

        try:
            for i, candidate in enumerate(candidates, start=1):
                logger.debug(f"[{i}/{len(candidates)}] {candidate.path}")
                self.process_single_file(candidate, summary)
        except KeyboardInterrupt:
            logger.warning(
                "TranscodePipeline: Interrupted by user. The current recording stays claimed; delete its marker to retry."
            )
            summary.interrupted = True
        return summary.finish()
