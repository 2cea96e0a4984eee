"""
Provides the claim service that keeps concurrent workers from converting the same recording.

Workers share nothing but the filesystem. Before a worker touches a recording it
creates a marker file named after the recording's stem in the shared log root.
The marker is created with exclusive-create semantics (`open(..., "x")`, which maps
to `O_CREAT | O_EXCL`), so the existence check and the creation are a single
filesystem operation: of several workers racing for the same recording, exactly
one succeeds.

Markers are never removed by this application. A marker left behind by a failed
or interrupted run keeps the recording out of every later run until an operator
deletes it.

Exclusive create is only as atomic as the underlying filesystem. Some network
filesystems (older NFS clients, some SMB configurations) do not honour `O_EXCL`
atomically; on those two workers can still both claim a recording.
"""

import os
import socket
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.common import MARKER_SUFFIX, WORKER_ID
from ..domain.candidate import Candidate


class ClaimResult(Enum):
    CLAIMED = "Claimed"
    ALREADY_CLAIMED = "AlreadyClaimed"


def default_worker_id() -> str:
    """
    Returns the identity this worker writes into its markers.

    `worker.id` from `config.user.yaml` wins; otherwise `<hostname>:<pid>`.
    """
    if WORKER_ID:
        return WORKER_ID
    return f"{socket.gethostname()}:{os.getpid()}"


class ClaimCoordinator:
    """
    Claims recordings on behalf of one worker by creating marker files.

    Attributes:
        log_dir (Path): The shared directory holding one marker per recording stem.
        worker_id (str): Written into every marker this coordinator creates.
    """

    def __init__(self, log_dir: Path, worker_id: Optional[str] = None):
        self.log_dir: Path = Path(log_dir).resolve()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.worker_id: str = worker_id or default_worker_id()

    def marker_path(self, candidate: Candidate) -> Path:
        return self.log_dir / f"{candidate.stem}{MARKER_SUFFIX}"

    def try_claim(self, candidate: Candidate) -> ClaimResult:
        """
        Atomically claims a recording for this worker.

        Returns:
            `ClaimResult.CLAIMED` if this call created the marker,
            `ClaimResult.ALREADY_CLAIMED` if a marker was already there. Nothing
            is written in the latter case.
        """
        marker = self.marker_path(candidate)
        try:
            marker_file = marker.open("x", encoding="utf-8")
        except FileExistsError:
            logger.debug(f"Marker {marker} already exists; {candidate.filename} is claimed elsewhere.")
            return ClaimResult.ALREADY_CLAIMED

        # The claim is made at this point. The content is only diagnostic.
        with marker_file:
            try:
                marker_file.write(f"{self.worker_id}  {candidate.output_path}\n")
            except OSError as e:
                logger.warning(f"Claimed {candidate.filename} but could not write marker content to {marker}: {e}")
        logger.debug(f"Created marker {marker} for {candidate.filename} as '{self.worker_id}'.")
        return ClaimResult.CLAIMED
