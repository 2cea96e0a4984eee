"""
Defines custom exception types for the Batch Transcoder application.

These exceptions let the pipeline tell a fatal problem (the source tree cannot be
scanned) apart from failures that only concern one recording (the encoder produced
nothing, the original could not be archived). Only the latter are caught per
candidate; the run then moves on to the next file.

Skips (the file is claimed by another worker, or its output already exists) are
not exceptions: they are ordinary outcomes of the claim and resolve steps.

All custom exceptions inherit from the base `BatchTranscoderException`.
"""


class BatchTranscoderException(Exception):
    """Base class for all custom exceptions in the Batch Transcoder application."""

    pass


# --- Discovery Exceptions ---
class DiscoveryError(BatchTranscoderException):
    """
    Raised when the source root cannot be scanned.

    This is the only fatal error of a run: without a readable source tree
    nothing can be claimed or processed.
    """

    pass


# --- Per-Candidate Exceptions ---
class CandidateException(BatchTranscoderException):
    """
    Base class for failures that concern a single recording.

    The pipeline catches these, records the failure in the run summary and the
    failure log, and continues with the next candidate. The marker stays in
    place, so the recording is not retried until an operator deletes it.
    """

    def __init__(self, message: str, source_path=None):
        super().__init__(message)
        self.source_path = source_path


class TranscodeFailedError(CandidateException):
    """
    Raised when the encoder ran but no output file appeared.

    Success is decided by the presence of the output file, never by the
    encoder's exit code. The source file and its sidecar log are left untouched.
    """

    pass


class ArchiveError(CandidateException):
    """Raised when a transcoded original (or its sidecar log) could not be moved to the archive."""

    pass
