"""
This module provides the application's two operator-facing records.

- `ErrorLog` appends a human-readable entry to a plain text file in the shared log
  root for every recording that failed. Several workers may append to the same
  file; each entry is written with a single call.
- `RunReporter` emits the per-run summary (ordered outcomes framed by a header and
  footer, with start and end times) to the log stream when a run ends.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from ..config.common import (
    FAILURE_LOG_FILE_NAME,
    SUMMARY_FOOTER,
    SUMMARY_HEADER,
    SUMMARY_TIME_FORMAT,
)
from ..domain.run_summary import RunSummary
from ..utils.format_utils import format_timedelta


class ErrorLog:
    """
    The `error.txt` in the log root: one entry per failed recording, newest last.

    Entries end with a rule line. Each entry goes out in a single append so that
    workers sharing the file do not interleave within an entry.
    """

    rule: str = "=" * 50

    def __init__(self, log_dir: Path, filename: str = FAILURE_LOG_FILE_NAME):
        self.log_dir: Path = Path(log_dir).resolve()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file_path: Path = self.log_dir / filename

    def write(self, *lines: str):
        """Appends one entry. If `error.txt` is not writable the entry goes to the logger."""
        if not lines:
            return

        entry = "".join(f"{line}\n" for line in (*lines, self.rule))
        try:
            with self.log_file_path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            logger.error(f"Cannot append to {self.log_file_path} ({e}); entry follows:\n{entry.rstrip()}")


class RunReporter:
    """
    Emits a finished run's summary block.

    The block is produced as a list of lines by `render`, then sent to `emit`,
    which defaults to `logger.info`.
    """

    def __init__(self, emit: Optional[Callable[[str], None]] = None):
        self.emit = emit or logger.info

    @staticmethod
    def render(summary: RunSummary) -> List[str]:
        ended_at = summary.ended_at or datetime.now()
        lines = [
            SUMMARY_HEADER,
            f"Started:  {summary.started_at.strftime(SUMMARY_TIME_FORMAT)}",
        ]
        if summary.entries:
            lines.extend(entry.as_line() for entry in summary.entries)
        else:
            lines.append("No candidates found.")
        counts = ", ".join(f"{outcome}={n}" for outcome, n in summary.counts().items())
        if counts:
            lines.append(f"Totals:   {counts}")
        if summary.interrupted:
            lines.append("Run was interrupted before all candidates were processed.")
        lines.append(f"Ended:    {ended_at.strftime(SUMMARY_TIME_FORMAT)}")
        lines.append(f"Elapsed:  {format_timedelta(ended_at - summary.started_at)}")
        lines.append(SUMMARY_FOOTER)
        return lines

    def report(self, summary: RunSummary):
        for line in self.render(summary):
            self.emit(line)
