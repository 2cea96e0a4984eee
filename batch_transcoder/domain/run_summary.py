"""
Defines the data model for the record a run produces.

A run builds a `RunSummary` as it goes and returns it; nothing about it is kept
in module-level state. The summary is emitted by the logging service once the
run ends and then discarded.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SummaryEntry:
    """One decision: which recording, and what happened to it."""

    source_path: Path
    outcome: str
    detail: Optional[str] = None

    def as_line(self) -> str:
        line = f"{self.outcome:<22} {self.source_path}"
        if self.detail:
            line += f" ({self.detail})"
        return line


@dataclass
class RunSummary:
    """
    The ordered per-candidate outcomes of one run, with its start and end times.

    Attributes:
        started_at (datetime): When the run started.
        ended_at (Optional[datetime]): When the run ended; None while it is running.
        entries (List[SummaryEntry]): One entry per candidate, in processing order.
        interrupted (bool): True if the run was stopped before every candidate was seen.
    """

    started_at: datetime = field(default_factory=datetime.now)
    ended_at: Optional[datetime] = None
    entries: List[SummaryEntry] = field(default_factory=list)
    interrupted: bool = False

    def record(self, source_path: Path, outcome: str, detail: Optional[str] = None) -> SummaryEntry:
        entry = SummaryEntry(source_path=source_path, outcome=outcome, detail=detail)
        self.entries.append(entry)
        return entry

    def finish(self) -> "RunSummary":
        self.ended_at = datetime.now()
        return self

    @property
    def outcomes(self) -> List[str]:
        return [entry.outcome for entry in self.entries]

    def counts(self) -> Dict[str, int]:
        return dict(Counter(self.outcomes))
