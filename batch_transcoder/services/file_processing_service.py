"""
Provides the service that discovers recordings waiting to be converted.

This module contains the logic for the first phase of the pipeline, where the
application scans the source tree for candidates. The scan:
- Finds all recordings (by suffix, case-insensitively) in a directory tree.
- Excludes the log and archive roots when they are nested inside the source tree,
  so archived originals are never picked up again. Roots that contain the source
  tree, or equal it, are not excluded.
- Orders the result by full path, so that workers scanning the same tree walk it
  in the same order and mostly meet each other's markers rather than racing.
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from ..config.common import SOURCE_SUFFIX
from ..domain.candidate import Candidate
from ..domain.exceptions import DiscoveryError


class ProcessFiles:
    """
    Discovers the recordings under a source root.

    The object is a restartable iterable: every iteration rescans the tree, so
    files that appeared or were archived by another worker since the previous
    scan are taken into account. Scanning has no side effects.

    Attributes:
        source_dir (Path): The root directory of the scan.
        excluded_dirs (Tuple[Path, ...]): Directories whose contents are never candidates.
        suffix (str): The lowercase suffix a file must have to be a candidate.
    """

    def __init__(
        self,
        source_dir: Path,
        excluded_dirs: Optional[Iterable[Path]] = None,
        suffix: str = SOURCE_SUFFIX,
    ):
        self.source_dir: Path = Path(source_dir).resolve()
        # Only directories strictly below the source root can hold rediscoverable files.
        resolved = (Path(d).resolve() for d in (excluded_dirs or ()))
        self.excluded_dirs: Tuple[Path, ...] = tuple(
            d for d in resolved if self.source_dir in d.parents
        )
        self.suffix = suffix.lower()

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.scan())

    def _check_source_dir(self):
        if not self.source_dir.exists():
            raise DiscoveryError(f"Source root does not exist: {self.source_dir}")
        if not self.source_dir.is_dir():
            raise DiscoveryError(f"Source root is not a directory: {self.source_dir}")
        try:
            with os.scandir(self.source_dir) as it:
                next(it, None)
        except OSError as e:
            raise DiscoveryError(f"Source root cannot be read: {self.source_dir}: {e}") from e

    def _is_excluded(self, path: Path) -> bool:
        return any(
            path == excluded or excluded in path.parents
            for excluded in self.excluded_dirs
        )

    def scan(self) -> List[Candidate]:
        """
        Scans the source tree and returns the candidates sorted by full path.

        Raises:
            DiscoveryError: If the source root is missing, not a directory, or unreadable.
        """
        self._check_source_dir()

        discovered: List[Path] = []
        for path in self.source_dir.rglob("*"):
            if path.suffix.lower() != self.suffix:
                continue
            if self._is_excluded(path):
                logger.trace(f"Ignoring {path}: inside an excluded directory.")
                continue
            if not path.is_file():
                continue
            discovered.append(path)

        discovered.sort(key=lambda p: str(p))
        logger.debug(
            f"ProcessFiles: Discovered {len(discovered)} '{self.suffix}' files under {self.source_dir}."
        )
        return [Candidate(p) for p in discovered]
