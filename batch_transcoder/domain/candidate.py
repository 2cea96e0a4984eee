from pathlib import Path

from ..config.common import OUTPUT_SUFFIX, SIDECAR_SUFFIX


class Candidate:
    """
    Represents a single recording discovered in the source tree.

    A candidate is identified by its absolute path. The paths of the files that
    belong to it (the converted output and the sidecar log written by the
    recorder) are derived from its directory and stem; none of them is touched
    here.

    Attributes:
        path (Path): The absolute path to the recording.
        directory (Path): The directory containing the recording.
        stem (str): The file name without its suffix. Markers are keyed by it.
        filename (str): The file name, including its suffix.
    """

    def __init__(self, path: Path):
        self.path: Path = Path(path).absolute()
        self.directory: Path = self.path.parent
        self.stem: str = self.path.stem
        self.filename: str = self.path.name

    @property
    def output_path(self) -> Path:
        """The converted file: same directory, same stem, output suffix."""
        return self.directory / f"{self.stem}{OUTPUT_SUFFIX}"

    @property
    def sidecar_path(self) -> Path:
        """The recorder's log file: same directory, same stem, sidecar suffix."""
        return self.directory / f"{self.stem}{SIDECAR_SUFFIX}"

    def output_exists(self) -> bool:
        return self.output_path.is_file()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"Candidate({str(self.path)!r})"
