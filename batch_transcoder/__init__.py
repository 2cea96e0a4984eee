"""
Batch Transcoder: converts `.ts` recordings to H.265 `.m4v` files with HandBrakeCLI.

Any number of workers, on one machine or several, can run against the same shared
source, log and archive roots. Each recording is converted by at most one of them;
the claim is a marker file created exclusively in the log root.
"""

__version__ = "1.0.0"
