"""
This package contains the transcoding pipeline of the Batch Transcoder application.

The pipeline orchestrates one worker's run: discovering recordings, claiming them
against other workers, running the encoder and archiving the originals, and
collecting the outcome of each recording into the run summary.
"""
