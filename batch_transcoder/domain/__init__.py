"""
This package contains the core domain models of the Batch Transcoder application.

The domain layer represents the fundamental concepts of the batch conversion as
this application sees it: a recording waiting to be converted and the ways its
processing can fail. It is independent of the CLI, the services that touch the
filesystem, and the external encoder.

Modules:
    exceptions.py: Defines custom exception types, separating the fatal discovery
                   failure from failures that only concern one recording.
    candidate.py: Contains the `Candidate` class, which represents a discovered
                  recording and derives the paths of its output and sidecar log.
    run_summary.py: Defines `RunSummary`, the ordered record of per-candidate
                    outcomes that a run returns.
"""
