"""
Services Package for the Batch Transcoder Application.

This package contains the "service layer" of the application. A service is a class
that performs one step of a worker's run and touches the filesystem or an external
tool to do it. The pipeline decides the order; the services do the work.

- **File Processing Service (`ProcessFiles`):**
  Discovers the recordings under the source root, in deterministic path order.

- **Claim Service (`ClaimCoordinator`):**
  Claims a recording for this worker by exclusively creating its marker file in
  the shared log root.

- **Encoding Service (`TranscodeExecutor`):**
  Runs HandBrakeCLI on a claimed recording.

- **Outcome Service (`OutcomeResolver`):**
  Skips recordings whose output already exists, verifies the encoder's output,
  and archives the original and its sidecar log on success.

- **Logging Service (`ErrorLog`, `RunReporter`):**
  Writes the plain text failure log and emits the run summary.
"""
