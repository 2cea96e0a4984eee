"""
Configuration Package for the Batch Transcoder.

This package centralizes the static configuration settings for the application.
By separating configuration from the application logic, a worker can be adjusted
without changing the core code.

This package includes settings for:
- Common application settings like the logging format, file suffixes, the marker
  namespace and the run summary framing.
- User-overridable settings loaded from `config.user.yaml` (encoder location,
  worker identity).
- The external encoder's location per platform and its fixed argument template.
"""
