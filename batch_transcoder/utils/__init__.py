"""
Utilities Package for the Batch Transcoder Application.

Modules:
    - format_utils.py: Helper functions for formatting durations and file sizes
      into human-readable strings.
    - module_updater.py: Verifies the external encoder before a run starts.
"""
