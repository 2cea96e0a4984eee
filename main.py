"""Runs the Batch Transcoder from a source checkout: `python main.py <source> <logs> <archive>`."""

import sys

from batch_transcoder.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
