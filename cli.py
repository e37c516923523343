#!/usr/bin/env python3
"""
Endpoint Assistant CLI.

Entry script for running the CLI from a source checkout. Installed copies
get the same app as the `endpoint-assistant` console script.

Usage:
    python cli.py --help
    python cli.py overview
    python cli.py inspect /job-tracker/january-2026
    python cli.py --debug stats
"""

from endpoint_assistant.cli.app import main

if __name__ == "__main__":
    main()
