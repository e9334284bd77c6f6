#!/usr/bin/env python3
"""
Voice Notes CLI.

Primary entry point when running from a source checkout.

Usage:
    python cli.py --help
    python cli.py server start --reload
    python cli.py health status --detailed
    python cli.py notes list --order asc
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from voicenotes.cli.main import app

if __name__ == "__main__":
    app()
