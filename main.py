#!/usr/bin/env python3
"""
Main script to generate narrated TikTok videos on a schedule.
Uses the pipeline in src/tiktok_automation; run from project root.
"""

import sys
from pathlib import Path

# Ensure src is on path when running from a checkout without installing
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


if __name__ == "__main__":
    from tiktok_automation.cli import main

    sys.exit(main())
