#!/usr/bin/env python3
"""
run.py - Main entry point for dropfour

Usage:
    python run.py play
    python run.py replay --moves 3,3,4,4,5,5,6
    python run.py --debug-level info benchmark --iterations 500
"""

import os
import sys

# Make the package importable when run from a source checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dropfour.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
