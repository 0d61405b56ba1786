#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Examples:
    python run.py play
    python run.py replay --moves 0,0,1,1,2,2,3
    python run.py check --position 0,0,0,0,0,0,0,...
    python run.py --debug_level info benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
