#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--size N] [--mines M] [--seed S] [--verbose]
    python main.py --difficulty {beginner,intermediate,expert}
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
