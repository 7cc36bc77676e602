#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    python run.py                       # interactive game with replay prompt
    python run.py play --red-name Ann --yellow-name Bo
    python run.py simulate --moves 3,2,3,2,3,2,3
    python run.py show --rows ....... ....... ....... ....... ....... RRRR...
    python run.py --debug-level info play
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
