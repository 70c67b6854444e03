#!/usr/bin/env python3
"""Thin launcher for the todo TUI."""

import sys

from interface.tui_app import main

if __name__ == "__main__":
    sys.exit(main())
