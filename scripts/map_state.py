#!/usr/bin/env python3
"""Render one state's accidents for a year to PNG."""

from fars.maps import main
import sys

if __name__ == "__main__":
    main(sys.argv[1:])
