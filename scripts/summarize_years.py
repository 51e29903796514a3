#!/usr/bin/env python3
"""Print or save monthly accident counts for several years."""

from fars.etl.summary import main
import sys

if __name__ == "__main__":
    main(sys.argv[1:])
