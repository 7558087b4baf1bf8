#!/usr/bin/env python3
"""
Main entry point for the ircline command line tool
"""

import sys

from ircline.cli import main

if __name__ == "__main__":
    sys.exit(main())
