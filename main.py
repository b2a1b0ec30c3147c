#!/usr/bin/env python3
"""fabricup entry point"""

from fabricup.cli import run

if __name__ == "__main__":
    run()
