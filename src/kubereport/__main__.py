#!/usr/bin/env python3
"""
Allow running kubereport as a module: python -m kubereport
"""

from kubereport.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
