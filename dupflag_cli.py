#!/usr/bin/env python3
"""Simple CLI for flagging images and checking them for duplicates.

Usage example:
  python dupflag_cli.py flag ./images_db
  python dupflag_cli.py check ./images_new --partial --report ./reports/check.csv
"""
import sys

from dupflag.cli import main


if __name__ == "__main__":
    sys.exit(main())
