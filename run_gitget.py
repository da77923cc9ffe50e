"""Convenience shim to run GitGet from the command line."""

from __future__ import annotations

import sys

from src.gitget.runner import cli


if __name__ == "__main__":
    sys.exit(cli(sys.argv[1:]))
