"""Run namazflow straight from a source checkout.

Usage: ``python startcli.py -s 539 -v haftalik``.  Arguments are handed
unchanged to `namazflow.cli.main`; nothing needs to be installed first.
"""
from __future__ import annotations

import sys

from namazflow.cli import main


if __name__ == "__main__":
    main(sys.argv[1:])
