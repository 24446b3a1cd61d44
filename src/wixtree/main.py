from __future__ import annotations

"""
Main Entry Point.

Routes 'python -m wixtree.main' and the console script to the CLI.
"""

import sys

from wixtree.interface.cli.app import main as cli_main


def main() -> int:
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
