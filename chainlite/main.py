"""Command-line entry point for the interactive demo."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .blockchain import Blockchain
from .ui import Console


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive menu on a fresh chain."""
    parser = argparse.ArgumentParser(
        prog="chainlite", description="Interactive blockchain demonstration."
    )
    parser.parse_args(argv)

    chain = Blockchain()
    print("Welcome to Blockchain Demo")
    print("A genesis block has been created automatically.")
    Console(chain).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())