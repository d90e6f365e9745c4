"""Command-line entry point: load a data file and run both greedy searches."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from featsel import classic, selection
from featsel.knn import load_data

_RULE = "----------------------------------------"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featsel",
        description="Forward selection and backward elimination with a 1-NN classifier.",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default="data.txt",
        help="file with one sample per line: label feature1 feature2 ...",
    )
    parser.add_argument(
        "--classic",
        action="store_true",
        help="run the original searches with 0-based feature numbers",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the searches on the data file; return the process exit status."""
    args = _parser().parse_args(argv)
    path = args.data

    print(f"Attempting to load data from '{path}'...")
    try:
        X, y = load_data(path)
    except OSError:
        X, y = [], []

    if not X or not y:
        print("Error: Failed to load data or data file is empty.", file=sys.stderr)
        print(
            f"Please ensure '{path}' exists in the same directory as the executable "
            "and is formatted correctly (label feature1 feature2 ...).",
            file=sys.stderr,
        )
        return 1
    if len(X) != len(y):
        print("Error: Mismatch between number of data samples and labels.", file=sys.stderr)
        return 1
    if any(not row for row in X):
        print("Error: One of the data rows has no features.", file=sys.stderr)
        return 1

    print(f"Data loaded successfully: {len(X)} samples, {len(X[0])} features.")
    print()

    if args.classic:
        classic.forward_selection(X, y)
        print(_RULE)
        print(_RULE)
        classic.backward_elimination(X, y)
    else:
        selection.forward_selection(X, y)
        print(f"\n{_RULE}")
        print(f"{_RULE}\n")
        selection.backward_elimination(X, y)
    return 0


if __name__ == "__main__":
    sys.exit(main())