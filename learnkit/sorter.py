"""Command that sorts integers read from a file and writes them to another."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from learnkit.sorting import bubble_sort, quick_sort

_INTEGER = re.compile(r"[+-]?[0-9]+")
ALGORITHMS = {"qsort": quick_sort, "bubblesort": bubble_sort}


def read_values(path: str | Path) -> list[int]:
    """Read one integer per line; raise OSError or ValueError on failure."""
    values = []
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        for number, raw in enumerate(handle, start=1):
            line = raw.removesuffix("\n").removesuffix("\r")
            if not _INTEGER.fullmatch(line):
                raise ValueError(f"invalid integer {line!r} on line {number}")
            values.append(int(line))
    return values


def write_values(values: Iterable[int], path: str | Path) -> None:
    """Write each value on its own line to ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(f"{value}\n" for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Read, sort and write values as directed by the command-line flags."""
    parser = argparse.ArgumentParser(prog="sorter", description="Sort integers stored one per line.")
    parser.add_argument("-i", dest="infile", default="infile", help="File contains values for sorting")
    parser.add_argument("-o", dest="outfile", default="outfile", help="File to receive sorted values")
    parser.add_argument("-a", dest="algorithm", default="qsort", help="Sort algorithm")
    options = parser.parse_args(argv)
    print("infile =", options.infile, "outfile =", options.outfile, "algorithm =", options.algorithm)

    try:
        values = read_values(options.infile)
    except OSError:
        print("Failed to open the input file ", options.infile)
        return 1
    except ValueError as error:
        print(error)
        return 1

    started = time.perf_counter()
    sort = ALGORITHMS.get(options.algorithm)
    if sort is not None:
        sort(values)
    elapsed = time.perf_counter() - started
    print("The sorting process costs ", f"{elapsed * 1e6:.3f}µs", " to complete.")

    try:
        write_values(values, options.outfile)
    except OSError:
        print("Failed to open the output file ", options.outfile)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())