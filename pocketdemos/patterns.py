"""Star triangle patterns."""

from __future__ import annotations

import argparse


def star_triangle(rows: int) -> list[str]:
    """Lines growing from one star to rows stars."""
    return ["*\t" * i for i in range(1, rows + 1)]


def reversed_star_triangle(rows: int) -> list[str]:
    """Lines shrinking from rows stars to one."""
    return star_triangle(rows)[::-1]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="patterns", description=__doc__)
    parser.add_argument("rows", type=int)
    parser.add_argument("--reversed", action="store_true")
    args = parser.parse_args(argv)
    builder = reversed_star_triangle if args.reversed else star_triangle
    for line in builder(args.rows):
        print(line)
    return 0