"""Summary statistics and search over a list of integers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArrayStats:
    """Summary of a non-empty list of integers."""

    values: tuple[int, ...]
    total: int
    maximum: int
    minimum: int
    average: float
    reversed: tuple[int, ...]
    sorted: tuple[int, ...]


def summarize(values) -> ArrayStats:
    """Compute statistics for a non-empty sequence of integers."""
    items = tuple(values)
    if not items:
        raise ValueError("cannot summarize an empty array")
    total = sum(items)
    return ArrayStats(
        values=items,
        total=total,
        maximum=max(items),
        minimum=min(items),
        average=total / len(items),
        reversed=items[::-1],
        sorted=tuple(sorted(items)),
    )


def find(values, target: int) -> int | None:
    """Index of the first occurrence of target, or None."""
    return next((i for i, v in enumerate(values) if v == target), None)


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _fmt(x: float) -> str:
    return str(int(x)) if x == int(x) else repr(x)


def main(argv: list[str] | None = None) -> int:
    size = _read_int("Enter the number of elements in the array: ")
    values = [_read_int(f"Enter element {i + 1}: ") for i in range(size)]
    stats = summarize(values)
    print(f"\nYou entered: {list(stats.values)}")
    print(f"Sum of elements: {stats.total}")
    print(f"Maximum element: {stats.maximum}")
    print(f"Minimum element: {stats.minimum}")
    print(f"Average of elements: {_fmt(stats.average)}")
    print(f"Reversed array: {list(stats.reversed)}")
    print(f"Sorted array: {list(stats.sorted)}")
    target = _read_int("\nEnter an element to search for: ")
    index = find(values, target)
    if index is None:
        print(f"Element {target} not found in the array.")
    else:
        print(f"Element {target} found at index {index}")
    return 0