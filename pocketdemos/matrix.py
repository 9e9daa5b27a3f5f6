"""Integer matrix multiplication."""

from __future__ import annotations


def multiply(a: list[list[int]], b: list[list[int]]) -> list[list[int]]:
    """Product of two rectangular matrices."""
    if not a or not b or not a[0] or not b[0]:
        raise ValueError("matrices must be non-empty")
    if len(a[0]) != len(b):
        raise ValueError("columns of the first must equal rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def format_matrix(matrix: list[list[int]]) -> str:
    """Rows of right-aligned cells five characters wide."""
    return "\n".join("".join(f"{v:5}" for v in row) for row in matrix)


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _read_matrix(rows: int, cols: int, name: str) -> list[list[int]]:
    print(f"Enter elements for matrix {name} ({rows}x{cols}):")
    return [[_read_int(f"{name}[{i + 1}][{j + 1}]: ") for j in range(cols)]
            for i in range(rows)]


def main(argv: list[str] | None = None) -> int:
    r = _read_int("Enter the number of rows for matrix 'A': ")
    c = _read_int("Enter the number of columns of matrix 'A': ")
    print(f"Rows of matrix 'B' has been set to {c} to make matrix multiplication possible")
    c2 = _read_int("Enter the number of columns of matrix 'B': ")
    a = _read_matrix(r, c, "a")
    b = _read_matrix(c, c2, "b")
    print("Product of 'A' and 'B' is: ")
    print(format_matrix(multiply(a, b)))
    return 0