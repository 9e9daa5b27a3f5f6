"""Preview a hex colour as a block of terminal cells."""

from __future__ import annotations

import re
import sys

_PAIR = re.compile(r"\+?[0-9A-Fa-f]+")
_ROWS = 5
_COLUMNS = 10


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse '#rrggbb' (the '#' is optional) into red, green and blue."""
    digits = value.strip().lstrip("#")
    if len(digits.encode("utf-8")) != 6:
        raise ValueError(f"not a six-digit hex colour: {value!r}")
    pairs = [digits[i:i + 2] for i in range(0, 6, 2)]
    if not all(_PAIR.fullmatch(pair) for pair in pairs):
        raise ValueError(f"not a six-digit hex colour: {value!r}")
    red, green, blue = (int(pair, 16) for pair in pairs)
    return red, green, blue


def colour_block(red: int, green: int, blue: int) -> str:
    """Five lines of ten true-colour background cells."""
    if not all(0 <= c <= 255 for c in (red, green, blue)):
        raise ValueError("colour components must be between 0 and 255")
    cell = f"\x1b[48;2;{red};{green};{blue}m  \x1b[0m"
    return "\n".join(cell * _COLUMNS for _ in range(_ROWS))


def main(argv: list[str] | None = None) -> int:
    raw = input("Enter the colour to be shown in hex format (Ex: #0e0e0e): ")
    try:
        red, green, blue = hex_to_rgb(raw)
    except ValueError:
        print("Invalid colour entered.... Please check the input and try again....",
              file=sys.stderr)
        return 1
    print(f"Preview of Colour {raw}\n")
    print(colour_block(red, green, blue))
    return 0