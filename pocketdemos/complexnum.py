"""Arithmetic on two complex numbers."""

from __future__ import annotations


def _fmt(x: float) -> str:
    return str(int(x)) if x == int(x) else repr(x)


def format_complex(z: complex) -> str:
    """Format as 're+imi' or 're-imi'."""
    if z.imag < 0:
        return f"{_fmt(z.real)}-{_fmt(-z.imag)}i"
    return f"{_fmt(z.real)}+{_fmt(z.imag)}i"


def describe(a: complex, b: complex) -> list[str]:
    """Lines describing operations on a and b."""
    return [
        f"-\tComplex number a: {format_complex(a)}",
        f"-\tComplex number b: {format_complex(b)}",
        f"-\tSum of a and b = {format_complex(a + b)}",
        f"-\tDifference of a and b = {format_complex(a - b)}",
        f"-\tProduct of a and b = {format_complex(a * b)}",
        f"-\tQuotient of a and b = {format_complex(a / b)}",
        f"-\tMagnitude of a = |a| = {_fmt(abs(a))}",
        f"-\tMagnitude of b = |b| = {_fmt(abs(b))}",
        f"-\tConjugate of a = {format_complex(a.conjugate())}",
        f"-\tConjugate of b = {format_complex(b.conjugate())}",
    ]


def _read_complex() -> complex:
    real = float(input("Enter the real part: ").strip())
    imag = float(input("Enter the imaginary part: ").strip())
    return complex(real, imag)


def main(argv: list[str] | None = None) -> int:
    print("Input for first complex number 'a':")
    a = _read_complex()
    print("\nInput for second complex number 'b':")
    b = _read_complex()
    print()
    print("\n".join(describe(a, b)))
    return 0