"""Small arithmetic routines: primes, factorials, series and friends."""

from __future__ import annotations

import argparse
import math
from decimal import Decimal


def _fmt(x: float) -> str:
    """Format a float the way a plain numeric display shows it."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x == int(x) and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def _non_negative(n: int, what: str = "value") -> int:
    if n < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {n}")
    return n


def is_prime(n: int) -> bool:
    """Report whether n has no divisor between 2 and its square root."""
    _non_negative(n)
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def factorial(n: int) -> int:
    """Factorial where values up to 2 map to themselves (so 0 gives 0)."""
    _non_negative(n)
    result = n
    for k in range(n - 1, 2, -1):
        result *= k
    if n > 2:
        result *= 2
    return result


def fibonacci(count: int) -> list[int]:
    """Return the first count terms of the Fibonacci series."""
    _non_negative(count, "count")
    terms = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def hcf(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm."""
    _non_negative(a)
    _non_negative(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Lowest common multiple; raises ZeroDivisionError when both are zero."""
    return (a * b) // hcf(a, b)


def binomial(n: int, r: int) -> int:
    """Number of ways to choose r items from n."""
    _non_negative(n)
    _non_negative(r)
    if r > n:
        raise ValueError("r must not exceed n")
    return math.comb(n, r)


def pascal_rows(count: int) -> list[list[int]]:
    """Return the first count rows of Pascal's triangle."""
    _non_negative(count, "count")
    return [[binomial(i, j) for j in range(i + 1)] for i in range(count)]


def classify_range(x: int) -> str:
    """Describe which bracket x falls into."""
    if 1 <= x <= 10:
        return "Number is between 1 and 10!"
    if 11 <= x <= 50:
        return "Number is between 11 and 50!"
    if 51 <= x <= 100:
        return "Number is between 51 and 100"
    return "Number is greater than 100!!"


def scientific(x: float) -> str:
    """Shortest scientific notation, e.g. 1234.5 -> '1.2345e3'."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    if x == 0:
        return f"{sign}0e0"
    _, digits, exponent = Decimal(repr(abs(float(x)))).as_tuple()
    text = "".join(map(str, digits)).rstrip("0")
    trailing = len(digits) - len(text)
    exp = exponent + trailing + len(text) - 1
    mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
    return f"{sign}{mantissa}e{exp}"


def simple_interest(principal: float, rate: float, years: float) -> float:
    """Simple interest for a rate given in percent."""
    return principal * rate * years / 100.0


def square_root(x: float) -> float:
    """Square root of a non-negative number."""
    if x < 0:
        raise ValueError("The square root of negative numbers are imaginary...")
    return math.sqrt(x)


def multiplication_table(n: int, upto: int) -> list[str]:
    """Lines of the multiplication table of n from 1 to upto."""
    return [f"{n} x {i} = {n * i}" for i in range(1, upto + 1)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="arith", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("prime").add_argument("n", type=int)
    sub.add_parser("factorial").add_argument("n", type=int)
    sub.add_parser("fibonacci").add_argument("count", type=int)
    for name in ("hcf", "lcm"):
        p = sub.add_parser(name)
        p.add_argument("a", type=int)
        p.add_argument("b", type=int)
    sub.add_parser("pascal").add_argument("rows", type=int)
    sub.add_parser("range").add_argument("x", type=int)
    sub.add_parser("scientific").add_argument("x", type=float)
    p = sub.add_parser("interest")
    for name in ("principal", "rate", "years"):
        p.add_argument(name, type=float)
    sub.add_parser("sqrt").add_argument("x", type=float)
    p = sub.add_parser("table")
    p.add_argument("n", type=int)
    p.add_argument("upto", type=int)
    args = parser.parse_args(argv)

    try:
        match args.command:
            case "prime":
                verdict = "a prime" if is_prime(args.n) else "not a prime"
                print(f"{args.n} is {verdict} number!")
            case "factorial":
                print(f"The factorial of {args.n} is {factorial(args.n)}")
            case "fibonacci":
                print(f"Fibonacci series up to {args.count}:")
                print("".join(f"{t}\t" for t in fibonacci(args.count)))
            case "hcf":
                print(f"The highest common factor (HCF) of {args.a} and {args.b} "
                      f"is: {hcf(args.a, args.b)}")
            case "lcm":
                print(f"The lowest common multiple (LCM) of {args.a} and {args.b} "
                      f"is: {lcm(args.a, args.b)}")
            case "pascal":
                for row in pascal_rows(args.rows):
                    print("".join(f"{v}\t" for v in row))
            case "range":
                print(classify_range(args.x))
            case "scientific":
                print(f"Default scientific form: {scientific(args.x)}")
            case "interest":
                value = simple_interest(args.principal, args.rate, args.years)
                print(f"The resultant Simple Interest is = {value:.2f}")
            case "sqrt":
                print(f"The square root of {_fmt(args.x)} is {_fmt(square_root(args.x))}")
            case "table":
                print(f"\nMultiplication table for {args.n} is as follows:")
                print("\n".join(multiplication_table(args.n, args.upto)))
    except (ValueError, ZeroDivisionError) as exc:
        print(exc)
        return 1
    return 0