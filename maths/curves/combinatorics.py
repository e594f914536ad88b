from typing import List
from .errors import DegreeOutOfRangeError

FACTORIAL_TABLE_SIZE = 16


def _build_factorial_table(size: int) -> List[int]:
    table = []
    acc = 1
    for i in range(size + 1):
        table.append(acc)
        acc *= i + 1
    return table


FACTORIALS = tuple(_build_factorial_table(FACTORIAL_TABLE_SIZE))


def factorial(n: int) -> int:
    """Look up n! for n in [0, 16]; anything else is a curve we do not support"""
    if n < 0 or n >= len(FACTORIALS):
        raise DegreeOutOfRangeError(f"Factorial argument must be between 0 and {len(FACTORIALS) - 1}, got {n}")
    return FACTORIALS[n]


def choose(n: int, r: int) -> float:
    """Binomial coefficient nCr built from the factorial table"""
    if r < 0 or r > n:
        raise DegreeOutOfRangeError(f"Cannot choose {r} out of {n}")
    return factorial(n) / (factorial(r) * factorial(n - r))


def bernstein(n: int, v: int, t: float) -> float:
    """Calculate Bernstein polynomial B(v,n,t)"""
    return choose(n, v) * (t ** v) * ((1.0 - t) ** (n - v))
