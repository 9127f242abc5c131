"""Integer matrix multiplication and fast exponentiation."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[int]]


def matrix_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product ``a × b``."""
    if not a or not b or not b[0]:
        raise ValueError("matrices must not be empty")
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def matrix_expo(base: Sequence[Sequence[int]], n: int) -> Matrix:
    """Return the square matrix ``base`` raised to the non-negative power ``n``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    size = len(base)
    if any(len(row) != size for row in base):
        raise ValueError("matrix must be square")
    result: Matrix = [[int(i == j) for j in range(size)] for i in range(size)]
    current: Matrix = [list(row) for row in base]
    while n:
        if n % 2:
            result = matrix_mul(result, current)
        current = matrix_mul(current, current)
        n //= 2
    return result