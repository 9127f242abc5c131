"""Number-theory helpers: powers, gcd, inverses, sieves and factorisation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

MOD = 1000000007

Factorization = Sequence[tuple[int, int]]


def binpow(a: int, b: int) -> int:
    """Return ``a`` raised to the non-negative power ``b``."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return a**b


def modpow(a: int, b: int, m: int = MOD) -> int:
    """Return ``a ** b`` modulo ``m`` by binary exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if b == 0:
        return 1
    return pow(a, b, m)


def bin_inv(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo the prime ``m`` via Fermat's theorem."""
    return modpow(a, m - 2, m)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    return a // gcd(a, b) * b


def gcd_extended(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = gcd_extended(b, a % b)
    return d, y1, x1 - y1 * (a // b)


def mod_inv(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo ``m``; they must be coprime."""
    g, x, _ = gcd_extended(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def mod_inv_table(m: int = MOD) -> list[int]:
    """Return the inverses of ``0..m-1`` modulo the prime ``m`` (entry 0 is 0)."""
    if m < 2:
        raise ValueError("modulus must be at least 2")
    inv = [0, 1]
    for i in range(2, m):
        inv.append(m - m // i * inv[m % i] % m)
    return inv[:m]


def find_any_solution(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """Solve ``a*x + b*y == c``; return ``(x, y, g)`` or ``None`` if unsolvable."""
    g, x0, y0 = gcd_extended(abs(a), abs(b))
    if g == 0:
        raise ValueError("a and b must not both be zero")
    if c % g:
        return None
    x0 *= c // g
    y0 *= c // g
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0, g


def divisors(x: int) -> list[int]:
    """Return the divisors of ``x`` in pairs ``i, x // i`` for increasing ``i``."""
    result: list[int] = []
    i = 1
    while i * i <= x:
        if x % i == 0:
            result.append(i)
            if i != x // i:
                result.append(x // i)
        i += 1
    return result


def is_prime(x: int) -> bool:
    """Return whether ``x`` is prime, by trial division."""
    if x < 2:
        return False
    return all(x % i for i in range(2, math.isqrt(x) + 1))


def factorize(x: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of ``x`` as ``(prime, exponent)`` pairs."""
    if x < 1:
        raise ValueError("can only factorise positive integers")
    factors: list[tuple[int, int]] = []

    def strip(p: int) -> None:
        nonlocal x
        exponent = 0
        while x % p == 0:
            x //= p
            exponent += 1
        if exponent:
            factors.append((p, exponent))

    strip(2)
    i = 3
    while i * i <= x:
        strip(i)
        i += 2
    if x > 1:
        factors.append((x, 1))
    return factors


def phi(pf: Iterable[tuple[int, int]], n: int) -> int:
    """Return Euler's totient of ``n`` given its factorisation ``pf``."""
    result = n
    for p, _ in pf:
        result -= result // p
    return result


def phi_sieve(x: int) -> list[int]:
    """Return Euler's totient for every integer ``0..x``."""
    if x < 0:
        raise ValueError("limit must be non-negative")
    values = list(range(x + 1))
    for i in range(2, x + 1):
        if values[i] == i:
            for j in range(i, x + 1, i):
                values[j] -= values[j] // i
    return values


def sieve(x: int) -> list[int]:
    """Return all primes up to ``x`` by the sieve of Eratosthenes."""
    if x < 2:
        return []
    marks = bytearray([1]) * (x + 1)
    marks[0] = marks[1] = 0
    primes: list[int] = []
    for i in range(2, x + 1):
        if marks[i]:
            primes.append(i)
            marks[i * i :: i] = bytes(len(range(i * i, x + 1, i)))
    return primes


def div_num(pf: Iterable[tuple[int, int]]) -> int:
    """Return the number of divisors from a factorisation."""
    return math.prod(e + 1 for _, e in pf)


def div_sum(pf: Iterable[tuple[int, int]]) -> int:
    """Return the sum of divisors from a factorisation."""
    return math.prod(sum(p**k for k in range(e + 1)) for p, e in pf)


@dataclass(frozen=True)
class Congruence:
    """The congruence ``x ≡ a (mod m)``."""

    a: int
    m: int


def chinese_remainder_theorem(congruences: Iterable[Congruence]) -> int:
    """Return the smallest non-negative solution of pairwise-coprime congruences."""
    congruences = list(congruences)
    total = math.prod(c.m for c in congruences)
    solution = 0
    for c in congruences:
        partial = total // c.m
        inverse = mod_inv(partial, c.m)
        solution = (solution + c.a * partial % total * inverse) % total
    return solution


def mobius_sieve(x: int) -> list[int]:
    """Return the Möbius function for every integer ``0..x`` (entry 0 is 0)."""
    if x < 1:
        raise ValueError("limit must be at least 1")
    mobius = [0] * (x + 1)
    mobius[1] = -1
    for i in range(1, x + 1):
        if mobius[i]:
            mobius[i] = -mobius[i]
            for j in range(2 * i, x + 1, i):
                mobius[j] += mobius[i]
    return mobius