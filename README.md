# cpkit

A small toolbox of algorithms that come up again and again in programming
contests, together with helpers for printing debug output to standard error.
It is a library only: it has no command-line program and reads no input of its
own.

## Installation

```
pip install cpkit
```

For running the test suite:

```
pip install "cpkit[test]"
pytest
```

## Modules

### `cpkit.numtheory`

Integer arithmetic and number theory. `MOD` is 1 000 000 007 and is the
default modulus wherever one is taken.

- `binpow(a, b)`, `modpow(a, b, m=MOD)`: exponentiation, plain and modular.
  A negative exponent raises `ValueError`.
- `gcd(a, b)`, `lcm(a, b)`, `gcd_extended(a, b)`: the extended form returns
  `(g, x, y)` with `a*x + b*y == g`.
- `bin_inv(a, m=MOD)`: the inverse of `a` modulo a prime `m`, by Fermat's
  little theorem.
- `mod_inv(a, m=MOD)`: the inverse by the extended Euclidean algorithm;
  raises `ValueError` when `a` and `m` are not coprime.
- `mod_inv_table(m=MOD)`: a list of the inverses of `0..m-1` modulo the prime
  `m` (entry 0 is 0); `m` must be at least 2.
- `find_any_solution(a, b, c)`: one solution of `a*x + b*y == c`, returned as
  `(x, y, g)` where `g = gcd(|a|, |b|)`, or `None` if there is none. Raises
  `ValueError` when `a` and `b` are both zero.
- `divisors(x)`: the divisors of `x`, listed as pairs `i, x // i` for
  increasing `i` (so not sorted).
- `is_prime(x)`: primality by trial division.
- `factorize(x)`: `(prime, exponent)` pairs for a positive `x`.
- `phi(pf, n)`, `div_num(pf)`, `div_sum(pf)`: Euler's totient, the number of
  divisors and the sum of divisors, each computed from a factorisation.
- `sieve(x)`: all primes up to `x`.
- `phi_sieve(x)`, `mobius_sieve(x)`: the totient and Möbius functions for every
  value `0..x`.
- `Congruence(a, m)` and `chinese_remainder_theorem(congruences)`: the
  smallest non-negative solution of congruences with pairwise coprime moduli.

```python
from cpkit.numtheory import factorize, div_sum, chinese_remainder_theorem, Congruence

pf = factorize(12)          # [(2, 2), (3, 1)]
div_sum(pf)                 # 28
chinese_remainder_theorem([Congruence(2, 3), Congruence(3, 5), Congruence(2, 7)])  # 23
```

### `cpkit.geometry`

Integer-coordinate 2D geometry built on the frozen dataclass `Point(x, y)`:

- `orientation(p, q, r)` returns an `Orientation` (an `IntEnum`):
  `COLLINEAR` (0), `CLOCKWISE` (1) or `COUNTERCLOCKWISE` (2).
- `on_segment(p, q, r)` tells whether `q` lies in the bounding box of `pr`.
- `do_intersect(p1, q1, p2, q2)` tells whether two segments share a point.
- `are_collinear(p1, p2, p3)` tells whether three points lie on one line.
- `intersection(p1, q1, p2, q2)` gives the crossing point of two lines as a
  pair of floats, or `None` for parallel lines. For segments, call
  `do_intersect` first.

### `cpkit.strings`

Works on any sequence, strings included.

- `prefix_function(s)`: the prefix function used by Knuth–Morris–Pratt.
- `kmp(s, p)`: the number of occurrences of `p` in `s`, overlapping ones
  included. An empty pattern raises `ValueError`.
- `all_prefixes_cnt(s)`: for each prefix length from 1 to `len(s)`, how many
  times that prefix occurs in `s`.

### `cpkit.matrix`

- `matrix_mul(a, b)`: the product of two integer matrices; raises
  `ValueError` for empty matrices or mismatched inner dimensions.
- `matrix_expo(base, n)`: a square matrix raised to the power `n >= 0`.

```python
from cpkit.matrix import matrix_expo

matrix_expo([[1, 1], [1, 0]], 10)[0][1]   # 55, the 10th Fibonacci number
```

### `cpkit.debugging`

- `format_value(value)` renders lists and deques as `[1, 2]`, tuples as
  `(1, 2)`, mappings as `{a: 1}` and sets as `{1, 2}` (sorted when the items
  are comparable). Strings appear without quotes, booleans as `1`/`0` and
  floats with six significant digits.
- `dbg_out(*args, file=None)` writes each value preceded by a space, then a
  newline.
- `dbg(label, *args, file=None)` writes `(label):` followed by the values.

Output goes to standard error unless `file` is given.

```python
from cpkit.debugging import dbg

dbg("xs, m", [1, 2], {"a": 1})   # stderr: (xs, m): [1, 2] {a: 1}
```