"""Number-theoretic routines: modular powers, gcd and Karatsuba multiplication."""

from __future__ import annotations

MODULUS = 1_000_000_007


def _cmod(value: int) -> int:
    """Remainder modulo ``MODULUS`` carrying the sign of ``value``."""
    remainder = abs(value) % MODULUS
    return -remainder if value < 0 else remainder


def binary_power(base: int, exponent: int) -> int:
    """``base ** exponent`` reduced modulo 1_000_000_007 by repeated squaring.

    The remainder keeps the sign of the true power; exponents of zero or
    less give 1.
    """
    negative = base < 0 and exponent > 0 and exponent % 2 == 1
    magnitude = 1
    square = abs(base) % MODULUS
    while exponent > 0:
        if exponent % 2 == 1:
            magnitude = magnitude * square % MODULUS
        square = square * square % MODULUS
        exponent //= 2
    return -magnitude if negative else magnitude


def euclidean_gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("gcd needs non-negative integers")
    while a and b:
        if a > b:
            a, b = b, a % b
        else:
            b %= a
    return b if a == 0 else a


def fast_power(base: int, exponent: int) -> int:
    """``base ** exponent`` by recursive halving, reduced modulo 1_000_000_007.

    An exponent of 1 returns ``base`` unreduced; an exponent of 0 gives 1.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = fast_power(_cmod(base * base), exponent // 2)
    if exponent % 2 == 0:
        return _cmod(half)
    return _cmod(base * half)


def karatsuba(x: int, y: int) -> int:
    """Product of ``x`` and ``y`` by Karatsuba's divide-and-conquer method."""
    if x < 10 or y < 10:
        return x * y
    m = len(str(min(x, y))) // 2
    base = 10**m
    high_x, low_x = divmod(x, base)
    high_y, low_y = divmod(y, base)
    z0 = karatsuba(low_x, low_y)
    z2 = karatsuba(high_x, high_y)
    z1 = karatsuba(low_x + high_x, low_y + high_y) - z2 - z0
    return z2 * base * base + z1 * base + z0