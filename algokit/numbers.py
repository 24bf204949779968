"""Small number-theory and digit utilities."""

from __future__ import annotations

from math import isqrt, prod


def count_set_bits_up_to(n: int) -> int:
    """Return the total number of 1 bits in the binary forms of 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    while n:
        x = n.bit_length() - 1
        power = 1 << x
        # Numbers below 2**x carry x * 2**(x-1) ones; each of 2**x..n adds a leading one.
        total += (x * power) // 2 + (n - power + 1)
        n -= power
    return total


def is_even(n: int) -> bool:
    """Return whether *n* is divisible by two."""
    return n % 2 == 0


def to_binary(n: int) -> str:
    """Return the binary digits of *n*; zero gives an empty string."""
    if n < 0:
        raise ValueError("n must not be negative")
    return format(n, "b") if n else ""


def from_binary(s: str) -> int:
    """Return the value of the binary string *s*; characters other than '1'
    count as zero bits."""
    return sum(1 << position for position, char in enumerate(reversed(s)) if char == "1")


def fibonacci(n: int) -> list[int]:
    """Return the first *n* Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def factorial(n: int) -> int:
    """Return n!; any n below 1 gives 1."""
    return prod(range(1, n + 1))


def is_number_palindrome(n: int) -> bool:
    """Return whether the decimal digits of *n* read the same backwards.

    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def recursion_trace(n: int) -> list[int]:
    """Return the values visited by a recursion that records n on the way
    down and again on the way back up."""
    if n < 1:
        return []
    return [n, *recursion_trace(n - 1), n]


def reverse_number(n: int) -> int:
    """Return *n* with its decimal digits reversed; trailing zeros vanish."""
    if n < 0:
        raise ValueError("n must be a non-negative integer")
    return int(str(n)[::-1])


def primes_up_to(n: int) -> list[int]:
    """Return every prime from 2 to *n* inclusive."""
    if n < 2:
        return []
    sieve = [True] * (n + 1)
    sieve[0] = sieve[1] = False
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return [i for i, is_prime in enumerate(sieve) if is_prime]


def _binary_value(value: int | str) -> int:
    digits = str(value)
    if not digits or any(char not in "01" for char in digits):
        raise ValueError(f"{value!r} is not a binary number")
    return int(digits, 2)


def add_binary(a: int | str, b: int | str) -> str:
    """Return the sum of two binary numbers, written with the digits 0 and 1,
    as a binary string; a zero sum gives an empty string."""
    return to_binary(_binary_value(a) + _binary_value(b))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of *n*; non-positive n gives 0."""
    if n <= 0:
        return 0
    return sum(int(digit) for digit in str(n))