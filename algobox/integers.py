"""Integer utilities: digits, series, binary form, Fibonacci and Hanoi."""

from __future__ import annotations

from collections.abc import Iterator


def square_series(n: int) -> str:
    """Return the text ``1^2+2^2+...+n^2``; empty for ``n < 1``."""
    return "+".join(f"{i}^2" for i in range(1, n + 1))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, carrying its sign."""
    if n < 0:
        return -digit_sum(-n)
    return sum(int(digit) for digit in str(n))


def is_palindrome_number(n: int) -> bool:
    """Tell whether the decimal digits of ``n`` read the same both ways."""
    digits = str(abs(n))
    return digits == digits[::-1]


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def to_binary(n: int) -> str:
    """Return the binary digits of a positive ``n``; empty for ``n <= 0``."""
    return format(n, "b") if n > 0 else ""


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(max(count, 0)):
        terms.append(a)
        a, b = b, a + b
    return terms


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def hanoi_moves(
    n: int, source: str = "p", target: str = "q", spare: str = "r"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_pole, to_pole)`` moves solving Hanoi for ``n`` disks."""
    if n <= 0:
        return
    yield from hanoi_moves(n - 1, source, spare, target)
    yield n, source, target
    yield from hanoi_moves(n - 1, spare, target, source)