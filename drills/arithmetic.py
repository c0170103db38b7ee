"""Number drills: digit manipulation, primes, factorials, powers and a calculator."""

from __future__ import annotations

import operator
from collections.abc import Callable

_DIGIT_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

_NOTE_VALUES = (500, 50, 20, 1)

_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative")


def binary_to_decimal(n: int) -> int:
    """Value of an integer whose decimal digits are binary digits, e.g. 101 -> 5."""
    _require_non_negative(n, "binary number")
    digits = str(n)
    if set(digits) - {"0", "1"}:
        raise ValueError(f"{n} is not made of binary digits")
    return sum(1 << i for i, digit in enumerate(reversed(digits)) if digit == "1")


def decimal_to_binary(n: int) -> int:
    """Integer whose decimal digits spell ``n`` in binary, e.g. 5 -> 101."""
    _require_non_negative(n, "number")
    result = 0
    place = 1
    while n:
        result += (n & 1) * place
        n >>= 1
        place *= 10
    return result


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``; zero has one digit."""
    return len(str(abs(n)))


def fibonacci_series(n: int) -> list[int]:
    """First ``n`` Fibonacci numbers, starting from 0."""
    series = []
    a, b = 0, 1
    for _ in range(n):
        series.append(a)
        a, b = b, a + b
    return series


def count_notes(amount: int) -> dict[int, int]:
    """Greedy breakdown of ``amount`` into 500, 50, 20 and 1 notes.

    Only denominations actually used appear in the result.
    """
    notes = {}
    for value in _NOTE_VALUES:
        if amount >= value:
            notes[value], amount = divmod(amount, value)
    return notes


def reverse_number(n: int) -> int:
    """Digits of ``n`` in reverse order, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def is_prime(n: int) -> bool:
    """True if ``n`` is a prime number."""
    if n <= 1:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def digit_sum_and_product(n: int) -> tuple[int, int]:
    """Sum and product of the decimal digits of ``n``; for 0 this is (0, 1)."""
    _require_non_negative(n, "number")
    total, product = 0, 1
    while n:
        n, digit = divmod(n, 10)
        total += digit
        product *= digit
    return total, product


def sum_of_evens(n: int) -> int:
    """Sum of the even numbers from 1 to ``n`` inclusive."""
    return sum(range(2, n + 1, 2))


def factorial(n: int) -> int:
    """``n!`` for a non-negative integer."""
    _require_non_negative(n, "factorial argument")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def n_choose_r(n: int, r: int) -> int:
    """Number of ways to choose ``r`` items out of ``n``."""
    if not 0 <= r <= n:
        raise ValueError("r must lie between 0 and n")
    return factorial(n) // (factorial(r) * factorial(n - r))


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    _require_non_negative(n, "index")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def power_of_two(n: int) -> int:
    """Two raised to the non-negative power ``n``."""
    _require_non_negative(n, "exponent")
    return 1 << n


def power(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by repeated squaring."""
    _require_non_negative(exponent, "exponent")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    square = half * half
    return square if exponent % 2 == 0 else base * square


def say_digits(n: int) -> list[str]:
    """English words for the digits of ``n``, most significant first.

    Zero yields no words.
    """
    _require_non_negative(n, "number")
    if n == 0:
        return []
    return [_DIGIT_WORDS[int(digit)] for digit in str(n)]


def calculate(a: float, b: float, op: str) -> float:
    """Apply one of ``+ - * /`` to ``a`` and ``b``."""
    try:
        func = _OPERATORS[op]
    except KeyError:
        raise ValueError(f"unknown operator {op!r}") from None
    return func(float(a), float(b))


def classify_char(ch: str) -> str:
    """Classify one character as "upper", "lower" or "numeric" (anything else)."""
    if len(ch) != 1:
        raise ValueError("exactly one character is required")
    if "A" <= ch <= "Z":
        return "upper"
    if "a" <= ch <= "z":
        return "lower"
    return "numeric"