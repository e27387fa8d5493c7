"""String problems: trimming, decimal shifting, scoring and position descriptions."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Sequence

_WHITESPACE = " \f\n\r\t\v"
MODULUS = 1_000_000_007
_UNKNOWN_OFFSET = 100


def trim(s: str) -> str:
    """Drop leading whitespace and keep ``last + 1`` characters from there.

    ``last`` is the index of the final non-blank character, so trailing
    whitespace is removed fully only when there is no leading whitespace.
    """
    rest = s.lstrip(_WHITESPACE)
    if not rest:
        return ""
    first = len(s) - len(rest)
    last = len(s.rstrip(_WHITESPACE)) - 1
    return s[first : first + last + 1]


def divide_by_power_of_ten(n: str, m: str) -> str:
    """Divide the decimal string ``n`` by ``m`` (a 1 followed by zeros) without trailing zeros."""
    shift = sum(1 for ch in m if ch != "1")
    if shift == 0:
        return n
    integer = n[: len(n) - shift] if len(n) > shift else ""
    fraction = n[max(0, len(n) - shift) :].rjust(shift, "0").rstrip("0")
    integer = integer or "0"
    return f"{integer}.{fraction}" if fraction else integer


def mastermind_score(code: str, guess: str) -> tuple[int, int]:
    """Return right-place and wrong-place matches of capital letters."""
    if len(code) != len(guess):
        raise ValueError("code and guess must have the same length")
    exact = 0
    code_left: Counter[str] = Counter()
    guess_left: Counter[str] = Counter()
    for c, g in zip(code, guess):
        if c == g:
            exact += 1
        else:
            code_left[c] += 1
            guess_left[g] += 1
    near = sum(min(code_left[ch], guess_left[ch]) for ch in string.ascii_uppercase)
    return exact, near


def ordered_binary_value(digits: str) -> int:
    """Grow a binary number outward from the middle of ``digits``, modulo 1e9+7."""
    n = len(digits)
    right = n // 2
    left = right - 1
    value = 0
    for remaining in range(n, 0, -1):
        if remaining % 2:
            take_right = n - right > left
        else:
            take_right = not digits[left] > digits[right]
        if take_right:
            bit = digits[right]
            right += 1
        else:
            bit = digits[left]
            left -= 1
        value = (value * 2 + int(bit)) % MODULUS
    return value


def count_free_parking(street: str) -> int:
    """Count ``-`` spots not right after ``S``, not before ``S`` or ``B``, not two before ``B``."""
    count = 0
    for i, ch in enumerate(street):
        if ch != "-":
            continue
        if i > 0 and street[i - 1] == "S":
            continue
        if street[i + 1 : i + 2] in ("S", "B"):
            continue
        if street[i + 2 : i + 3] == "B":
            continue
        count += 1
    return count


def max_sleep_distance(row: str) -> int:
    """Return the largest distance to the nearest occupied ``X`` a newcomer can get."""
    last = -1
    best = 0
    for i, ch in enumerate(row):
        if ch == "X":
            gap = i - 1 if last < 0 else (i - last - 2) // 2
            best = max(best, gap)
            last = i
    return max(best, len(row) - last - 2)


def describe_positions(names: Sequence[str], queries: Iterable[int]) -> list[str]:
    """Describe each 1-based position relative to its nearest known name; ``?`` is unknown."""
    people = list(names)

    def distances(order: Iterable[str]) -> list[int]:
        result: list[int] = []
        counter = _UNKNOWN_OFFSET
        for name in order:
            counter = counter + 1 if name.startswith("?") else 0
            result.append(counter)
        return result

    from_left = distances(people)
    from_right = distances(reversed(people))[::-1]

    def name_at(index: int) -> str:
        if not 0 <= index < len(people):
            raise ValueError("no known name to refer to")
        return people[index]

    answers: list[str] = []
    for position in queries:
        i = position - 1
        if not 0 <= i < len(people):
            raise ValueError(f"position {position} is out of range")
        left, right = from_left[i], from_right[i]
        if left == 0:
            answers.append(people[i])
        elif left < right:
            answers.append("right of " * left + name_at(i - left))
        elif left > right:
            answers.append("left of " * right + name_at(i + right))
        else:
            answers.append(f"middle of {name_at(i - left)} and {name_at(i + right)}")
    return answers