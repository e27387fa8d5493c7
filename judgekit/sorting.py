"""Sorting utilities: an LSD radix sort, inversion counting and problems built on them."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_SIGN_BIAS = 1 << 31
_RADIX_BITS = 8
_RADIX = 1 << _RADIX_BITS
_MASK = _RADIX - 1
_WORD_BITS = 32

_EVEN_WINNER = "Carlos"
_ODD_WINNER = "Marcelo"


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the 32-bit signed integers in ascending order using byte-wise LSD radix sort."""
    items = list(values)
    for value in items:
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"{value} does not fit in a 32-bit signed integer")

    for shift in range(0, _WORD_BITS, _RADIX_BITS):
        buckets: list[list[int]] = [[] for _ in range(_RADIX)]
        for value in items:
            buckets[((value + _SIGN_BIAS) >> shift) & _MASK].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items


def array_is_sorted(values: Sequence[int]) -> bool:
    """Tell whether no element is greater than the one after it."""
    return all(a <= b for a, b in zip(values, values[1:]))


def random_int_array(n: int, low: int, high: int, seed: int | None = None) -> list[int]:
    """Return ``n`` integers drawn uniformly from ``[low, high]``."""
    if low > high:
        raise ValueError("low must not exceed high")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(n)]


def format_array(values: Iterable[int]) -> str:
    """Render values as ``[a, b, c]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_and_count(list(values))[1]


def magic_sequence(n: int, a: int, b: int, c: int, x: int, y: int) -> int:
    """Generate the sequence ``s0 = a, s_i = (s_{i-1} * b + a) % c``, sort it and hash it."""
    if n <= 0:
        return 0
    sequence = [a]
    for _ in range(1, n):
        sequence.append((sequence[-1] * b + a) % c)
    if not array_is_sorted(sequence):
        sequence = radix_sort(sequence)
    hashed = 0
    for value in sequence:
        hashed = (hashed * x + value) % y
    return hashed


def bread_possible(first_order: Sequence[int], required_order: Sequence[int]) -> bool:
    """Tell whether the first order can be turned into the required one by 3-rotations."""
    positions: dict[int, int] = {}
    for index, item in enumerate(required_order):
        positions.setdefault(item, index)
    mapped = [positions.get(item, 0) for item in first_order]
    return count_inversions(mapped) % 2 == 0


def permutation_winner(permutation: Iterable[int]) -> str:
    """Name the winner of the swap game: Carlos on an even inversion count, else Marcelo."""
    items = list(permutation)
    inversions = count_inversions(items)
    parity = inversions % 2
    if parity == 0:
        return _EVEN_WINNER
    return _ODD_WINNER