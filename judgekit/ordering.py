"""Custom orderings: comparators, stable multi-key sorts and selection by rank."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence

_CLASS_LEVELS = 10
_DEFAULT_CLASS = "middle"
_NAME_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_NAME_RANK = {ch: index for index, ch in enumerate(_NAME_ALPHABET)}


def _c_remainder(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend, as truncating division gives."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def sort_by_modulo(numbers: Iterable[int], m: int) -> list[int]:
    """Order by remainder mod ``m``; within a remainder odd numbers come first, descending,
    then even numbers, ascending."""
    if m == 0:
        raise ZeroDivisionError("modulus must not be zero")

    def key(n: int) -> tuple[int, int, int]:
        odd = n % 2 != 0
        return (_c_remainder(n, m), 0 if odd else 1, -n if odd else n)

    return sorted(numbers, key=key)


def rank_classy(people: Iterable[tuple[str, str]]) -> list[str]:
    """Rank people by hyphenated class descriptions read right to left, highest first.

    Missing levels count as ``middle``; equal classes are ordered by name.
    """

    def class_key(description: str) -> tuple[str, ...]:
        levels = description.split("-")[::-1][:_CLASS_LEVELS]
        return tuple(levels + [_DEFAULT_CLASS] * (_CLASS_LEVELS - len(levels)))

    entries = sorted(people, key=lambda person: person[0])
    entries.sort(key=lambda person: class_key(person[1]), reverse=True)
    return [name for name, _ in entries]


def dyslectionary_sort(words: Iterable[str]) -> list[str]:
    """Sort words by comparing them from their last letter backwards."""
    return sorted(words, key=lambda word: word[::-1])


def format_dyslectionary(words: Iterable[str]) -> list[str]:
    """Return the dyslectionary order with each word right-aligned to the longest one."""
    ordered = dyslectionary_sort(words)
    width = max((len(word) for word in ordered), default=0)
    return [word.rjust(width) for word in ordered]


def music_sort(
    attributes: Sequence[str],
    songs: Iterable[Sequence[str]],
    commands: Iterable[str],
) -> list[list[tuple[str, ...]]]:
    """Stably re-sort the song list by each commanded attribute in turn.

    Returns a snapshot of the list after every command. An unknown attribute
    sorts by the first one.
    """
    columns = {name: index for index, name in reversed(list(enumerate(attributes)))}
    table = [tuple(song) for song in songs]
    snapshots: list[list[tuple[str, ...]]] = []
    for command in commands:
        column = columns.get(command, 0)
        table.sort(key=lambda song: song[column])
        snapshots.append(list(table))
    return snapshots


def unsortedness(sequence: Sequence) -> int:
    """Count pairs of positions whose items are out of order."""
    return sum(
        1
        for i, earlier in enumerate(sequence)
        for later in sequence[i + 1 :]
        if later < earlier
    )


def sort_by_unsortedness(sequences: Iterable[str]) -> list[str]:
    """Stably sort sequences from most sorted to least sorted."""
    return sorted(sequences, key=unsortedness)


def _letter_rank(ch: str) -> int:
    if ch.isascii() and ch.isalpha():
        return ord(ch.lower()) - ord("a") + 1
    return 0


def sideways_sort(rows: Sequence[str]) -> list[str]:
    """Stably sort the columns of a grid, ignoring case, and return the new rows."""
    if not rows:
        return []
    columns = ["".join(column) for column in zip(*rows)]
    columns.sort(key=lambda column: tuple(_letter_rank(ch) for ch in column))
    return ["".join(row) for row in zip(*columns)] if columns else ["" for _ in rows]


def _compare_first_two(a: str, b: str) -> int:
    for ca, cb in zip(a[:2], b[:2]):
        ra, rb = _NAME_RANK.get(ca, 0), _NAME_RANK.get(cb, 0)
        if ra != rb:
            return -1 if ra < rb else 1
    return 0


def sort_of_sorting(names: Iterable[str]) -> list[str]:
    """Stably sort names by their first two letters only, capitals before small letters."""
    return sorted(names, key=functools.cmp_to_key(_compare_first_two))


def shortest_separator(names: Sequence[str]) -> str:
    """Find the shortest name ``s`` with half the names ``<= s`` and the rest ``> s``."""
    if len(names) < 2:
        raise ValueError("at least two names are required")
    ordered = sorted(names)
    half = len(ordered) // 2
    left, right = ordered[half - 1], ordered[half]

    common = min(len(left), len(right))
    i = 0
    while i < common and left[i] == right[i]:
        i += 1
    if i == common or i == len(left) - 1:
        return left

    prefix = left[:i]
    while True:
        current = left[i] if i < len(left) else "\0"
        reset = False
        if current != "Z":
            chosen = chr(ord(current) + 1)
        else:
            chosen = "Z"
            reset = True
        candidate = prefix + chosen
        if candidate >= right:
            chosen = current
            reset = True
        if not reset:
            break
        prefix += chosen
        i += 1
    return left if i >= len(left) - 1 else candidate


def oldest_and_youngest(people: Sequence[tuple[str, int, int, int]]) -> tuple[str, str]:
    """Given ``(name, day, month, year)`` entries, return the youngest and the oldest name,
    in that order."""
    if not people:
        raise ValueError("at least one person is required")
    dated = [
        (year * 10000 + month * 100 + day, index, name)
        for index, (name, day, month, year) in enumerate(people)
    ]
    youngest = max(dated)[2]
    oldest = min(dated)[2]
    return youngest, oldest


def largest_by_acceleration(boxes: Iterable[tuple[int, int, int]]) -> int:
    """Return the volume of the box with the greatest downward acceleration, larger volume on ties."""
    ranked = [(1.0 - 0.5 / h, length * width * h) for length, width, h in boxes]
    if not ranked:
        raise ValueError("at least one box is required")
    return max(ranked)[1]


def age_sort(ages: Iterable[int]) -> list[int]:
    """Counting-sort ages in ``1..100``; other values are dropped."""
    counts = [0] * 101
    for age in ages:
        if 1 <= age <= 100:
            counts[age] += 1
    return [age for age in range(1, 101) for _ in range(counts[age])]