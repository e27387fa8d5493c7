"""Problems over integer sequences: counting, greedy selection and linked removals."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

_WINDOW_MS = 1000
_LUCKY_SUM = 7777
_MAX_SKILL = 100


def arrows_needed(heights: Iterable[int]) -> int:
    """Count the arrows needed when an arrow pops a balloon and drops one height."""
    flying: Counter[int] = Counter()
    shots = 0
    for height in heights:
        flying[height] += 1
        if flying[height + 1] < 1:
            shots += 1
        else:
            flying[height + 1] -= 1
    return shots


def basic_programming(t: int, numbers: Iterable[int]) -> str:
    """Answer query kind ``t`` (1 to 5) about the numbers and return the output line."""
    values = list(numbers)
    if t == 1:
        seen: set[int] = set()
        for value in values:
            if _LUCKY_SUM - value in seen:
                return "Yes"
            seen.add(value)
        return "No"
    if t == 2:
        seen = set()
        for value in values:
            if value in seen:
                return "Contains duplicate"
            seen.add(value)
        return "Unique"
    if t not in (3, 4, 5):
        raise ValueError(f"unknown query kind {t}")

    ordered = sorted(values)
    n = len(ordered)
    if t == 3:
        for value, group in groupby(ordered):
            size = sum(1 for _ in group)
            if size >= 2 and size > n // 2:
                return str(value)
        return "-1"
    if t == 4:
        if not ordered:
            raise ValueError("the median of no numbers is undefined")
        mid = n // 2
        if n % 2 == 0:
            return f"{ordered[mid - 1]} {ordered[mid]}"
        return str(ordered[mid])
    return " ".join(str(value) for value in ordered if 100 <= value < 1000)


def servers_needed(requests: Iterable[int], k: int) -> int:
    """Return the servers needed when each handles ``k`` requests at once and a request lasts 1000 ms."""
    if k <= 0:
        raise ValueError("a server must handle at least one request")
    window: deque[int] = deque()
    busiest = 0
    for request in requests:
        while window and request >= window[0] + _WINDOW_MS:
            window.popleft()
        window.append(request)
        busiest = max(busiest, len(window))
    return -(-busiest // k)


def greedily_increasing(values: Iterable[int]) -> list[int]:
    """Take each value that is larger than the last one taken."""
    taken: list[int] = []
    last = -1
    for value in values:
        if value > last:
            taken.append(value)
            last = value
    return taken


def height_steps(heights: Iterable[int]) -> int:
    """Count the steps back taken when lining students up by height one at a time."""
    line: list[int] = []
    steps = 0
    for height in heights:
        position = bisect_right(line, height)
        steps += len(line) - position
        line.insert(position, height)
    return steps


def mali_sums(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """After each new pair, the smallest possible largest sum when the two lists are paired up."""
    count_a = [0] * (_MAX_SKILL + 1)
    count_b = [0] * (_MAX_SKILL + 1)
    sums: list[int] = []
    for a, b in pairs:
        if not (1 <= a <= _MAX_SKILL and 1 <= b <= _MAX_SKILL):
            raise ValueError("values must lie between 1 and 100")
        count_a[a] += 1
        count_b[b] += 1
        left_a = count_a.copy()
        left_b = count_b.copy()
        pos_a, pos_b = 1, _MAX_SKILL
        best = 0
        while pos_a <= _MAX_SKILL and pos_b > 0:
            while pos_a <= _MAX_SKILL and left_a[pos_a] == 0:
                pos_a += 1
            while pos_b > 0 and left_b[pos_b] == 0:
                pos_b -= 1
            if pos_a <= _MAX_SKILL and pos_b > 0:
                best = max(best, pos_a + pos_b)
                used = min(left_a[pos_a], left_b[pos_b])
                left_a[pos_a] -= used
                left_b[pos_b] -= used
        sums.append(best)
    return sums


def mjehuric_swaps(pieces: Iterable[int]) -> list[tuple[int, ...]]:
    """Bubble-sort the pieces and return the arrangement after every swap."""
    state = list(pieces)
    history: list[tuple[int, ...]] = []
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(state) - 1):
            if state[i] > state[i + 1]:
                state[i], state[i + 1] = state[i + 1], state[i]
                history.append(tuple(state))
                swapped = True
    return history


def is_jolly(sequence: Sequence[int]) -> bool:
    """Tell whether the gaps between neighbours are exactly ``1 .. n-1``."""
    values = list(sequence)
    n = len(values)
    if n == 0:
        return False
    gaps = {abs(b - a) for a, b in zip(values, values[1:])}
    return len(gaps) == n - 1 and all(0 < gap < n for gap in gaps)


def _halve(total: int) -> int:
    return total // 2 if total >= 0 else -(-total // 2)


def running_medians(values: Iterable[int]) -> list[int]:
    """Return the median after each value, truncating the mean of the middle pair."""
    ordered: list[int] = []
    medians: list[int] = []
    for value in values:
        insort(ordered, value)
        mid = len(ordered) // 2
        if len(ordered) % 2:
            medians.append(ordered[mid])
        else:
            medians.append(_halve(ordered[mid - 1] + ordered[mid]))
    return medians


def count_pivots(values: Iterable[int]) -> int:
    """Count values no smaller than everything before and no larger than everything after."""
    items = list(values)
    prefix_max = list(accumulate(items, max, initial=-1))[1:]
    count = 0
    suffix_min: int | None = None
    for value, highest in zip(reversed(items), reversed(prefix_max)):
        suffix_min = value if suffix_min is None else min(suffix_min, value)
        if highest <= value <= suffix_min:
            count += 1
    return count


def starting_grid(moves: Iterable[tuple[int, int]]) -> list[int] | None:
    """Rebuild the starting grid from ``(car, places_gained)`` in finishing order, or None."""
    entries = list(moves)
    n = len(entries)
    grid: list[int | None] = [None] * n
    for finish, (car, gained) in enumerate(entries, start=1):
        start = finish + gained
        if not 1 <= start <= n or grid[start - 1] is not None:
            return None
        grid[start - 1] = car
    return [car for car in grid if car is not None]


def arrange_cards(cards: Iterable[tuple[str, str]]) -> list[str]:
    """Place each card by counting free slots as the letters of its word are spelled."""
    entries = list(cards)
    slots: list[str | None] = [None] * len(entries)
    position = -1
    for card, word in entries:
        remaining = len(word)
        if remaining == 0:
            raise ValueError("every card needs a non-empty word")
        while remaining:
            position = (position + 1) % len(slots)
            if slots[position] is None:
                remaining -= 1
        slots[position] = card
    return [card for card in slots if card is not None]


def bombardments(
    soldiers: int, reports: Iterable[tuple[int, int]]
) -> list[tuple[int | None, int | None]]:
    """For each killed range, the nearest survivors to its left and right (None if none)."""
    left = list(range(-1, soldiers + 1))
    right = list(range(1, soldiers + 3))
    survivors: list[tuple[int | None, int | None]] = []
    for low, high in reports:
        if not 1 <= low <= high <= soldiers:
            raise ValueError(f"invalid range {low}..{high}")
        before = left[low]
        after = right[high]
        right[before] = after
        left[after] = before
        survivors.append((before if before >= 1 else None, after if after <= soldiers else None))
    return survivors