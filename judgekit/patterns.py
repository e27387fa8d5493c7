"""Pattern puzzles: fitting two copies of a shape and iterating a parity grid."""

from __future__ import annotations

from collections.abc import Sequence

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))


def two_copies_fit(large: Sequence[str], small: Sequence[str]) -> bool:
    """Tell whether two non-overlapping translated copies of ``small``'s ``*`` cells fit on ``large``'s."""
    shape = [
        (r, c)
        for r, row in enumerate(small)
        for c, ch in enumerate(row[: len(small)])
        if ch == "*"
    ]
    if not shape:
        raise ValueError("the small pattern has no filled cell")
    r0, c0 = shape[0]
    offsets = [(r - r0, c - c0) for r, c in shape]

    size = len(large)
    stars = {
        (r, c)
        for r, row in enumerate(large)
        for c, ch in enumerate(row[:size])
        if ch == "*"
    }

    def place(anchor: tuple[int, int]) -> set[tuple[int, int]]:
        return {(anchor[0] + dr, anchor[1] + dc) for dr, dc in offsets}

    for first_anchor in sorted(stars):
        first = place(first_anchor)
        if not first <= stars:
            continue
        free = stars - first
        if any(place(second) <= free for second in stars if second >= first_anchor):
            return True
    return False


def _normalise(grid: Sequence[str]) -> tuple[str, ...]:
    rows = tuple(str(row) for row in grid)
    if any(ch not in "01" for row in rows for ch in row):
        raise ValueError("grid cells must be 0 or 1")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must have equal length")
    return rows


def successor(grid: Sequence[str]) -> tuple[str, ...]:
    """Replace each cell by the parity of its orthogonal neighbours."""
    rows = _normalise(grid)
    height = len(rows)
    return tuple(
        "".join(
            str(
                sum(
                    rows[r + dr][c + dc] == "1"
                    for dr, dc in _ORTHOGONAL
                    if 0 <= r + dr < height and 0 <= c + dc < len(row)
                )
                % 2
            )
            for c in range(len(row))
        )
        for r, row in enumerate(rows)
    )


def successive_grid_index(grid: Sequence[str]) -> int:
    """Return the largest ``i`` such that the ``i``-th successor lies outside the eventual cycle,
    or -1 when the grid itself is on it."""
    seen: dict[tuple[str, ...], int] = {}
    current = _normalise(grid)
    while current not in seen:
        seen[current] = len(seen)
        current = successor(current)
    return seen[current] - 1