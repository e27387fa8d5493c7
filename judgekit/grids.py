"""Grid puzzles: sliding tiles, beams, knights, matrix edits and cellular updates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_KNIGHT_MOVES = ((-2, -1), (-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2))
_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_TRANSFORMATIONS = (
    "was preserved.",
    "was rotated 90 degrees.",
    "was rotated 180 degrees.",
    "was rotated 270 degrees.",
    "was reflected vertically.",
    "was reflected vertically and rotated 90 degrees.",
    "was reflected vertically and rotated 180 degrees.",
    "was reflected vertically and rotated 270 degrees.",
    "was improperly transformed.",
)


def _rotate_clockwise(mat: list[list[int]]) -> list[list[int]]:
    return [list(row) for row in zip(*mat[::-1])]


def _rotate_anticlockwise(mat: list[list[int]]) -> list[list[int]]:
    return [list(row) for row in zip(*mat)][::-1]


def _slide_row_left(row: Sequence[int]) -> list[int]:
    packed: list[int] = []
    merged = False
    for value in row:
        if not value:
            continue
        if packed and not merged and packed[-1] == value:
            packed[-1] = 2 * value
            merged = True
        else:
            packed.append(value)
            merged = False
    return packed + [0] * (len(row) - len(packed))


def slide_2048(board: Sequence[Sequence[int]], direction: int) -> list[list[int]]:
    """Slide a square 2048 board: 0 left, 1 up, 2 right, 3 down."""
    if direction not in range(4):
        raise ValueError("direction must be 0, 1, 2 or 3")
    grid = [list(row) for row in board]
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("board must be square")
    for _ in range(direction):
        grid = _rotate_anticlockwise(grid)
    grid = [_slide_row_left(row) for row in grid]
    for _ in range(direction):
        grid = _rotate_clockwise(grid)
    return grid


def funhouse_exit(room: Sequence[str]) -> list[str]:
    """Follow the beam from the ``*`` door through the mirrors and mark the exit wall with ``&``."""
    rows = [list(row) for row in room]
    height = len(rows)
    start: tuple[int, int] | None = None
    dr = dc = 0
    for i, row in enumerate(rows):
        for j, ch in enumerate(row):
            if ch == "*":
                start = (i, j)
                if i == 0:
                    dr = 1
                elif i == height - 1:
                    dr = -1
                elif j == 0:
                    dc = 1
                else:
                    dc = -1
    if start is None:
        raise ValueError("the room has no entrance")

    r, c = start
    while True:
        r += dr
        c += dc
        if not (0 <= r < height and 0 <= c < len(rows[r])):
            raise ValueError("the beam left the room")
        cell = rows[r][c]
        if cell == "/":
            if dr:
                dr, dc = 0, -dr
            elif dc:
                dr, dc = -dc, 0
        elif cell == "\\":
            if dr:
                dr, dc = 0, dr
            elif dc:
                dr, dc = dc, 0
        elif cell == "x":
            break
    rows[r][c] = "&"
    return ["".join(row) for row in rows]


def knights_valid(board: Sequence[str]) -> bool:
    """Tell whether a 5x5 board holds exactly nine knights, none attacking another."""
    knights = {
        (i, j)
        for i, line in enumerate(board[:5])
        for j, ch in enumerate(line[:5])
        if ch == "k"
    }
    for i, j in knights:
        if any((i + di, j + dj) in knights for di, dj in _KNIGHT_MOVES):
            return False
    return len(knights) == 9


def apply_matrix_operations(
    matrix: Sequence[str], operations: Iterable[Sequence]
) -> list[str]:
    """Apply digit-matrix operations in order and return the resulting rows.

    Each operation is a sequence whose first item names it: ``row a b`` and
    ``col a b`` swap 1-based rows or columns, ``inc`` and ``dec`` shift every
    digit modulo 10, anything else transposes.
    """
    grid = [list(row) for row in matrix]
    for operation in operations:
        kind = str(operation[0])[:1]
        if kind == "r":
            a, b = operation[1] - 1, operation[2] - 1
            grid[a], grid[b] = grid[b], grid[a]
        elif kind == "c":
            a, b = operation[1] - 1, operation[2] - 1
            for row in grid:
                row[a], row[b] = row[b], row[a]
        elif kind == "i":
            grid = [[str((int(ch) + 1) % 10) for ch in row] for row in grid]
        elif kind == "d":
            grid = [[str((int(ch) + 9) % 10) for ch in row] for row in grid]
        else:
            grid = [list(column) for column in zip(*grid)]
    return ["".join(row) for row in grid]


def war_of_kingdoms(
    n: int, grid: Sequence[Sequence[int]], rounds: int
) -> list[list[int]]:
    """Run ``rounds`` battles: a cell of heir ``v`` falls to a neighbouring heir ``v - 1 (mod n)``."""
    current = [list(row) for row in grid]
    for _ in range(rounds):
        height = len(current)
        following: list[list[int]] = []
        for r, row in enumerate(current):
            new_row: list[int] = []
            for c, value in enumerate(row):
                rival = (value + n - 1) % n
                attacked = any(
                    0 <= r + dr < height
                    and 0 <= c + dc < len(current[r + dr])
                    and current[r + dr][c + dc] == rival
                    for dr, dc in _ORTHOGONAL
                )
                new_row.append(rival if attacked else value)
            following.append(new_row)
        current = following
    return current


def _rotate_text(rows: list[str]) -> list[str]:
    return ["".join(row) for row in zip(*rows[::-1])]


def classify_transformation(original: Sequence[str], transformed: Sequence[str]) -> int:
    """Return 0-3 for rotations, 4-7 for a vertical reflection then rotation, 8 for neither."""
    current = list(original)
    target = list(transformed)
    step = 0
    while current != target and step < 8:
        step += 1
        current = _rotate_text(current)
        if step == 4:
            current = current[::-1]
    return step


def describe_transformation(
    number: int, original: Sequence[str], transformed: Sequence[str]
) -> str:
    """Describe how pattern ``number`` was transformed."""
    outcome = _TRANSFORMATIONS[classify_transformation(original, transformed)]
    return f"Pattern {number} {outcome}"


def tree_rings(tree: Sequence[str]) -> list[str]:
    """Number each ``T`` cell by its ring depth and render the rows with dot padding."""
    height = len(tree)
    width = max((len(row) for row in tree), default=0)
    rings = [[0] * (width + 2) for _ in range(height + 2)]
    total = -1
    while True:
        previous = total
        for i in range(1, height + 1):
            row = tree[i - 1]
            for j in range(1, width + 1):
                if j - 1 < len(row) and row[j - 1] == "T":
                    value = min(
                        rings[i - 1][j], rings[i][j - 1], rings[i + 1][j], rings[i][j + 1]
                    ) + 1
                    rings[i][j] = value
                    total = max(total, value)
        if total == previous:
            break

    cell_width = 2 if total < 10 else 3
    return [
        "".join(
            "." * cell_width if value == 0 else ("." + str(value)).rjust(cell_width, ".")
            for value in row[1 : width + 1]
        )
        for row in rings[1 : height + 1]
    ]


def convolve(
    image: Sequence[Sequence[int]], kernel: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the valid-region convolution of ``image`` with the flipped ``kernel``."""
    if not kernel or not kernel[0]:
        raise ValueError("kernel must not be empty")
    kernel_rows, kernel_cols = len(kernel), len(kernel[0])
    image_cols = len(image[0]) if image else 0
    flipped = [list(row[::-1]) for row in kernel[::-1]]
    return [
        [
            sum(
                a * b
                for image_row, kernel_row in zip(image[x : x + kernel_rows], flipped)
                for a, b in zip(image_row[y : y + kernel_cols], kernel_row)
            )
            for y in range(image_cols - kernel_cols + 1)
        ]
        for x in range(len(image) - kernel_rows + 1)
    ]


def dance_moves(lines: Sequence[str]) -> int:
    """Count dance moves: one plus the number of columns without a ``$`` in any line."""
    if not lines:
        raise ValueError("at least one line is required")
    width = len(lines[0])
    busy = {j for line in lines for j, ch in enumerate(line[:width]) if ch == "$"}
    return width - len(busy) + 1


def flowshop_finish_times(times: Sequence[Sequence[int]]) -> list[int]:
    """Return when each job leaves the last stage of a permutation flow shop."""
    finish: list[int] = []
    above: list[int] = []
    for row in times:
        if not above:
            above = [0] * len(row)
        current: list[int] = []
        left = 0
        for duration, upper in zip(row, above):
            left = duration + max(left, upper)
            current.append(left)
        above = current
        if current:
            finish.append(current[-1])
    return finish