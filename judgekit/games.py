"""Game and simulation problems: card picks, board pieces, bidding, wires, snails and fuses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_DECK_SIZE = 52
_SUITS = "SHDC"
_FATIGUE_BASE = 100.0

_NEXT_DIRECTION: dict[tuple[str, str], str] = {
    ("+x", "No"): "+x", ("-x", "No"): "-x", ("+y", "No"): "+y",
    ("-y", "No"): "-y", ("+z", "No"): "+z", ("-z", "No"): "-z",
    ("+x", "+y"): "+y", ("-x", "+y"): "-y", ("+y", "+y"): "-x",
    ("-y", "+y"): "+x", ("+z", "+y"): "+z", ("-z", "+y"): "-z",
    ("+x", "-y"): "-y", ("-x", "-y"): "+y", ("+y", "-y"): "+x",
    ("-y", "-y"): "-x", ("+z", "-y"): "+z", ("-z", "-y"): "-z",
    ("+x", "+z"): "+z", ("-x", "+z"): "-z", ("+y", "+z"): "+y",
    ("-y", "+z"): "-y", ("+z", "+z"): "-x", ("-z", "+z"): "+x",
    ("+x", "-z"): "-z", ("-x", "-z"): "+z", ("+y", "-z"): "+y",
    ("-y", "-z"): "-y", ("+z", "-z"): "+x", ("-z", "-z"): "-x",
}


def next_card(princess: Sequence[int], prince: Sequence[int]) -> int:
    """Return the lowest card that guarantees the prince wins, or -1 if none does."""
    if len(princess) != 3 or len(prince) != 2:
        raise ValueError("the princess holds three cards and the prince two")
    used = set(princess) | set(prince)
    if any(not 1 <= card <= _DECK_SIZE for card in used):
        raise ValueError("cards are numbered from 1 to 52")
    p_high, p_mid, _ = sorted(princess, reverse=True)
    q_high, q_low = sorted(prince, reverse=True)

    def first_free(start: int) -> int:
        return next((c for c in range(start, _DECK_SIZE + 1) if c not in used), -1)

    if p_high > q_high:
        return first_free(p_mid + 1) if p_mid < q_low else -1
    if p_high > q_low:
        return first_free(p_high + 1) if p_mid > q_low else first_free(p_mid + 1)
    return first_free(1)


def max_pieces(piece: str, rows: int, cols: int) -> int:
    """Most non-attacking rooks (r), knights (k), kings (K) or queens (Q) on a board."""
    kind = piece[:1]
    if kind in ("r", "Q"):
        return min(rows, cols)
    if kind == "k":
        return (rows * cols + 1) // 2
    if kind == "K":
        return ((rows + 1) // 2) * ((cols + 1) // 2)
    raise ValueError(f"unknown piece {piece!r}")


def _suit_points(ranks: Sequence[str]) -> tuple[int, int, bool]:
    """High-card points, shortness points and whether the suit is stopped."""
    count = len(ranks)
    high = 0
    stopped = False
    for rank in ranks:
        if rank == "A":
            high += 4
            stopped = True
        elif rank == "K":
            if count > 1:
                high += 3
                stopped = True
            else:
                high += 2
        elif rank == "Q":
            if count > 2:
                high += 2
                stopped = True
            else:
                high += 1
        elif rank == "J" and count > 3:
            high += 1
    shortness = 0
    if count < 3:
        shortness = 1 if count == 2 else 2
    return high, shortness, stopped


def evaluate_bridge_hand(cards: Iterable[str]) -> str:
    """Return ``BID NO-TRUMP``, ``BID <suit>`` or ``PASS`` for a hand of cards like ``AS``."""
    suits: dict[str, list[str]] = {suit: [] for suit in _SUITS}
    for card in cards:
        if len(card) >= 2 and card[1] in suits:
            suits[card[1]].append(card[0])

    scores = {suit: _suit_points(ranks) for suit, ranks in suits.items()}
    high = sum(score[0] for score in scores.values())
    shortness = sum(score[1] for score in scores.values())

    if all(score[2] for score in scores.values()) and high >= 16:
        return "BID NO-TRUMP"
    if high + shortness >= 14:
        longest = max(_SUITS, key=lambda suit: (len(suits[suit]), -_SUITS.index(suit)))
        return f"BID {longest}"
    return "PASS"


def wire_direction(bends: Iterable[str]) -> str:
    """Follow a wire starting along ``+x`` through its bends and return the final direction."""
    position = "+x"
    for bend in bends:
        try:
            position = _NEXT_DIRECTION[(position, bend)]
        except KeyError:
            raise ValueError(f"unknown bend {bend!r}") from None
    return position


def snail_outcome(height: int, up: int, down: int, fatigue: int) -> tuple[str, int]:
    """Return ``("success", day)`` or ``("failure", day)`` for the climbing snail."""
    step = fatigue * up / _FATIGUE_BASE
    day = 0
    climbed = 0.0
    while True:
        day += 1
        climbed += max(up - (day - 1) * step, 0.0) - down
        if not (climbed + down <= height and climbed >= 0):
            break
    return ("success" if climbed + down > height else "failure"), day


def fuse_check(
    capacities: Sequence[int], toggles: Iterable[int], limit: int
) -> int | None:
    """Toggle 1-based devices; return the peak consumption, or None if it exceeded the limit."""
    switched_on: set[int] = set()
    total = peak = 0
    for device in toggles:
        if not 1 <= device <= len(capacities):
            raise ValueError(f"no device {device}")
        if device in switched_on:
            switched_on.remove(device)
            total -= capacities[device - 1]
        else:
            switched_on.add(device)
            total += capacities[device - 1]
        peak = max(peak, total)
    return None if peak > limit else peak


def _walk(start: tuple[int, int], corners: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    path = [tuple(start)]
    for px, py in corners:
        lx, ly = path[-1]
        if px == lx:
            step = (py > ly) - (py < ly)
            if step:
                path.extend((px, y) for y in range(ly + step, py, step))
        elif py == ly:
            step = (px > lx) - (px < lx)
            if step:
                path.extend((x, py) for x in range(lx + step, px, step))
        path.append((px, py))
    return path


def is_secure(
    masetto_start: tuple[int, int],
    leporello_start: tuple[int, int],
    leporello_corners: Iterable[tuple[int, int]],
    masetto_corners: Iterable[tuple[int, int]],
) -> bool:
    """Tell whether Leporello never meets Masetto before reaching his own final position."""
    leporello = _walk(leporello_start, leporello_corners)
    masetto = _walk(masetto_start, masetto_corners)
    last = len(leporello) - 1
    return not any(
        here == there and i != last
        for i, (here, there) in enumerate(zip(leporello, masetto))
    )


def unique_problems(sets: Sequence[Sequence[int]]) -> list[tuple[int, list[int]]]:
    """Return ``(friend, problems)`` for the friends with the most problems nobody else solved."""
    uniques: list[list[int]] = []
    for index, own in enumerate(sets):
        others = {p for j, other in enumerate(sets) if j != index for p in other}
        uniques.append(sorted(p for p in own if p not in others))
    most = max((len(u) for u in uniques), default=0)
    return [(friend, u) for friend, u in enumerate(uniques, start=1) if len(u) == most]