"""Contest bookkeeping: scoreboards, first-solve tracking, proposals and tallies."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

_WRONG_PENALTY = 20


def scoreboard(
    submissions: Iterable[tuple[int, int, int, str]],
) -> list[tuple[int, int, int]]:
    """Rank ``(contestant, problem, time, verdict)`` submissions.

    Returns ``(contestant, solved, penalty)`` rows, most solved first, then
    lowest penalty, then contestant number. Every contestant who submitted
    appears, even without a solution.
    """
    problem_time: defaultdict[tuple[int, int], int] = defaultdict(int)
    totals: dict[int, tuple[int, int]] = {}
    for contestant, problem, time, verdict in submissions:
        key = (contestant, problem)
        if problem_time[key] > 0:
            continue
        totals.setdefault(contestant, (0, 0))
        if verdict == "I":
            problem_time[key] -= _WRONG_PENALTY
        elif verdict == "C":
            problem_time[key] = -problem_time[key] + time
            solved, penalty = totals[contestant]
            totals[contestant] = (solved + 1, penalty + problem_time[key])
    rows = [(contestant, solved, penalty) for contestant, (solved, penalty) in totals.items()]
    rows.sort(key=lambda row: (-row[1], row[2], row[0]))
    return rows


def last_blood(
    problem_count: int,
    submissions: Iterable[tuple[int, int, str, str]],
) -> list[tuple[str, int | None, int | None]]:
    """For each problem, the time and team of the last first-accepted solution.

    Submissions are ``(time, team, problem_letter, verdict)``; a verdict
    starting with ``Y`` is an accept. Unsolved problems give ``None``.
    """
    accepted: defaultdict[str, set[int]] = defaultdict(set)
    latest: dict[str, tuple[int, int]] = {}
    for time, team, problem, verdict in submissions:
        if not verdict.startswith("Y") or team in accepted[problem]:
            continue
        accepted[problem].add(team)
        if problem not in latest or latest[problem][0] <= time:
            latest[problem] = (time, team)

    rows: list[tuple[str, int | None, int | None]] = []
    for index in range(problem_count):
        letter = chr(ord("A") + index)
        if letter in latest:
            time, team = latest[letter]
            rows.append((letter, time, team))
        else:
            rows.append((letter, None, None))
    return rows


def best_proposal(proposals: Iterable[tuple[str, float, int]]) -> str:
    """Pick the ``(name, price, requirements_met)`` proposal meeting the most requirements,
    then the cheapest, then the earliest."""
    best_name: str | None = None
    best_met = -1
    best_price = -1.0
    for name, price, met in proposals:
        if met > best_met or (met == best_met and price < best_price):
            best_name, best_met, best_price = name, met, price
    if best_name is None:
        raise ValueError("at least one proposal is required")
    return best_name


def gift_balances(
    names: Sequence[str],
    gifts: Iterable[tuple[str, int, Sequence[str]]],
) -> list[tuple[str, int]]:
    """Net gain of each person after ``(giver, amount, recipients)`` gifts.

    The amount is split evenly in whole units; the remainder stays with the giver.
    """
    balance: defaultdict[str, int] = defaultdict(int)
    for giver, amount, recipients in gifts:
        count = len(recipients)
        share = amount // count if count else 0
        balance[giver] -= share * count
        for recipient in recipients:
            balance[recipient] += share
    return [(name, balance[name]) for name in names]


def flag_quiz_best(answers: Sequence[str]) -> list[str]:
    """Return the answers whose worst-case number of changed comma-separated parts is smallest."""
    parts = [[token for token in answer.split(",") if token] for answer in answers]
    worst: list[int] = []
    for i, mine in enumerate(parts):
        worst.append(
            max(
                (
                    sum(1 for a, b in zip(mine, other) if a != b)
                    for j, other in enumerate(parts)
                    if j != i
                ),
                default=0,
            )
        )
    fewest = min(worst, default=0)
    return [answer for answer, changes in zip(answers, worst) if changes == fewest]