# services/alignment.py
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

DEFAULT_TOLERANCE = 50


@dataclass(frozen=True)
class Match:
    char: str


@dataclass(frozen=True)
class Substituted:
    char: str


@dataclass(frozen=True)
class Extra:
    char: str


@dataclass(frozen=True)
class Omitted:
    # the reference character that was skipped, kept only for display
    expected: str = ""


Operation = Union[Match, Substituted, Extra, Omitted]


@dataclass(frozen=True)
class AlignmentResult:
    edit_distance: int
    operations: Tuple[Operation, ...]
    reference_end: int = 0


def _edit_table(produced: str, reference: str) -> List[List[int]]:
    m, n = len(produced), len(reference)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        ch = produced[i - 1]
        for j in range(1, n + 1):
            if ch == reference[j - 1]:
                row[j] = prev[j - 1]
            else:
                row[j] = 1 + min(prev[j], row[j - 1], prev[j - 1])
    return dp


def align(produced: str, reference: str, tolerance: int = DEFAULT_TOLERANCE) -> AlignmentResult:
    """
    Semi-global alignment of ``produced`` against a prefix of ``reference``.

    All of ``produced`` is consumed; the reference may stop at any column, so
    the untyped tail costs nothing. Only ``reference[:len(produced) + tolerance]``
    is searched.

    Ties during backtrace resolve in a fixed order: match, substitution,
    extra (vertical), omission (horizontal).
    """
    if tolerance < 0:
        raise ValueError("tolerance must be non-negative")

    produced = produced or ""
    clipped = (reference or "")[: len(produced) + tolerance]
    m = len(produced)
    dp = _edit_table(produced, clipped)

    # Among equally cheap end columns take the furthest one: "AC" against
    # "ABCDE" ends after "ABC" with B omitted, not after "A" with C extra.
    last = dp[m]
    distance = min(last)
    best_j = len(last) - 1 - last[::-1].index(distance)

    ops: List[Operation] = []
    i, j = m, best_j
    while i > 0 or j > 0:
        cost = dp[i][j]
        if i > 0 and j > 0 and produced[i - 1] == clipped[j - 1] and cost == dp[i - 1][j - 1]:
            ops.append(Match(produced[i - 1]))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and cost == dp[i - 1][j - 1] + 1:
            ops.append(Substituted(produced[i - 1]))
            i -= 1
            j -= 1
        elif i > 0 and cost == dp[i - 1][j] + 1:
            ops.append(Extra(produced[i - 1]))
            i -= 1
        elif j > 0 and cost == dp[i][j - 1] + 1:
            ops.append(Omitted(clipped[j - 1]))
            j -= 1
        else:
            raise AssertionError(f"inconsistent edit table at ({i}, {j})")

    ops.reverse()
    return AlignmentResult(edit_distance=distance, operations=tuple(ops), reference_end=best_j)


def count_operations(result: AlignmentResult) -> Dict[str, int]:
    counts = Counter(type(op).__name__.lower() for op in result.operations)
    return {k: counts.get(k, 0) for k in ("match", "substituted", "extra", "omitted")}
