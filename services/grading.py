# services/grading.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from services.alignment import AlignmentResult, DEFAULT_TOLERANCE, align
from services.pace import NOMINAL_SECONDS, normalize

FAIL_LABEL = "不合格"


class Band(Enum):
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"
    BEGINNER = "beginner"
    NONE = "none"


@dataclass(frozen=True)
class Tier:
    band: Band
    penalty: int        # points deducted per error
    entry: int          # minimum net score to qualify for the band
    grades: Tuple[Tuple[int, str], ...]  # (minimum net, label), descending
    floor_label: str    # label when net is >= entry but below every threshold


# Evaluated top-down; the first tier whose own net score reaches ``entry`` wins.
TIERS: Tuple[Tier, ...] = (
    Tier(
        band=Band.ADVANCED,
        penalty=5,
        entry=600,
        grades=(
            (3000, "十段"),
            (2750, "九段"),
            (2500, "八段"),
            (2250, "七段"),
            (2000, "六段"),
            (1750, "五段"),
            (1500, "四段"),
            (1250, "三段"),
            (1000, "二段"),
            (800, "初段"),
            (700, "1級"),
        ),
        floor_label="準1級",
    ),
    Tier(
        band=Band.INTERMEDIATE,
        penalty=3,
        entry=400,
        grades=((500, "2級"),),
        floor_label="準2級",
    ),
    Tier(
        band=Band.BEGINNER,
        penalty=1,
        entry=200,
        grades=((300, "3級"),),
        floor_label="4級",
    ),
)


@dataclass(frozen=True)
class GradeResult:
    raw_char_count: int
    raw_error_count: int
    estimated_char_count: int
    estimated_error_count: int
    net_score: int
    grade_label: str
    band: Band = Band.NONE

    @property
    def passed(self) -> bool:
        return self.grade_label != FAIL_LABEL


def net_score(chars: int, errors: int, penalty: int) -> int:
    return chars - penalty * errors


def candidate_scores(estimated_chars: int, estimated_errors: int) -> List[Tuple[Tier, int]]:
    """Net score of each tier under that tier's own penalty weighting."""
    return [(t, net_score(estimated_chars, estimated_errors, t.penalty)) for t in TIERS]


def _label_for(tier: Tier, net: int) -> str:
    for minimum, label in tier.grades:
        if net >= minimum:
            return label
    return tier.floor_label


def grade(
    estimated_char_count: int,
    estimated_error_count: int,
    raw_char_count: int = 0,
    raw_error_count: int = 0,
) -> GradeResult:
    """
    Cascading tier test: advanced (-5/error) if its net reaches 600, else
    intermediate (-3/error) at 400, else beginner (-1/error) at 200, else fail.
    The reported net score is always the one computed by the selected tier.
    """
    if estimated_char_count < 0 or estimated_error_count < 0:
        raise ValueError("counts must be non-negative")

    for tier, net in candidate_scores(estimated_char_count, estimated_error_count):
        if net >= tier.entry:
            return GradeResult(
                raw_char_count=raw_char_count,
                raw_error_count=raw_error_count,
                estimated_char_count=estimated_char_count,
                estimated_error_count=estimated_error_count,
                net_score=net,
                grade_label=_label_for(tier, net),
                band=tier.band,
            )

    # no band reached: report under the lightest penalty
    lightest = TIERS[-1]
    return GradeResult(
        raw_char_count=raw_char_count,
        raw_error_count=raw_error_count,
        estimated_char_count=estimated_char_count,
        estimated_error_count=estimated_error_count,
        net_score=net_score(estimated_char_count, estimated_error_count, lightest.penalty),
        grade_label=FAIL_LABEL,
        band=Band.NONE,
    )


def grade_session(
    produced: str,
    reference: str,
    elapsed_seconds: float,
    nominal_seconds: float = NOMINAL_SECONDS,
    tolerance: int = DEFAULT_TOLERANCE,
) -> Tuple[GradeResult, AlignmentResult]:
    alignment = align(produced, reference, tolerance)
    raw_chars = len(produced)
    raw_errors = alignment.edit_distance
    est_chars, est_errors = normalize(raw_chars, raw_errors, elapsed_seconds, nominal_seconds)
    return grade(est_chars, est_errors, raw_chars, raw_errors), alignment


def grade_table() -> List[Tuple[str, int, int]]:
    """Rows of (label, minimum net score, penalty per error), best grade first."""
    rows: List[Tuple[str, int, int]] = []
    for tier in TIERS:
        for minimum, label in tier.grades:
            rows.append((label, minimum, tier.penalty))
        rows.append((tier.floor_label, tier.entry, tier.penalty))
    return rows
