# services/pace.py
from typing import Tuple
import math

NOMINAL_SECONDS = 600


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def pace_multiplier(elapsed_seconds: float, nominal_seconds: float = NOMINAL_SECONDS) -> float:
    # zero elapsed time yields a zero estimate instead of a division error
    if elapsed_seconds <= 0:
        return 0.0
    return nominal_seconds / elapsed_seconds


def normalize(
    raw_char_count: int,
    raw_error_count: int,
    elapsed_seconds: float,
    nominal_seconds: float = NOMINAL_SECONDS,
) -> Tuple[int, int]:
    """
    Extrapolate counts observed over ``elapsed_seconds`` to ``nominal_seconds``.
    Returns (estimated_char_count, estimated_error_count).
    """
    if raw_char_count < 0 or raw_error_count < 0:
        raise ValueError("counts must be non-negative")
    k = pace_multiplier(elapsed_seconds, nominal_seconds)
    return round_half_up(raw_char_count * k), round_half_up(raw_error_count * k)
