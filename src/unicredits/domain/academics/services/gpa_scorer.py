"""Grade to grade-point conversion.

Maps a percentage grade (0-100) onto the 4.0 scale:

    score = 4 - 3 * (100 - grade)^2 / 1600    for grade >= 60
    score = 0.0                               for grade < 60

so 100 maps to 4.0 and 60 maps to 1.0. Scores are rounded half-up to three
decimal places, e.g. 70 gives 2.3125 which is stored as 2.313.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

MIN_GRADE = 0.0
MAX_GRADE = 100.0
PASSING_GRADE = 60.0
MAX_SCORE = 4.0

_SCORE_PRECISION = Decimal("0.001")


def _round_half_up(value: float) -> float:
    # Quantize the shortest repr so 2.3125 rounds up instead of to even
    return float(Decimal(str(value)).quantize(_SCORE_PRECISION, ROUND_HALF_UP))


def calculate_gpa_score(grade: Optional[float]) -> Optional[float]:
    """Convert a percentage grade into a grade point.

    Parameters
    ----------
    grade
        Percentage grade, or None for an ungraded course. Values outside
        [0, 100] are clamped.

    Returns
    -------
    The grade point in [0.0, 4.0], or None if no grade was given
    """
    if grade is None:
        return None

    clamped = min(max(float(grade), MIN_GRADE), MAX_GRADE)
    if clamped < PASSING_GRADE:
        return 0.0

    raw = MAX_SCORE - 3 * (MAX_GRADE - clamped) ** 2 / 1600
    return _round_half_up(raw)
