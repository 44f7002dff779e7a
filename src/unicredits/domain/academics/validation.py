"""Field rules shared by the category and course entities.

Each helper returns the normalized value or raises a ValidationError
subclass. Nothing here touches persistence.
"""

import math
from numbers import Real
from typing import Any, Optional

from unicredits.domain.academics.exceptions import (
    InvalidCreditsError,
    InvalidGradeError,
)
from unicredits.domain.academics.services.gpa_scorer import MAX_GRADE, MIN_GRADE
from unicredits.domain.shared.exceptions import ValidationError


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful credit or grade
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


def normalize_name(value: Any, field: str = "name") -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"'{field}' must be a non-empty string"
        raise ValidationError(msg, details={"field": field})
    return value.strip()


def validate_credits(value: Any, field: str = "credits") -> float:
    if not _is_number(value) or value < 0:
        raise InvalidCreditsError(value, field=field)
    return float(value)


def validate_grade(value: Any) -> Optional[float]:
    if value is None:
        return None
    if not _is_number(value) or not MIN_GRADE <= value <= MAX_GRADE:
        raise InvalidGradeError(value)
    return float(value)


def validate_order_index(value: Any) -> Optional[float]:
    if value is None:
        return None
    if not _is_number(value):
        msg = f"'order_index' must be a number, got {value!r}"
        raise ValidationError(msg, details={"field": "order_index"})
    return float(value)
