"""Sentinel for partial updates.

Distinguishes "field not supplied" from an explicit None, which is a
meaningful value for nullable fields such as a grade or an order index.
"""

from enum import Enum
from typing import Final


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET
UnsetType = _Unset
