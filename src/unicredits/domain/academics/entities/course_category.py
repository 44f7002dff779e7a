"""Course category entity."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from unicredits.domain.academics.validation import (
    normalize_name,
    validate_credits,
    validate_order_index,
)
from unicredits.domain.shared.time import utc_now
from unicredits.domain.shared.unset import UNSET


class CourseCategory:
    """
    A user-defined bucket of required credits (e.g. "Major Electives").

    Each category belongs to exactly one user. Names are unique per user;
    that rule is checked by the commands and enforced by a unique constraint
    at the persistence level.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: str,
        required_credits: float,
        order_index: Optional[float] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize a category.

        Parameters
        ----------
        user_id
            Owner user ID
        name
            Display name, trimmed; must not be empty
        required_credits
            Credits needed to satisfy this category (>= 0)
        order_index
            Optional display position; categories without one sort last
        id
            Category ID (generated if not provided, used for reconstitution)
        """
        self._user_id = user_id
        self._name = normalize_name(name)
        self._required_credits = validate_credits(
            required_credits,
            field="required_credits",
        )
        self._order_index = validate_order_index(order_index)
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        name: str,
        required_credits: float,
        order_index: Optional[float],
        created_at: datetime,
        updated_at: datetime,
    ) -> "CourseCategory":
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            required_credits=required_credits,
            order_index=order_index,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def required_credits(self) -> float:
        return self._required_credits

    @property
    def order_index(self) -> Optional[float]:
        return self._order_index

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(
        self,
        name: Any = UNSET,
        required_credits: Any = UNSET,
        order_index: Any = UNSET,
    ) -> bool:
        """Apply the supplied fields and report whether anything changed.

        All fields are validated before any of them is applied.
        """
        new_name = self._name if name is UNSET else normalize_name(name)
        new_required = (
            self._required_credits
            if required_credits is UNSET
            else validate_credits(required_credits, field="required_credits")
        )
        new_order = (
            self._order_index
            if order_index is UNSET
            else validate_order_index(order_index)
        )

        changed = (new_name, new_required, new_order) != (
            self._name,
            self._required_credits,
            self._order_index,
        )
        if changed:
            self._name = new_name
            self._required_credits = new_required
            self._order_index = new_order
            self._updated_at = utc_now()
        return changed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CourseCategory):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"CourseCategory(id={self._id}, name={self._name!r}, "
            f"required_credits={self._required_credits})"
        )
