from datetime import datetime
from typing import Any, Optional, Union
from uuid import UUID, uuid4

from unicredits.domain.academics.validation import validate_credits
from unicredits.domain.shared.time import utc_now
from unicredits.domain.user.value_objects import Email


class User:
    """
    User aggregate root.

    Users only come into existence through verified registration. The
    graduation goal is set by onboarding and may be overwritten by running
    onboarding again.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        has_completed_setup: bool = False,
        graduation_total_credits: Optional[float] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id if id is not None else uuid4()
        self._has_completed_setup = has_completed_setup
        self._graduation_total_credits = graduation_total_credits
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def has_completed_setup(self) -> bool:
        return self._has_completed_setup

    @property
    def graduation_total_credits(self) -> Optional[float]:
        return self._graduation_total_credits

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def complete_onboarding(self, graduation_total_credits: Any) -> None:
        """Set the graduation goal and mark setup as done.

        Raises
        ------
        InvalidCreditsError
            If the goal is negative or not a finite number
        """
        self._graduation_total_credits = validate_credits(
            graduation_total_credits,
            field="graduation_total_credits",
        )
        self._has_completed_setup = True
        self._updated_at = utc_now()

    @classmethod
    def create(cls, email: Union[str, Email]) -> "User":
        return cls(email=email)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        has_completed_setup: bool,
        graduation_total_credits: Optional[float],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            has_completed_setup=has_completed_setup,
            graduation_total_credits=graduation_total_credits,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
