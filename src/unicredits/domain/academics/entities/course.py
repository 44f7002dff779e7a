"""Course entity."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from unicredits.domain.academics.exceptions import GradeRequiresCompletedError
from unicredits.domain.academics.services.gpa_scorer import calculate_gpa_score
from unicredits.domain.academics.validation import (
    normalize_name,
    validate_credits,
    validate_grade,
)
from unicredits.domain.academics.value_objects import CourseStatus
from unicredits.domain.shared.time import utc_now
from unicredits.domain.shared.unset import UNSET


class Course:
    """
    A single academic record: credits in a category, a status, maybe a grade.

    The grade may only be set while the status is COMPLETED. The GPA score is
    never accepted from outside; it is always derived from the grade, so
    (status, grade, gpa_score) can only be one of:

    - PENDING / PF: grade None, gpa_score None
    - COMPLETED without grade: grade None, gpa_score None
    - COMPLETED with grade: gpa_score = calculate_gpa_score(grade)
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        category_id: UUID,
        name: str,
        credits: float,
        status: Any = CourseStatus.PENDING,
        grade: Optional[float] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._user_id = user_id
        self._category_id = category_id
        self._name = normalize_name(name)
        self._credits = validate_credits(credits)
        self._status, self._grade = self._check_grading(
            CourseStatus.parse(status),
            validate_grade(grade),
        )
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        category_id: UUID,
        name: str,
        credits: float,
        status: CourseStatus,
        grade: Optional[float],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Course":
        return cls(
            id=id,
            user_id=user_id,
            category_id=category_id,
            name=name,
            credits=credits,
            status=status,
            grade=grade,
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
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> float:
        return self._credits

    @property
    def status(self) -> CourseStatus:
        return self._status

    @property
    def grade(self) -> Optional[float]:
        return self._grade

    @property
    def gpa_score(self) -> Optional[float]:
        return calculate_gpa_score(self._grade)

    @property
    def is_completed(self) -> bool:
        return self._status == CourseStatus.COMPLETED

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @staticmethod
    def _check_grading(
        status: CourseStatus,
        grade: Optional[float],
    ) -> tuple[CourseStatus, Optional[float]]:
        if grade is not None and status != CourseStatus.COMPLETED:
            raise GradeRequiresCompletedError(status.value)
        return status, grade

    def resolve_grading(
        self,
        status: Any = UNSET,
        grade: Any = UNSET,
    ) -> tuple[CourseStatus, Optional[float]]:
        """Compute the (status, grade) pair a partial update would produce.

        - grade only: checked against the current status
        - status only: leaving COMPLETED drops the grade, staying keeps it
        - both: checked together, a grade needs COMPLETED

        Raises a ValidationError subclass without touching the course.
        """
        new_status = self._status if status is UNSET else CourseStatus.parse(status)

        if grade is UNSET:
            new_grade = self._grade if new_status == CourseStatus.COMPLETED else None
            return new_status, new_grade

        return self._check_grading(new_status, validate_grade(grade))

    def update(  # NOQA: PLR0913
        self,
        name: Any = UNSET,
        credits: Any = UNSET,
        category_id: Any = UNSET,
        status: Any = UNSET,
        grade: Any = UNSET,
    ) -> bool:
        """Apply the supplied fields and report whether anything changed.

        Every field is validated before any of them is applied, so a failed
        update leaves the course untouched.
        """
        new_name = self._name if name is UNSET else normalize_name(name)
        new_credits = self._credits if credits is UNSET else validate_credits(credits)
        new_category = self._category_id if category_id is UNSET else category_id
        new_status, new_grade = self.resolve_grading(status=status, grade=grade)

        before = (
            self._name,
            self._credits,
            self._category_id,
            self._status,
            self._grade,
        )
        after = (new_name, new_credits, new_category, new_status, new_grade)
        if after == before:
            return False

        (
            self._name,
            self._credits,
            self._category_id,
            self._status,
            self._grade,
        ) = after
        self._updated_at = utc_now()
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Course(id={self._id}, name={self._name!r}, "
            f"status={self._status.value}, grade={self._grade})"
        )
