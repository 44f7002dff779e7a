"""Credit summary query - rolls categories and credit-earning courses into totals.

The summary is recomputed from the store on every call:

1. load the user's graduation goal, categories and credit-earning
   (COMPLETED or PF) courses
2. start each category at earned 0 / remaining = required
3. add every credit-earning course's credits to the overall total and to its
   category; graded courses also add credits * gpa_score to the GPA sums
4. overall GPA = weighted points / graded credits (None without graded
   credits)
5. overall remaining = max(0, goal - earned), or None when no goal is set

PF and ungraded completed courses earn credits but never weigh into the GPA.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from unicredits.domain.academics.entities import Course, CourseCategory
from unicredits.domain.academics.repositories import (
    CourseCategoryRepository,
    CourseRepository,
)
from unicredits.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class CategoryCreditSummary:
    """Credit progress within one category."""

    id: UUID
    name: str
    required_credits: float
    earned_credits: float = 0.0
    remaining_credits: float = 0.0

    @classmethod
    def start(cls, category: CourseCategory) -> CategoryCreditSummary:
        return cls(
            id=category.id,
            name=category.name,
            required_credits=category.required_credits,
            earned_credits=0.0,
            remaining_credits=category.required_credits,
        )

    def add(self, credits: float) -> None:
        self.earned_credits += credits
        self.remaining_credits = max(0.0, self.required_credits - self.earned_credits)


@dataclass
class CreditSummary:
    """Overall credit and GPA progress of a user."""

    graduation_total_credits: Optional[float]
    total_required_from_categories: float
    total_earned_credits: float
    total_remaining_credits: Optional[float]
    overall_gpa: Optional[float]
    categories: list[CategoryCreditSummary] = field(default_factory=list)


class CreditSummaryQuery:
    """Compute the current user's credit summary."""

    def __init__(
        self,
        user_repository: UserRepository,
        category_repository: CourseCategoryRepository,
        course_repository: CourseRepository,
        current_user: CurrentUser,
    ):
        self._user_repo = user_repository
        self._category_repo = category_repository
        self._course_repo = course_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreditSummaryQuery:
        return cls(
            user_repository=factory.user_repository(),
            category_repository=factory.category_repository(),
            course_repository=factory.course_repository(),
            current_user=factory.current_user,
        )

    async def execute(self) -> CreditSummary:
        # One AsyncSession cannot run statements concurrently, so read in turn
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)
        categories = await self._category_repo.find_all()
        earning = await self._course_repo.find_credit_earning()

        summary = self.summarize(
            graduation_total_credits=user.graduation_total_credits,
            categories=categories,
            earning_courses=earning,
        )
        logger.debug(
            "Summary for %s: earned=%s gpa=%s",
            self._user_id,
            summary.total_earned_credits,
            summary.overall_gpa,
        )
        return summary

    @staticmethod
    def summarize(
        graduation_total_credits: Optional[float],
        categories: list[CourseCategory],
        earning_courses: list[Course],
    ) -> CreditSummary:
        """Aggregate already loaded data. Pure; does not touch the store."""
        by_category = {c.id: CategoryCreditSummary.start(c) for c in categories}
        total_required = sum(c.required_credits for c in categories)

        total_earned = 0.0
        weighted_points = 0.0
        graded_credits = 0.0

        for course in earning_courses:
            if not course.status.earns_credits:
                continue
            total_earned += course.credits

            accumulator = by_category.get(course.category_id)
            if accumulator is not None:
                accumulator.add(course.credits)

            gpa_score = course.gpa_score
            if gpa_score is not None:
                weighted_points += course.credits * gpa_score
                graded_credits += course.credits

        overall_gpa = weighted_points / graded_credits if graded_credits > 0 else None

        total_remaining = (
            max(0.0, graduation_total_credits - total_earned)
            if graduation_total_credits is not None
            else None
        )

        return CreditSummary(
            graduation_total_credits=graduation_total_credits,
            total_required_from_categories=float(total_required),
            total_earned_credits=total_earned,
            total_remaining_credits=total_remaining,
            overall_gpa=overall_gpa,
            categories=list(by_category.values()),
        )
