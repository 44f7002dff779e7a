"""Unit tests for the credit summary."""

from uuid import uuid4

import pytest

from unicredits.application.commands.academics import (
    CreateCategoryCommand,
    CreateCourseCommand,
)
from unicredits.application.commands.user import CompleteOnboardingCommand
from unicredits.application.queries.academics import CreditSummaryQuery
from unicredits.domain.academics import Course, CourseCategory
from unicredits.domain.user import UserNotFoundError


class TestCreditSummaryQuery:
    @pytest.mark.asyncio
    async def test_single_graded_course(self, factory):
        category = await CreateCategoryCommand.from_factory(factory).execute(
            "Major Required",
            40,
        )
        await CreateCourseCommand.from_factory(factory).execute(
            "Linear Algebra",
            4,
            category.id,
            "COMPLETED",
            95,
        )

        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.total_earned_credits == 4.0
        assert summary.overall_gpa == pytest.approx(3.953)
        assert summary.categories[0].earned_credits == 4.0
        assert summary.categories[0].remaining_credits == 36.0

    @pytest.mark.asyncio
    async def test_pending_course_earns_nothing(self, factory):
        category = await CreateCategoryCommand.from_factory(factory).execute(
            "Major Required",
            40,
        )
        await CreateCourseCommand.from_factory(factory).execute(
            "Linear Algebra",
            4,
            category.id,
            "PENDING",
        )

        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.total_earned_credits == 0.0
        assert summary.overall_gpa is None

    @pytest.mark.asyncio
    async def test_pass_fail_course_earns_credits_without_gpa(self, factory):
        category = await CreateCategoryCommand.from_factory(factory).execute(
            "Physical Education",
            4,
        )
        create = CreateCourseCommand.from_factory(factory)
        await create.execute("Swimming", 2, category.id, "PF")
        await create.execute("Tennis", 1, category.id, "PENDING")

        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.total_earned_credits == 2.0
        assert summary.categories[0].earned_credits == 2.0
        assert summary.categories[0].remaining_credits == 2.0
        assert summary.overall_gpa is None

    @pytest.mark.asyncio
    async def test_remaining_against_graduation_goal(self, factory):
        await CompleteOnboardingCommand.from_factory(factory).execute(20)
        category = await CreateCategoryCommand.from_factory(factory).execute(
            "Major Required",
            6,
        )
        create = CreateCourseCommand.from_factory(factory)
        await create.execute("A", 4, category.id, "COMPLETED", 100)
        await create.execute("B", 4, category.id, "COMPLETED", 60)
        await create.execute("C", 4, category.id, "PF")

        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.graduation_total_credits == 20.0
        assert summary.total_earned_credits == 12.0
        assert summary.total_remaining_credits == 8.0
        assert summary.categories[0].remaining_credits == 0.0
        assert summary.overall_gpa == pytest.approx(2.5)

    @pytest.mark.asyncio
    async def test_no_goal_means_no_remaining_total(self, factory):
        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.graduation_total_credits is None
        assert summary.total_remaining_credits is None
        assert summary.total_required_from_categories == 0.0
        assert summary.categories == []

    @pytest.mark.asyncio
    async def test_other_users_courses_are_excluded(self, factory, other_factory):
        category = await CreateCategoryCommand.from_factory(other_factory).execute(
            "Major Required",
            40,
        )
        await CreateCourseCommand.from_factory(other_factory).execute(
            "Linear Algebra",
            4,
            category.id,
            "COMPLETED",
            95,
        )

        summary = await CreditSummaryQuery.from_factory(factory).execute()

        assert summary.total_earned_credits == 0.0

    @pytest.mark.asyncio
    async def test_missing_user(self, factory, store, current_user):
        del store.users[current_user.user_id]

        with pytest.raises(UserNotFoundError):
            await CreditSummaryQuery.from_factory(factory).execute()


class TestSummarize:
    """The aggregation itself, on already loaded entities."""

    def setup_method(self):
        self.user_id = uuid4()
        self.major = CourseCategory(self.user_id, "Major", 10, order_index=1)
        self.electives = CourseCategory(self.user_id, "Electives", 5, order_index=2)

    def _course(self, category, credits, status="COMPLETED", grade=None):
        return Course(self.user_id, category.id, "Course", credits, status, grade)

    def test_pass_fail_and_ungraded_earn_credits_without_gpa_weight(self):
        courses = [
            self._course(self.major, 3, grade=70),
            self._course(self.major, 2, status="PF"),
            self._course(self.electives, 1),
        ]

        summary = CreditSummaryQuery.summarize(
            graduation_total_credits=None,
            categories=[self.major, self.electives],
            earning_courses=courses,
        )

        assert summary.total_earned_credits == 6.0
        assert summary.overall_gpa == pytest.approx(2.313)
        assert [c.earned_credits for c in summary.categories] == [5.0, 1.0]

    def test_credit_weighted_gpa_is_not_rounded(self):
        courses = [
            self._course(self.major, 1, grade=95),
            self._course(self.major, 2, grade=88),
        ]

        summary = CreditSummaryQuery.summarize(10, [self.major], courses)

        assert summary.overall_gpa == pytest.approx((3.953 + 2 * 3.73) / 3)

    def test_course_in_unknown_category_counts_only_overall(self):
        stray = Course(self.user_id, uuid4(), "Stray", 2, "COMPLETED")

        summary = CreditSummaryQuery.summarize(None, [self.major], [stray])

        assert summary.total_earned_credits == 2.0
        assert summary.categories[0].earned_credits == 0.0

    def test_remaining_never_negative(self):
        courses = [self._course(self.electives, 8)]

        summary = CreditSummaryQuery.summarize(4, [self.electives], courses)

        assert summary.total_remaining_credits == 0.0
        assert summary.categories[0].remaining_credits == 0.0

    def test_total_required_sums_categories(self):
        summary = CreditSummaryQuery.summarize(None, [self.major, self.electives], [])

        assert summary.total_required_from_categories == 15.0
        assert [c.name for c in summary.categories] == ["Major", "Electives"]

    def test_pending_courses_are_ignored(self):
        courses = [
            self._course(self.major, 3, grade=95),
            self._course(self.major, 5, status="PENDING"),
        ]

        summary = CreditSummaryQuery.summarize(None, [self.major], courses)

        assert summary.total_earned_credits == 3.0
        assert summary.overall_gpa == pytest.approx(3.953)
