"""Unit tests for the CourseCategory entity."""

from uuid import uuid4

import pytest

from unicredits.domain.academics import CourseCategory, InvalidCreditsError
from unicredits.domain.shared import ValidationError


class TestCourseCategory:
    def test_create_normalizes_fields(self):
        category = CourseCategory(
            user_id=uuid4(),
            name="  Major Required ",
            required_credits=40,
        )

        assert category.name == "Major Required"
        assert category.required_credits == 40.0
        assert category.order_index is None

    def test_rejects_negative_required_credits(self):
        with pytest.raises(InvalidCreditsError) as exc_info:
            CourseCategory(user_id=uuid4(), name="Electives", required_credits=-1)

        assert exc_info.value.details["field"] == "required_credits"

    def test_rejects_non_numeric_order_index(self):
        with pytest.raises(ValidationError):
            CourseCategory(
                user_id=uuid4(),
                name="Electives",
                required_credits=10,
                order_index="first",
            )

    def test_partial_update(self):
        category = CourseCategory(
            user_id=uuid4(),
            name="Electives",
            required_credits=10,
            order_index=2,
        )

        changed = category.update(required_credits=12)

        assert changed is True
        assert category.name == "Electives"
        assert category.required_credits == 12.0
        assert category.order_index == 2.0

    def test_update_can_clear_order_index(self):
        category = CourseCategory(
            user_id=uuid4(),
            name="Electives",
            required_credits=10,
            order_index=2,
        )

        category.update(order_index=None)

        assert category.order_index is None

    def test_update_without_changes(self):
        category = CourseCategory(user_id=uuid4(), name="Electives", required_credits=10)

        assert category.update(name=" Electives ", required_credits=10.0) is False

    def test_invalid_update_is_all_or_nothing(self):
        category = CourseCategory(user_id=uuid4(), name="Electives", required_credits=10)

        with pytest.raises(ValidationError):
            category.update(required_credits=20, name="  ")

        assert category.required_credits == 10.0
