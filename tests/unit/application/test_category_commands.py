"""Unit tests for category commands and queries."""

from uuid import uuid4

import pytest

from unicredits.application.commands.academics import (
    CreateCategoryCommand,
    CreateCourseCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from unicredits.application.queries.academics import (
    GetCategoryQuery,
    ListCategoriesQuery,
    ListCoursesQuery,
)
from unicredits.domain.academics import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    InvalidCreditsError,
)
from unicredits.domain.shared import ErrorCode, ValidationError


class TestCreateCategoryCommand:
    @pytest.mark.asyncio
    async def test_creates_category_for_current_user(self, factory, current_user):
        command = CreateCategoryCommand.from_factory(factory)

        category = await command.execute(name=" Major Required ", required_credits=40)

        assert category.name == "Major Required"
        assert category.user_id == current_user.user_id
        stored = await GetCategoryQuery.from_factory(factory).execute(category.id)
        assert stored.required_credits == 40.0

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, factory):
        command = CreateCategoryCommand.from_factory(factory)
        await command.execute(name="Electives", required_credits=10)

        with pytest.raises(CategoryAlreadyExistsError) as exc_info:
            await command.execute(name="  Electives", required_credits=12)

        assert exc_info.value.code == ErrorCode.DUPLICATE_CATEGORY

    @pytest.mark.asyncio
    async def test_same_name_allowed_for_different_users(self, factory, other_factory):
        await CreateCategoryCommand.from_factory(factory).execute("Electives", 10)

        category = await CreateCategoryCommand.from_factory(other_factory).execute(
            "Electives",
            20,
        )

        assert category.required_credits == 20.0

    @pytest.mark.asyncio
    async def test_invalid_input_stores_nothing(self, factory, store):
        command = CreateCategoryCommand.from_factory(factory)

        with pytest.raises(InvalidCreditsError):
            await command.execute(name="Electives", required_credits=-5)
        with pytest.raises(ValidationError):
            await command.execute(name="   ", required_credits=5)

        assert store.categories == {}


class TestUpdateCategoryCommand:
    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, factory):
        created = await CreateCategoryCommand.from_factory(factory).execute(
            "Electives",
            10,
            order_index=3,
        )

        updated = await UpdateCategoryCommand.from_factory(factory).execute(
            created.id,
            required_credits=14,
        )

        assert updated.name == "Electives"
        assert updated.required_credits == 14.0
        assert updated.order_index == 3.0

    @pytest.mark.asyncio
    async def test_rename_to_existing_name_conflicts(self, factory):
        create = CreateCategoryCommand.from_factory(factory)
        await create.execute("Electives", 10)
        general = await create.execute("General Education", 12)

        with pytest.raises(CategoryAlreadyExistsError):
            await UpdateCategoryCommand.from_factory(factory).execute(
                general.id,
                name="Electives",
            )

    @pytest.mark.asyncio
    async def test_renaming_to_own_name_is_allowed(self, factory):
        created = await CreateCategoryCommand.from_factory(factory).execute(
            "Electives",
            10,
        )

        updated = await UpdateCategoryCommand.from_factory(factory).execute(
            created.id,
            name=" Electives ",
        )

        assert updated.name == "Electives"

    @pytest.mark.asyncio
    async def test_unchanged_update_does_not_write(self, factory, store):
        created = await CreateCategoryCommand.from_factory(factory).execute(
            "Electives",
            10,
        )
        saves_before = store.saves

        await UpdateCategoryCommand.from_factory(factory).execute(
            created.id,
            name="Electives",
            required_credits=10,
        )

        assert store.saves == saves_before

    @pytest.mark.asyncio
    async def test_unknown_category(self, factory):
        with pytest.raises(CategoryNotFoundError):
            await UpdateCategoryCommand.from_factory(factory).execute(
                uuid4(),
                name="Anything",
            )

    @pytest.mark.asyncio
    async def test_other_users_category_is_not_found(self, factory, other_factory):
        created = await CreateCategoryCommand.from_factory(other_factory).execute(
            "Electives",
            10,
        )

        with pytest.raises(CategoryNotFoundError):
            await UpdateCategoryCommand.from_factory(factory).execute(
                created.id,
                required_credits=0,
            )


class TestDeleteCategoryCommand:
    @pytest.mark.asyncio
    async def test_delete_removes_its_courses(self, factory):
        create = CreateCategoryCommand.from_factory(factory)
        doomed = await create.execute("Electives", 10)
        kept = await create.execute("Major Required", 40)
        create_course = CreateCourseCommand.from_factory(factory)
        await create_course.execute("Film Studies", 2, doomed.id, "PENDING")
        await create_course.execute("Music", 2, doomed.id, "PF")
        survivor = await create_course.execute("Algebra", 4, kept.id, "PENDING")

        await DeleteCategoryCommand.from_factory(factory).execute(doomed.id)

        remaining = await ListCoursesQuery.from_factory(factory).execute()
        assert [c.id for c in remaining] == [survivor.id]
        with pytest.raises(CategoryNotFoundError):
            await GetCategoryQuery.from_factory(factory).execute(doomed.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_category(self, factory):
        with pytest.raises(CategoryNotFoundError):
            await DeleteCategoryCommand.from_factory(factory).execute(uuid4())

    @pytest.mark.asyncio
    async def test_cannot_delete_other_users_category(
        self,
        factory,
        other_factory,
        store,
    ):
        created = await CreateCategoryCommand.from_factory(other_factory).execute(
            "Electives",
            10,
        )

        with pytest.raises(CategoryNotFoundError):
            await DeleteCategoryCommand.from_factory(factory).execute(created.id)

        assert created.id in store.categories


class TestListCategoriesQuery:
    @pytest.mark.asyncio
    async def test_ordered_by_index_then_name_with_unindexed_last(self, factory):
        create = CreateCategoryCommand.from_factory(factory)
        await create.execute("Zeta", 1)
        await create.execute("Alpha", 1)
        await create.execute("Second", 1, order_index=2)
        await create.execute("First", 1, order_index=1)

        categories = await ListCategoriesQuery.from_factory(factory).execute()

        assert [c.name for c in categories] == ["First", "Second", "Alpha", "Zeta"]

    @pytest.mark.asyncio
    async def test_only_own_categories(self, factory, other_factory):
        await CreateCategoryCommand.from_factory(other_factory).execute("Hidden", 1)

        assert await ListCategoriesQuery.from_factory(factory).execute() == []
