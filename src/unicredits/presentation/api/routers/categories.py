"""Course category router."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from unicredits.application.commands.academics import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from unicredits.application.queries.academics import (
    GetCategoryQuery,
    ListCategoriesQuery,
)
from unicredits.presentation.api.dependencies import RepoFactory
from unicredits.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List categories",
    responses={
        200: {"description": "Categories ordered by order_index, then name"},
        401: {"description": "Not authenticated"},
    },
)
async def list_categories(factory: RepoFactory) -> list[CategoryResponse]:
    query = ListCategoriesQuery.from_factory(factory)
    categories = await query.execute()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={
        201: {"description": "Category created"},
        400: {"description": "Invalid name or credits"},
        409: {"description": "A category with this name already exists"},
    },
)
async def create_category(
    request: CategoryCreateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)
    try:
        category = await command.execute(
            name=request.name,
            required_credits=request.required_credits,
            order_index=request.order_index,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.model_validate(category)


@router.get(
    "/{category_id}",
    summary="Get a category",
    responses={
        200: {"description": "Category details"},
        404: {"description": "Category not found"},
    },
)
async def get_category(category_id: UUID, factory: RepoFactory) -> CategoryResponse:
    query = GetCategoryQuery.from_factory(factory)
    category = await query.execute(category_id)
    return CategoryResponse.model_validate(category)


@router.patch(
    "/{category_id}",
    summary="Update a category",
    responses={
        200: {"description": "Category updated"},
        400: {"description": "Invalid field value"},
        404: {"description": "Category not found"},
        409: {"description": "A category with this name already exists"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    """Apply the fields present in the body; omitted fields stay unchanged."""
    command = UpdateCategoryCommand.from_factory(factory)
    try:
        category = await command.execute(
            category_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category and its courses",
    responses={
        204: {"description": "Category and its courses deleted"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(category_id: UUID, factory: RepoFactory) -> None:
    command = DeleteCategoryCommand.from_factory(factory)
    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
